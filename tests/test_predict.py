import math

import numpy as np
import pytest

from house_prices.config import EXAMPLE_HOUSE
from house_prices.data.load_data import HousePrice, iter_records
from house_prices.errors import PredictionError
from house_prices.models.predict import predict_frame, predict_price, predict_records


def test_example_house_prediction_is_positive_and_finite(trained_model):
    price = predict_price(trained_model, EXAMPLE_HOUSE)

    assert math.isfinite(price)
    assert price > 0


def test_example_house_as_record_matches_mapping(trained_model):
    house = HousePrice(LotArea=8450, YearRemodAdd=2003, YrSold=2008, GrLivArea=1710)

    assert predict_price(trained_model, house) == predict_price(trained_model, EXAMPLE_HOUSE)


def test_file_and_code_records_predict_identically(trained_model, holdout_df):
    from_file = holdout_df.iloc[[0]]
    record = next(iter_records(holdout_df))
    built = {
        "LotArea": int(record.LotArea),
        "YearRemodAdd": int(record.YearRemodAdd),
        "YrSold": int(record.YrSold),
        "GrLivArea": int(record.GrLivArea),
    }

    expected = predict_frame(trained_model, holdout_df)[0]
    assert predict_price(trained_model, from_file) == expected
    assert predict_price(trained_model, holdout_df.iloc[0]) == expected
    assert predict_price(trained_model, record) == expected
    assert predict_price(trained_model, built) == expected


def test_missing_field_raises(trained_model):
    record = {k: v for k, v in EXAMPLE_HOUSE.items() if k != "GrLivArea"}

    with pytest.raises(PredictionError, match="GrLivArea"):
        predict_price(trained_model, record)


def test_record_with_unset_feature_raises(trained_model):
    with pytest.raises(PredictionError, match="LotArea"):
        predict_price(trained_model, HousePrice(Id="9", YearRemodAdd=2003, YrSold=2008, GrLivArea=1710))


def test_non_numeric_field_raises(trained_model):
    record = dict(EXAMPLE_HOUSE, YrSold="last year")

    with pytest.raises(PredictionError, match="YrSold"):
        predict_price(trained_model, record)


def test_frame_without_feature_column_raises(trained_model, holdout_df):
    with pytest.raises(PredictionError, match="missing required fields"):
        predict_price(trained_model, holdout_df.iloc[[0]].drop(columns=["LotArea"]))


def test_multi_row_frame_is_not_a_single_record(trained_model, holdout_df):
    with pytest.raises(PredictionError):
        predict_price(trained_model, holdout_df.iloc[:2])


def test_predict_records_returns_id_and_price(trained_model, holdout_df):
    out = predict_records(trained_model, holdout_df)

    assert list(out.columns) == ["Id", "SalePrice"]
    assert len(out) == len(holdout_df)
    assert out["Id"].tolist() == holdout_df["Id"].tolist()
    assert np.isfinite(out["SalePrice"]).all()


def test_predict_records_on_empty_frame(trained_model, holdout_df):
    out = predict_records(trained_model, holdout_df.iloc[0:0])

    assert len(out) == 0
