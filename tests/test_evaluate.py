import math

import pytest

from house_prices.errors import PredictionError
from house_prices.models.evaluate import evaluate_model, evaluate_test_set


def test_metrics_are_in_valid_ranges(trained_model, holdout_df):
    metrics = evaluate_model(trained_model, holdout_df)

    assert metrics.n_rows == len(holdout_df)
    assert metrics.rms >= 0
    assert metrics.r_squared <= 1
    assert metrics.rms == pytest.approx(math.sqrt(metrics.l2))
    assert metrics.l1 <= metrics.rms


def test_model_fits_synthetic_prices_reasonably(trained_model, holdout_df):
    assert evaluate_model(trained_model, holdout_df).r_squared > 0.5


def test_evaluation_does_not_refit_normalization(trained_model, holdout_df):
    scaler = trained_model.pipeline.named_steps["features"].named_transformers_["3_LotArea"]
    before = (scaler.data_min_.copy(), scaler.data_max_.copy())

    evaluate_model(trained_model, holdout_df.assign(LotArea=holdout_df["LotArea"] * 10))

    assert scaler.data_min_[0] == before[0][0]
    assert scaler.data_max_[0] == before[1][0]


def test_single_row_has_no_r_squared(trained_model, holdout_df):
    metrics = evaluate_model(trained_model, holdout_df.iloc[[0]])

    assert math.isnan(metrics.r_squared)
    assert metrics.rms >= 0


def test_empty_dataset_raises(trained_model, holdout_df):
    with pytest.raises(PredictionError, match="empty"):
        evaluate_model(trained_model, holdout_df.iloc[0:0])


def test_dataset_without_label_raises(trained_model, holdout_df):
    with pytest.raises(PredictionError, match="SalePrice"):
        evaluate_model(trained_model, holdout_df.drop(columns=["SalePrice"]))


def test_metrics_summary_mentions_rms_and_r_squared(trained_model, holdout_df):
    summary = evaluate_model(trained_model, holdout_df).summary()

    assert "Rms = " in summary
    assert "RSquared = " in summary


def test_evaluate_test_set_prints_metrics(trained_model, holdout_csv, capsys):
    metrics = evaluate_test_set(trained_model, holdout_csv)

    out = capsys.readouterr().out
    assert "Evaluating model" in out
    assert f"Rms = {metrics.rms}" in out
