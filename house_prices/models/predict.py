"""
House Prices - Prediction Helpers

Provides:
- `load_model(path)` to read a persisted `TrainedModel`.
- `predict_price(model, record)` returning a float sale price for one record,
  whether it was loaded from a CSV file or built in code.
- `predict_records(model, df)` returning the Id and predicted SalePrice of
  every row of a loaded frame.

Records are run through the transform parameters frozen at training time.
"""

from __future__ import annotations

import os
from typing import Union

import joblib
import numpy as np
import pandas as pd

from house_prices.config import EXAMPLE_ACTUAL_PRICE, EXAMPLE_HOUSE, MODEL_FILE
from house_prices.data.load_data import ID_COLUMN, LABEL, RecordLike, records_to_frame
from house_prices.errors import PredictionError, TrainingError
from house_prices.features.build_features import ONEHOT
from house_prices.models.base import TrainedModel


def load_model(path: str = MODEL_FILE) -> TrainedModel:
    """Load a model written by `save_model`."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Model file not found at {path}. Run training first.")
    model = joblib.load(path)
    if not isinstance(model, TrainedModel):
        raise TrainingError(f"{path} does not contain a trained house price model")
    return model


def _row_label(df: pd.DataFrame, position: int) -> str:
    if ID_COLUMN in df.columns:
        value = df[ID_COLUMN].iloc[position]
        if isinstance(value, str) and value:
            return value
    return f"record {position}"


def _align_and_clean(model: TrainedModel, df: pd.DataFrame) -> pd.DataFrame:
    """
    Select the model's input columns and coerce numeric ones to float.

    Raises PredictionError on an absent column or on a value that cannot be
    converted, naming the column and the record.
    """
    absent = [f for f in model.features if f not in df.columns]
    if absent:
        raise PredictionError(f"Record is missing required fields: {absent}")

    categorical = {c for s in model.steps if s.kind == ONEHOT for c in s.columns}
    X = df[list(model.features)].copy()
    for col in X.columns:
        if col in categorical:
            bad = X[col].isna()
        else:
            X[col] = pd.to_numeric(X[col], errors="coerce").astype(float)
            bad = ~np.isfinite(X[col])
        if bad.any():
            position = int(np.argmax(bad.to_numpy()))
            raise PredictionError(
                f"Field {col!r} of {_row_label(df, position)} is absent or not a number: "
                f"{df[col].iloc[position]!r}"
            )
    return X


def predict_frame(model: TrainedModel, df: pd.DataFrame) -> np.ndarray:
    if len(df) == 0:
        return np.empty(0, dtype=float)
    X = _align_and_clean(model, df)
    return np.asarray(model.pipeline.predict(X), dtype=float)


def _as_frame(record: Union[RecordLike, pd.Series, pd.DataFrame]) -> pd.DataFrame:
    if isinstance(record, pd.DataFrame):
        if len(record) != 1:
            raise PredictionError(f"Expected a single record, got {len(record)} rows")
        return record.reset_index(drop=True)
    if isinstance(record, pd.Series):
        return record.to_frame().T.reset_index(drop=True)
    return records_to_frame([record])


def predict_price(model: TrainedModel, record: Union[RecordLike, pd.Series, pd.DataFrame]) -> float:
    """
    Predict the sale price of a single house.

    Parameters
    ----------
    model : TrainedModel
    record : HousePrice, mapping, pd.Series or one-row pd.DataFrame

    Returns
    -------
    float
        Predicted sale price.
    """
    return float(predict_frame(model, _as_frame(record))[0])


def predict_records(model: TrainedModel, df: pd.DataFrame) -> pd.DataFrame:
    """Return a frame with columns Id and SalePrice (predicted) for every row of `df`."""
    ids = df[ID_COLUMN] if ID_COLUMN in df.columns else pd.Series([""] * len(df), index=df.index)
    return pd.DataFrame({
        ID_COLUMN: ids.to_numpy(),
        LABEL: predict_frame(model, df),
    })


if __name__ == "__main__":
    model = load_model()
    print(f"Predicted SalePrice: {predict_price(model, EXAMPLE_HOUSE):.4f}, actual SalePrice: {EXAMPLE_ACTUAL_PRICE}")
