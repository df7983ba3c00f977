"""
Training and persistence of the house price model.

Usage (from project root)
-------------------------
# Train on data/train.csv and write models/HousePriceModel.joblib:
python -m house_prices.models.train

# Or import functions:
from house_prices.models.train import fit_model, save_model, train_model
model = train_model()
"""

from __future__ import annotations

import json
import os
import platform
from typing import Optional, Sequence

import joblib
import numpy as np
import pandas as pd
import sklearn
import xgboost as xgb
from xgboost.core import XGBoostError

from house_prices.config import MODEL_FILE, TRAIN_FILE
from house_prices.data.load_data import LABEL, load_records
from house_prices.errors import TrainingError
from house_prices.features.build_features import (
    DEFAULT_ESTIMATOR,
    DEFAULT_STEPS,
    FAST_TREE_PARAMS,
    EstimatorSpec,
    TransformSpec,
    build_pipeline,
    describe_steps,
    input_columns,
)
from house_prices.models.base import TrainedModel


def fit_model(
    df: pd.DataFrame,
    steps: Sequence[TransformSpec] = DEFAULT_STEPS,
    estimator: EstimatorSpec = DEFAULT_ESTIMATOR,
) -> TrainedModel:
    """
    Fit the transform steps and estimator on labelled records.

    Normalization parameters are learned from `df` only. The whole frame is
    consumed before the model is returned.

    Parameters
    ----------
    df : pd.DataFrame
        Training records, as returned by `load_records`.
    steps : sequence of TransformSpec
    estimator : EstimatorSpec

    Returns
    -------
    TrainedModel

    Raises
    ------
    TrainingError
        If the frame is empty, the label or a feature column is missing or
        holds missing values, or the estimator fails to fit.
    """
    if df is None or len(df) == 0:
        raise TrainingError("Training set is empty")
    if LABEL not in df.columns:
        raise TrainingError(f"Training set has no {LABEL} label column")

    steps = tuple(steps)
    pipeline = build_pipeline(steps, estimator, available=df.columns)
    features = input_columns(steps)

    X = df[features].copy()
    y = pd.to_numeric(df[LABEL], errors="coerce").astype(float)
    if not np.isfinite(y).all():
        raise TrainingError(f"Training set has {int((~np.isfinite(y)).sum())} rows without a numeric {LABEL}")
    missing = [c for c in features if X[c].isna().any()]
    if missing:
        raise TrainingError(f"Training set has missing values in feature columns: {missing}")

    try:
        pipeline.fit(X, y)
    except (ValueError, XGBoostError) as exc:
        raise TrainingError(f"Estimator failed to fit: {exc}") from exc

    metadata = {
        "model_name": "FastTree-style gradient boosted trees (XGBoost)",
        "model_version": "v1",
        "trained_on": pd.Timestamp.today().strftime("%Y-%m-%d"),
        "features": features,
        "steps": describe_steps(steps),
        "estimator": {"kind": estimator.kind, "params": {**FAST_TREE_PARAMS, **estimator.params}},
        "train_rows": int(len(df)),
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "sklearn": sklearn.__version__,
        "xgboost": xgb.__version__,
    }
    return TrainedModel(
        pipeline=pipeline,
        features=tuple(features),
        steps=steps,
        estimator=estimator,
        metadata=metadata,
    )


def metadata_path_for(model_path: str) -> str:
    return os.path.splitext(model_path)[0] + ".metadata.json"


def save_model(model: TrainedModel, path: str = MODEL_FILE, metadata_path: Optional[str] = None) -> str:
    """
    Persist the model with joblib and write its metadata next to it as JSON.

    Returns the path of the metadata file.
    """
    if metadata_path is None:
        metadata_path = metadata_path_for(path)

    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    joblib.dump(model, path)

    os.makedirs(os.path.dirname(os.path.abspath(metadata_path)), exist_ok=True)
    with open(metadata_path, "w") as fh:
        json.dump({**model.metadata, "model_file": os.path.basename(path)}, fh, indent=4)
    return metadata_path


def train_model(
    train_path: str = TRAIN_FILE,
    model_path: str = MODEL_FILE,
    steps: Sequence[TransformSpec] = DEFAULT_STEPS,
    estimator: EstimatorSpec = DEFAULT_ESTIMATOR,
) -> TrainedModel:
    """
    Load the training CSV, fit the model and persist it.

    The model is returned only once it has been written to `model_path`.
    """
    df = load_records(train_path)

    print("=============== Training model ===============")
    model = fit_model(df, steps, estimator)
    save_model(model, model_path)
    print("=============== End training ===============")
    print(f"The model is saved to {model_path}")
    return model


if __name__ == "__main__":
    train_model()
