"""
scikit-learn / XGBoost implementation of `RegressionBackend`.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from house_prices.data.load_data import RecordLike
from house_prices.features.build_features import (
    DEFAULT_ESTIMATOR,
    DEFAULT_STEPS,
    EstimatorSpec,
    TransformSpec,
)
from house_prices.models.base import Metrics, RegressionBackend, TrainedModel
from house_prices.models.evaluate import evaluate_model
from house_prices.models.predict import load_model, predict_price, predict_records
from house_prices.models.train import fit_model, save_model


class PipelineBackend(RegressionBackend):
    """Fits the configured transform steps and tree estimator as one sklearn Pipeline."""

    def __init__(
        self,
        steps: Sequence[TransformSpec] = DEFAULT_STEPS,
        estimator: EstimatorSpec = DEFAULT_ESTIMATOR,
    ):
        self.steps = tuple(steps)
        self.estimator = estimator

    def fit(self, records: pd.DataFrame) -> TrainedModel:
        return fit_model(records, self.steps, self.estimator)

    def evaluate(self, model: TrainedModel, records: pd.DataFrame) -> Metrics:
        return evaluate_model(model, records)

    def predict(self, model: TrainedModel, record: RecordLike) -> float:
        return predict_price(model, record)

    def predict_many(self, model: TrainedModel, records: pd.DataFrame) -> pd.DataFrame:
        return predict_records(model, records)

    def save(self, model: TrainedModel, path: str) -> None:
        save_model(model, path)

    def load(self, path: str) -> TrainedModel:
        return load_model(path)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {len(self.steps)} steps, {self.estimator.kind}>"
