"""
Model artifact, metrics and the backend interface used by the workflow.

The workflow in `house_prices.run` only talks to a `RegressionBackend`, so it
can be exercised with any backend that implements fit / evaluate / predict.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

import pandas as pd
from sklearn.pipeline import Pipeline

from house_prices.data.load_data import RecordLike
from house_prices.features.build_features import EstimatorSpec, TransformSpec


@dataclass(frozen=True, eq=False)
class TrainedModel:
    """
    Result of fitting the feature pipeline and estimator on training data.

    `pipeline` carries the normalization parameters learned from the training
    set; they are reused as-is for evaluation and prediction.
    """

    pipeline: Pipeline
    features: Tuple[str, ...]
    steps: Tuple[TransformSpec, ...]
    estimator: EstimatorSpec
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Metrics:
    """Aggregate regression error over an evaluated dataset."""

    rms: float
    r_squared: float
    l1: float
    l2: float
    n_rows: int

    def summary(self) -> str:
        return "\n".join([
            f"Rms = {self.rms}",
            f"RSquared = {self.r_squared}, a value between 0 and 1, the closer to 1, the better",
            f"L1 = {self.l1}, L2 = {self.l2}, rows = {self.n_rows}",
        ])


class RegressionBackend(ABC):
    """Fit / evaluate / predict capability wrapped around an ML library."""

    @abstractmethod
    def fit(self, records: pd.DataFrame) -> TrainedModel:
        ...

    @abstractmethod
    def evaluate(self, model: TrainedModel, records: pd.DataFrame) -> Metrics:
        ...

    @abstractmethod
    def predict(self, model: TrainedModel, record: RecordLike) -> float:
        ...

    @abstractmethod
    def predict_many(self, model: TrainedModel, records: pd.DataFrame) -> pd.DataFrame:
        """Return a frame with the record Id and the predicted SalePrice."""
        ...

    @abstractmethod
    def save(self, model: TrainedModel, path: str) -> None:
        ...

    @abstractmethod
    def load(self, path: str) -> TrainedModel:
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
