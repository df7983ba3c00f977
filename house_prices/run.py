"""
End-to-end workflow: load -> train -> persist -> evaluate -> predict.

Usage (from project root)
-------------------------
python -m house_prices
python -m house_prices --train data/train.csv --test data/test.csv --model models/HousePriceModel.joblib
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

from house_prices.config import (
    EXAMPLE_ACTUAL_PRICE,
    EXAMPLE_HOUSE,
    MODEL_FILE,
    RANDOM_SEED,
    TEST_FILE,
    TRAIN_FILE,
)
from house_prices.data.load_data import ID_COLUMN, LABEL, load_records
from house_prices.errors import HousePriceError
from house_prices.features.build_features import DEFAULT_STEPS, EstimatorSpec, FAST_TREE
from house_prices.models.backend import PipelineBackend
from house_prices.models.base import Metrics, RegressionBackend, TrainedModel


@dataclass(frozen=True, eq=False)
class WorkflowResult:
    model: TrainedModel
    metrics: Metrics
    example_prediction: float
    predictions: pd.DataFrame


def run_workflow(
    backend: RegressionBackend,
    train_path: str = TRAIN_FILE,
    test_path: str = TEST_FILE,
    model_path: str = MODEL_FILE,
    example: Optional[Dict[str, float]] = None,
) -> WorkflowResult:
    """
    Train, persist, evaluate and predict, strictly in that order.

    Evaluation and prediction use the model read back from `model_path`, so
    they only start once persistence has completed. Any error aborts the run.
    """
    if example is None:
        example = EXAMPLE_HOUSE

    train_df = load_records(train_path)
    print(f"Loaded {len(train_df):,} training records from {train_path}")

    print("=============== Training model ===============")
    trained = backend.fit(train_df)
    backend.save(trained, model_path)
    print("=============== End training ===============")
    print(f"The model is saved to {model_path}")

    model = backend.load(model_path)

    test_df = load_records(test_path)
    print("=============== Evaluating model ===============")
    metrics = backend.evaluate(model, test_df)
    print(metrics.summary())
    print("=============== End evaluating ===============")
    print()

    example_prediction = backend.predict(model, example)
    print(f"Predicted {LABEL}: {example_prediction:.4f}, actual {LABEL}: {EXAMPLE_ACTUAL_PRICE}")

    predictions = backend.predict_many(model, test_df)
    for row in predictions.itertuples(index=False):
        print(f"{getattr(row, ID_COLUMN)},{getattr(row, LABEL)}")

    return WorkflowResult(
        model=model,
        metrics=metrics,
        example_prediction=example_prediction,
        predictions=predictions,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="house_prices",
        description="Train a house sale price model, evaluate it and print predictions.",
    )
    parser.add_argument("--train", type=str, default=TRAIN_FILE, help="training CSV")
    parser.add_argument("--test", type=str, default=TEST_FILE, help="held-out CSV used for evaluation")
    parser.add_argument("--model", type=str, default=MODEL_FILE, help="where to write the trained model")
    parser.add_argument("--seed", type=int, default=RANDOM_SEED, help="estimator random seed")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    backend = PipelineBackend(DEFAULT_STEPS, EstimatorSpec(FAST_TREE, {"random_state": args.seed}))
    try:
        run_workflow(backend, args.train, args.test, args.model)
    except (HousePriceError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
