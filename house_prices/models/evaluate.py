"""
Evaluation of a trained model against held-out records.

Usage (from project root)
-------------------------
# Evaluate the saved model on data/test.csv and print metrics:
python -m house_prices.models.evaluate

# Or import functions:
from house_prices.models.evaluate import evaluate_model
metrics = evaluate_model(model, test_df)
"""

from __future__ import annotations

import numpy as np
import pandas as pd
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

from house_prices.config import MODEL_FILE, TEST_FILE
from house_prices.data.load_data import LABEL, load_records
from house_prices.errors import PredictionError
from house_prices.models.base import Metrics, TrainedModel
from house_prices.models.predict import load_model, predict_frame


def evaluate_model(model: TrainedModel, df: pd.DataFrame) -> Metrics:
    """
    Compare predictions with the SalePrice of each record.

    The transform parameters learned at training time are applied unchanged;
    nothing is refitted on `df`.

    Parameters
    ----------
    model : TrainedModel
    df : pd.DataFrame
        Labelled records, as returned by `load_records`.

    Returns
    -------
    Metrics
        RMS error, R squared (nan with fewer than two rows), mean absolute
        error (L1), mean squared error (L2) and the row count.
    """
    if len(df) == 0:
        raise PredictionError("Cannot evaluate on an empty dataset")
    if LABEL not in df.columns:
        raise PredictionError(f"Evaluation data has no {LABEL} column")

    y_true = pd.to_numeric(df[LABEL], errors="coerce").astype(float).to_numpy()
    if not np.isfinite(y_true).all():
        raise PredictionError(f"Evaluation data has rows without a numeric {LABEL}")
    y_pred = predict_frame(model, df)

    mse = mean_squared_error(y_true, y_pred)
    r2 = float(r2_score(y_true, y_pred)) if len(y_true) >= 2 else float("nan")
    return Metrics(
        rms=float(np.sqrt(mse)),
        r_squared=r2,
        l1=float(mean_absolute_error(y_true, y_pred)),
        l2=float(mse),
        n_rows=int(len(y_true)),
    )


def evaluate_test_set(model: TrainedModel, test_path: str = TEST_FILE) -> Metrics:
    """Load `test_path`, evaluate `model` on it and print the metrics."""
    test_df = load_records(test_path)

    print("=============== Evaluating model ===============")
    metrics = evaluate_model(model, test_df)
    print(metrics.summary())
    print("=============== End evaluating ===============")
    print()
    return metrics


if __name__ == "__main__":
    evaluate_test_set(load_model(MODEL_FILE))
