"""
Declarative feature pipeline for the house price model.

The pipeline is described as an ordered tuple of `TransformSpec` steps followed
by an `EstimatorSpec`. Nothing here is fitted: the builders return unfitted
scikit-learn objects that the trainer fits on training data only.

"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from sklearn.compose import ColumnTransformer
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import MinMaxScaler, OneHotEncoder
from xgboost import XGBRegressor

from house_prices.config import RANDOM_SEED
from house_prices.errors import TrainingError

MINMAX = "minmax"
ONEHOT = "onehot"
CONCAT = "concat"
TRANSFORM_KINDS = (MINMAX, ONEHOT, CONCAT)

FAST_TREE = "fast_tree"


@dataclass(frozen=True)
class TransformSpec:
    kind: str
    columns: Tuple[str, ...]
    output: str = ""


@dataclass(frozen=True)
class EstimatorSpec:
    kind: str = FAST_TREE
    params: Dict[str, Any] = field(default_factory=dict)


DEFAULT_STEPS: Tuple[TransformSpec, ...] = (
    TransformSpec(MINMAX, ("LotArea",)),
    TransformSpec(CONCAT, ("YearRemodAdd", "YrSold", "GrLivArea", "LotArea"), output="Features"),
)

# 100 trees of at most 20 leaves, learning rate 0.2, 10 rows per leaf.
FAST_TREE_PARAMS: Dict[str, Any] = {
    "n_estimators": 100,
    "max_leaves": 20,
    "max_depth": 0,
    "grow_policy": "lossguide",
    "tree_method": "hist",
    "learning_rate": 0.2,
    "min_child_weight": 10,
    "objective": "reg:squarederror",
    "random_state": RANDOM_SEED,
    "n_jobs": 1,
    "verbosity": 0,
}

DEFAULT_ESTIMATOR = EstimatorSpec(FAST_TREE)


def validate_steps(steps: Sequence[TransformSpec], available: Iterable[str]) -> None:
    """
    Check that every step only uses columns that exist when it runs.

    Raises
    ------
    TrainingError
        On an unknown step kind, a reference to an absent column, an empty
        step list, or a step list that does not end with a single concat.
    """
    if not steps:
        raise TrainingError("Pipeline has no transform steps")

    columns = set(available)
    for index, step in enumerate(steps):
        if step.kind not in TRANSFORM_KINDS:
            raise TrainingError(f"Step {index}: unknown transform kind {step.kind!r}")
        if not step.columns:
            raise TrainingError(f"Step {index} ({step.kind}) has no input columns")
        missing = [c for c in step.columns if c not in columns]
        if missing:
            raise TrainingError(
                f"Step {index} ({step.kind}) refers to columns absent after the previous steps: {missing}"
            )
        if step.kind == CONCAT:
            if index != len(steps) - 1:
                raise TrainingError(f"Step {index}: concat must be the last transform step")
            if not step.output:
                raise TrainingError(f"Step {index}: concat needs an output column name")
            columns.add(step.output)

    if steps[-1].kind != CONCAT:
        raise TrainingError("Pipeline must end with a concat step producing the feature vector")


def input_columns(steps: Sequence[TransformSpec]) -> List[str]:
    """Raw record columns the pipeline reads, in first-use order."""
    seen = []
    for step in steps:
        for c in step.columns:
            if c not in seen:
                seen.append(c)
    return seen


def _column_transformer(kinds: List[str]):
    parts = []
    for kind in kinds:
        if kind == MINMAX:
            parts.append((MINMAX, MinMaxScaler()))
        elif kind == ONEHOT:
            parts.append((ONEHOT, OneHotEncoder(handle_unknown="ignore", sparse_output=False)))
    if not parts:
        return "passthrough"
    if len(parts) == 1:
        return parts[0][1]
    return Pipeline(parts)


def build_preprocessor(steps: Sequence[TransformSpec], available: Iterable[str]) -> ColumnTransformer:
    """
    Build the unfitted transform stage.

    Each column named by the final concat step gets the chain of per-column
    transforms configured before it, and the output columns follow the concat
    order exactly.
    """
    validate_steps(steps, available)
    concat = steps[-1]

    chains: Dict[str, List[str]] = {}
    for step in steps[:-1]:
        for c in step.columns:
            chains.setdefault(c, []).append(step.kind)

    transformers = [
        (f"{i}_{c}", _column_transformer(chains.get(c, [])), [c])
        for i, c in enumerate(concat.columns)
    ]
    return ColumnTransformer(transformers=transformers, remainder="drop", sparse_threshold=0.0)


def build_estimator(spec: EstimatorSpec = DEFAULT_ESTIMATOR) -> XGBRegressor:
    if spec.kind != FAST_TREE:
        raise TrainingError(f"Unknown estimator kind {spec.kind!r}")
    return XGBRegressor(**{**FAST_TREE_PARAMS, **spec.params})


def build_pipeline(
    steps: Sequence[TransformSpec] = DEFAULT_STEPS,
    estimator: EstimatorSpec = DEFAULT_ESTIMATOR,
    available: Iterable[str] = None,
) -> Pipeline:
    """
    Assemble transform steps and estimator into one unfitted Pipeline.

    Parameters
    ----------
    steps : sequence of TransformSpec
        Ordered transform descriptors, ending with a concat.
    estimator : EstimatorSpec
    available : iterable of str or None
        Columns present in the input records. Defaults to the columns the
        steps themselves read.
    """
    if available is None:
        available = input_columns(steps)
    return Pipeline(steps=[
        ("features", build_preprocessor(steps, available)),
        ("regressor", build_estimator(estimator)),
    ])


def describe_steps(steps: Sequence[TransformSpec]) -> List[Dict[str, Any]]:
    return [
        {"kind": s.kind, "columns": list(s.columns), **({"output": s.output} if s.output else {})}
        for s in steps
    ]
