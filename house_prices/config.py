"""
Central configuration for the project.

This module centralizes environment-independent constants and derived paths
used throughout the codebase (data files, model artifacts, random seed and the
hand-constructed example house).

Constants
---------
BASE_DIR : str
    Absolute path to the parent directory of the `house_prices` package.
DATA_DIR, TRAIN_FILE, TEST_FILE : str
    Paths to the training and test CSV files. `DATA_DIR` can be overridden
    with the HOUSE_PRICES_DATA_DIR environment variable.
MODELS_DIR, MODEL_FILE, METADATA_FILE : str
    Paths to the persisted model and its metadata. `MODELS_DIR` can be
    overridden with the HOUSE_PRICES_MODELS_DIR environment variable.
RANDOM_SEED : int
    Seed passed to the tree estimator.
EXAMPLE_HOUSE, EXAMPLE_ACTUAL_PRICE
    The example record predicted after training and its known sale price.
"""

import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DATA_DIR = os.getenv("HOUSE_PRICES_DATA_DIR", os.path.join(BASE_DIR, "data"))
TRAIN_FILE = os.path.join(DATA_DIR, "train.csv")
TEST_FILE = os.path.join(DATA_DIR, "test.csv")

MODELS_DIR = os.getenv("HOUSE_PRICES_MODELS_DIR", os.path.join(BASE_DIR, "models"))
MODEL_FILE = os.path.join(MODELS_DIR, "HousePriceModel.joblib")
METADATA_FILE = os.path.join(MODELS_DIR, "HousePriceModel.metadata.json")

RANDOM_SEED = 42

EXAMPLE_HOUSE = {
    "LotArea": 8450,
    "YearRemodAdd": 2003,
    "YrSold": 2008,
    "GrLivArea": 1710,
}
EXAMPLE_ACTUAL_PRICE = 208500
