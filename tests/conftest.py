"""
Shared fixtures: synthetic train/test CSVs laid out like the Kaggle
house-prices files, and a model trained once per session.
"""

import numpy as np
import pandas as pd
import pytest

from house_prices.data.load_data import load_records
from house_prices.models.train import fit_model


def make_housing_frame(n_rows, seed, first_id=1):
    rng = np.random.default_rng(seed)
    lot_area = rng.integers(4000, 20000, n_rows)
    remodel = rng.integers(1950, 2011, n_rows)
    sold = rng.integers(2006, 2011, n_rows)
    living = rng.integers(700, 3500, n_rows)
    price = (
        20000
        + 60 * living
        + 1.5 * lot_area
        + 800 * (remodel - 1950)
        - 1000 * (sold - 2006)
        + rng.normal(0, 5000, n_rows)
    )
    return pd.DataFrame({
        "Id": np.arange(first_id, first_id + n_rows),
        "MSSubClass": rng.choice([20, 50, 60, 120], n_rows),
        "MSZoning": "RL",
        "LotFrontage": "NA",
        "LotArea": lot_area,
        "YearRemodAdd": remodel,
        "GrLivArea": living,
        "YrSold": sold,
        "SalePrice": price.round(0),
    })


@pytest.fixture
def write_csv(tmp_path):
    def _write(text, name="data.csv"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write


@pytest.fixture(scope="session")
def data_dir(tmp_path_factory):
    directory = tmp_path_factory.mktemp("data")
    make_housing_frame(300, seed=0).to_csv(directory / "train.csv", index=False)
    make_housing_frame(100, seed=1, first_id=1461).to_csv(directory / "test.csv", index=False)
    return directory


@pytest.fixture(scope="session")
def train_csv(data_dir):
    return str(data_dir / "train.csv")


@pytest.fixture(scope="session")
def holdout_csv(data_dir):
    return str(data_dir / "test.csv")


@pytest.fixture(scope="session")
def train_df(train_csv):
    return load_records(train_csv)


@pytest.fixture(scope="session")
def holdout_df(holdout_csv):
    return load_records(holdout_csv)


@pytest.fixture(scope="session")
def trained_model(train_df):
    return fit_model(train_df)
