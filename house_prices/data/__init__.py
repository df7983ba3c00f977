"""
Data package for loading house sale records.

This package exposes the record schema and the functions that read the
training and test CSV files into typed records.
"""

from house_prices.data.load_data import (
    HOUSE_PRICE_SCHEMA,
    ID_COLUMN,
    LABEL,
    Field,
    HousePrice,
    iter_records,
    load_records,
    records_to_frame,
)

__all__ = [
    "HOUSE_PRICE_SCHEMA",
    "ID_COLUMN",
    "LABEL",
    "Field",
    "HousePrice",
    "iter_records",
    "load_records",
    "records_to_frame",
]
