"""
Load house sale records from CSV files.

This module provides `load_records()` which reads a comma-separated file with a
header row into a DataFrame shaped by `HOUSE_PRICE_SCHEMA`. Each schema field
is looked up by header name; when the header carries none of the schema names
the fields are taken from their fixed column positions in the Kaggle
house-prices layout instead.

Required numeric fields must parse as numbers, otherwise a `ParseError` naming
the file, column and row Id is raised. Optional fields that are missing or
malformed fall back to their default value.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields
from typing import Iterable, Iterator, List, Mapping, Optional, Union

import numpy as np
import pandas as pd

from house_prices.errors import ParseError


@dataclass(frozen=True)
class Field:
    name: str
    position: int
    numeric: bool = True
    required: bool = True
    default: object = None


HOUSE_PRICE_SCHEMA: List[Field] = [
    Field("Id", 0, numeric=False),
    Field("MSSubClass", 1, numeric=False, required=False, default=""),
    Field("LotArea", 4),
    Field("YearRemodAdd", 20),
    Field("GrLivArea", 46),
    Field("YrSold", 77),
    Field("SalePrice", 80, required=False, default=0.0),
]

LABEL = "SalePrice"
ID_COLUMN = "Id"


@dataclass(frozen=True)
class HousePrice:
    """
    One row of housing data.

    Numeric features default to None so that a record built in code with a
    feature left out is rejected at prediction time instead of being read as 0.
    """

    Id: str = ""
    MSSubClass: str = ""
    LotArea: Optional[float] = None
    YearRemodAdd: Optional[float] = None
    GrLivArea: Optional[float] = None
    YrSold: Optional[float] = None
    SalePrice: float = 0.0


RecordLike = Union[HousePrice, Mapping[str, object]]


def _resolve_column(raw: pd.DataFrame, field: Field, by_name: bool) -> Optional[pd.Series]:
    if by_name:
        return raw[field.name] if field.name in raw.columns else None
    if field.position < raw.shape[1]:
        return raw.iloc[:, field.position]
    return None


def _row_ids(raw: pd.DataFrame, by_name: bool) -> pd.Series:
    ids = _resolve_column(raw, HOUSE_PRICE_SCHEMA[0], by_name)
    # header is line 1, first data row is line 2
    line_numbers = pd.Series([f"line {i + 2}" for i in range(len(raw))], index=raw.index)
    if ids is None:
        return line_numbers
    ids = ids.str.strip()
    return ids.where(ids != "", line_numbers)


def load_records(path: str, schema: List[Field] = HOUSE_PRICE_SCHEMA) -> pd.DataFrame:
    """
    Read a CSV file into a DataFrame with one column per schema field.

    Parameters
    ----------
    path : str
        CSV file with a header row, comma separated.
    schema : list of Field
        Field-to-column mapping. Defaults to the house price schema.

    Returns
    -------
    pd.DataFrame
        Columns are exactly the schema field names, in schema order. Numeric
        fields are float64, the others are strings.

    Raises
    ------
    FileNotFoundError
        If `path` does not exist.
    ParseError
        If a required column is absent or holds an empty or non-numeric value.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Data file not found: {path}")

    try:
        n_header = len(pd.read_csv(path, sep=",", nrows=0, encoding="utf-8").columns)
        # surplus trailing fields are dropped, short rows are padded below
        raw = pd.read_csv(
            path, sep=",", dtype=str, keep_default_na=False, encoding="utf-8",
            engine="python", on_bad_lines=lambda fields: fields[:n_header],
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise ParseError(f"Cannot read CSV: {exc}", path=path) from exc
    raw = raw.fillna("")
    by_name = any(f.name in raw.columns for f in schema)
    row_ids = _row_ids(raw, by_name)

    out = {}
    for field in schema:
        column = _resolve_column(raw, field, by_name)
        if column is None:
            if field.required:
                raise ParseError("Required column is missing", path=path, column=field.name)
            out[field.name] = pd.Series(field.default, index=raw.index,
                                        dtype="float64" if field.numeric else "object")
            continue

        values = column.str.strip()
        if field.numeric:
            parsed = pd.to_numeric(values, errors="coerce")
            bad = parsed.isna() | ~np.isfinite(parsed.fillna(0))
            if bad.any():
                if field.required:
                    first = bad.idxmax()
                    raise ParseError(
                        f"Value {column[first]!r} is not a number",
                        path=path, column=field.name, row_id=row_ids[first],
                    )
                parsed = parsed.where(~bad, field.default)
            out[field.name] = parsed.astype("float64")
        else:
            empty = values == ""
            if field.required and empty.any():
                first = empty.idxmax()
                raise ParseError("Value is empty", path=path, column=field.name, row_id=row_ids[first])
            out[field.name] = values.where(~empty, field.default).astype("object")

    return pd.DataFrame(out, columns=[f.name for f in schema])


def iter_records(df: pd.DataFrame) -> Iterator[HousePrice]:
    """Yield a `HousePrice` for every row of a frame returned by `load_records`."""
    names = [f.name for f in fields(HousePrice)]
    for row in df[names].itertuples(index=False):
        yield HousePrice(**row._asdict())


def records_to_frame(records: Iterable[RecordLike], schema: List[Field] = HOUSE_PRICE_SCHEMA) -> pd.DataFrame:
    """
    Build a schema-shaped frame from records constructed in code.

    Accepts `HousePrice` instances or plain mappings. Absent optional fields
    take their default; absent required fields are left empty so that the
    prediction step can report them. Values are not parsed here.
    """
    rows = []
    for record in records:
        data = asdict(record) if isinstance(record, HousePrice) else dict(record)
        row = {}
        for field in schema:
            value = data.get(field.name)
            if value is None:
                value = np.nan if field.required else field.default
            row[field.name] = value
        rows.append(row)
    return pd.DataFrame(rows, columns=[f.name for f in schema])
