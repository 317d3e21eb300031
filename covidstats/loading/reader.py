#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pathlib import Path
import pandas as pd
from covidstats.util.config import config


def read_table(path, name=None):
    """Read a CSV table as strings.

    Args:
        path (str or pathlib.Path): path of the CSV file
        name (str or None): name of the table shown in logs or None (basename of the file)

    Raises:
        FileNotFoundError: the file does not exist
        pandas.errors.EmptyDataError: the file is empty

    Returns:
        pandas.DataFrame:
            Index
                reset index
            Columns
                as-is the header row of the file, values are strings or NAs (missing cells of short rows)

    Note:
        Empty cells are kept as empty strings, "NA" and similar labels are not converted to NAs.

    Note:
        Rows longer than the header are truncated to the width of the header.

    Note:
        Duplicated labels of the header are kept as-is, without suffixes like ".1".
    """
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"{filepath} does not exist.")
    name = name or filepath.name
    width = len(pd.read_csv(filepath, header=None, nrows=1, dtype=str).columns)
    raw_df = pd.read_csv(
        filepath, header=None, names=list(range(width)), dtype=str, keep_default_na=False, na_filter=False,
        index_col=False, engine="python", on_bad_lines=lambda line: line[:width])
    df = raw_df.iloc[1:].reset_index(drop=True)
    df.columns = [str(label) for label in raw_df.iloc[0].tolist()]
    config.info(f"Loaded {name}: {len(df)} rows, {len(df.columns)} columns")
    return df


def cells(row):
    """Return the cells of a row, dropping the trailing cells which are missing in the source.

    Args:
        row (list[object] or tuple(object)): values of a row, missing cells are NAs or None

    Returns:
        list[str]: cells until the last string value
    """
    values = list(row)
    while values and not isinstance(values[-1], str):
        values.pop()
    return [value if isinstance(value, str) else "" for value in values]
