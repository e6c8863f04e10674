"""
Adapters between pandas DataFrames and the record/matrix representations.
"""

import math
import warnings
from datetime import date, datetime
from typing import Any, List, Sequence

import numpy as np
import pandas as pd

from formatkit.shared.types import Record, Scalar
from .tabular import arrays_to_data, data_to_arrays, validate_header


def to_scalar(value: Any) -> Any:
    """
    Convert a cell pulled out of a DataFrame into a plain Python scalar.

    NaN and NaT become None, numpy scalars become their Python equivalents
    and timestamps become ISO 8601 strings. Other values pass through.
    """
    if value is None or value is pd.NaT:
        return None

    if isinstance(value, np.generic):
        value = value.item()

    if isinstance(value, float) and math.isnan(value):
        return None

    if isinstance(value, (pd.Timestamp, datetime, date)):
        return value.isoformat()

    return value


def _column_names(df: pd.DataFrame) -> List[str]:
    labels = list(df.columns)
    non_strings = [label for label in labels if not isinstance(label, str)]

    if non_strings:
        warnings.warn(
            f"Converting non-string column labels to strings: {non_strings!r}",
            UserWarning
        )

    return validate_header([str(label) for label in labels])


def dataframe_to_records(df: pd.DataFrame) -> List[Record]:
    """
    Convert a DataFrame into a list of records, one per row.

    The index is ignored. Column order becomes key order.

    Args:
        df: Input DataFrame

    Returns:
        list[dict]: Records with plain Python scalar values

    Raises:
        TypeError: If df is not a pandas DataFrame
        EmptyHeaderError: If the DataFrame has no columns
        DuplicateFieldError: If two columns share a label
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError(
            f"Expected pandas DataFrame, got {type(df).__name__}"
        )

    fields = _column_names(df)

    return [
        {field: to_scalar(value) for field, value in zip(fields, row)}
        for row in df.itertuples(index=False, name=None)
    ]


def records_to_dataframe(records: Sequence[Record]) -> pd.DataFrame:
    """
    Build a DataFrame from records, columns ordered like the first record.

    Raises:
        EmptyInputError: If no records are given
        SchemaMismatchError: If the records disagree on their fields
    """
    matrix = data_to_arrays(records)
    return pd.DataFrame(matrix[1:], columns=matrix[0])


class TabularTransformer:
    """
    Transformer between matrices and DataFrames.

    Args:
        fill_value: Value used for trailing fields missing from short rows
                   (default: None, which pandas shows as NaN/None)

    Example:
        transformer = TabularTransformer()
        df = transformer([["id", "name"], [1, "Ann"], [2, "Bo"]])
        matrix = transformer.to_matrix(df)
    """

    def __init__(self, fill_value: Scalar = None):
        self.fill_value: Scalar = fill_value

    def __call__(self, matrix: Sequence[Sequence[Scalar]]) -> pd.DataFrame:
        """
        Make TabularTransformer callable for use in transformer lists.

        Args:
            matrix: Header row plus data rows

        Returns:
            pd.DataFrame: One column per header field
        """
        return self.to_dataframe(matrix)

    def to_dataframe(self, matrix: Sequence[Sequence[Scalar]]) -> pd.DataFrame:
        """
        Convert a matrix into a DataFrame.

        Args:
            matrix: Header row plus data rows

        Returns:
            pd.DataFrame: Converted data, empty but with columns when the
                matrix has only a header

        Raises:
            EmptyHeaderError: If the header is missing or empty
            ShapeMismatchError: If a row is longer than the header
        """
        records = arrays_to_data(matrix)
        header = list(matrix[0])

        if self.fill_value is not None:
            width = len(header)
            for record, row in zip(records, matrix[1:]):
                for name in header[len(row):width]:
                    record[name] = self.fill_value

        return pd.DataFrame(records, columns=header)

    def to_matrix(self, df: pd.DataFrame) -> List[List[Scalar]]:
        """
        Convert a DataFrame into a matrix (header row plus data rows).

        Args:
            df: Input DataFrame

        Returns:
            list[list]: Header row followed by one row per DataFrame row
        """
        records = dataframe_to_records(df)

        if not records:
            return [[str(label) for label in df.columns]]

        return data_to_arrays(records)
