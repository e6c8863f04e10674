"""
CSV serialization of records, matrices and DataFrames.
"""

import math
import numbers
import os
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Sequence

import numpy as np
import pandas as pd

from formatkit.shared.errors import EmptyInputError
from formatkit.shared.types import Matrix, Record, RecordSet, Scalar, is_scalar
from formatkit.transformers.dataframe import TabularTransformer
from formatkit.transformers.tabular import arrays_to_data, data_to_arrays

_ESCAPES = {"\\r": "\r", "\\n": "\n", "\\t": "\t"}


def _unescape(value: str) -> str:
    for escaped, char in _ESCAPES.items():
        value = value.replace(escaped, char)
    return value


@dataclass(frozen=True)
class CsvOptions:
    """
    Output settings for CSV serialization.

    Args:
        delimiter: Field separator (default: ",")
        line_ending: Line separator placed between lines (default: "\\n")
        quote_char: Single character used to quote fields (default: '"')
        include_header: Emit the header line first (default: True)

    Raises:
        ValueError: If a setting is empty, quote_char is not one character,
            or delimiter and quote_char are the same
    """

    delimiter: str = ","
    line_ending: str = "\n"
    quote_char: str = '"'
    include_header: bool = True

    def __post_init__(self):
        if not self.delimiter:
            raise ValueError("delimiter cannot be empty")

        if not self.line_ending:
            raise ValueError("line_ending cannot be empty")

        if len(self.quote_char) != 1:
            raise ValueError(
                f"quote_char must be a single character, got {self.quote_char!r}"
            )

        if self.delimiter == self.quote_char:
            raise ValueError(
                f"delimiter and quote_char must differ, both are {self.delimiter!r}"
            )

    @classmethod
    def from_env(cls, prefix: str = "FORMATKIT_CSV_") -> "CsvOptions":
        """
        Build options from environment variables.

        Reads {prefix}DELIMITER, {prefix}LINE_ENDING, {prefix}QUOTE_CHAR and
        {prefix}INCLUDE_HEADER. Unset variables keep their defaults. The
        sequences \\n, \\r and \\t in values are turned into the characters
        they name, so LINE_ENDING=\\r\\n works from a .env file.

        Returns:
            CsvOptions: Options built from the environment
        """
        defaults = cls()
        include_header = os.getenv(f"{prefix}INCLUDE_HEADER")

        return cls(
            delimiter=_unescape(os.getenv(f"{prefix}DELIMITER", defaults.delimiter)),
            line_ending=_unescape(os.getenv(f"{prefix}LINE_ENDING", defaults.line_ending)),
            quote_char=_unescape(os.getenv(f"{prefix}QUOTE_CHAR", defaults.quote_char)),
            include_header=(
                defaults.include_header if include_header is None
                else include_header.lower() in ("true", "1", "yes")
            ),
        )


def render_scalar(value: Any) -> str:
    """
    Convert a scalar field value to its CSV text.

    None and NaN become an empty field, booleans become "true"/"false",
    integral floats drop their fractional part (1.0 -> "1").

    Raises:
        TypeError: If value is not a string, number, boolean or None
    """
    if isinstance(value, np.generic):
        value = value.item()

    if not is_scalar(value):
        raise TypeError(
            f"Cannot render {type(value).__name__} value {value!r} as a CSV field"
        )

    if value is None:
        return ""

    if isinstance(value, str):
        return value

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, numbers.Integral):
        return str(int(value))

    number = float(value)
    if math.isnan(number):
        return ""
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return repr(number)


def escape_field(text: str, options: CsvOptions) -> str:
    """
    Quote a field when it holds the delimiter, the quote character, a line
    break, the configured line ending, or leading/trailing whitespace.
    Quote characters inside a quoted field are doubled.
    """
    quote = options.quote_char
    needs_quotes = (
        options.delimiter in text
        or quote in text
        or "\n" in text
        or "\r" in text
        or options.line_ending in text
        or text != text.strip()
    )

    if not needs_quotes:
        return text

    return quote + text.replace(quote, quote * 2) + quote


def _serialize(
    header: Sequence[str],
    rows: Sequence[Sequence[Scalar]],
    options: CsvOptions
) -> str:
    lines: List[str] = []

    if options.include_header:
        lines.append(
            options.delimiter.join(escape_field(name, options) for name in header)
        )

    for row in rows:
        lines.append(
            options.delimiter.join(
                escape_field(render_scalar(value), options) for value in row
            )
        )

    return options.line_ending.join(lines)


def records_as_csv(
    records: Sequence[Record],
    options: Optional[CsvOptions] = None
) -> str:
    """
    Serialize a list of records as CSV text.

    The first record's key order is the column order.

    Args:
        records: Schema-homogeneous records
        options: Output settings (default: CsvOptions())

    Returns:
        str: CSV text without a trailing line separator

    Raises:
        EmptyInputError: If no records are given
        InconsistentSchemaError: If the records disagree on their fields

    Example:
        records_as_csv([{'id': 1, 'name': 'Ann'}, {'id': 2, 'name': 'Bo'}])
        # 'id,name\\n1,Ann\\n2,Bo'
    """
    matrix = data_to_arrays(records)
    return _serialize(matrix[0], matrix[1:], options or CsvOptions())


def matrix_as_csv(
    matrix: Sequence[Sequence[Scalar]],
    options: Optional[CsvOptions] = None
) -> str:
    """
    Serialize a matrix (header row plus data rows) as CSV text.

    Short rows are padded with empty fields. A matrix holding only a header
    yields just the header line.

    Args:
        matrix: Header row followed by data rows
        options: Output settings (default: CsvOptions())

    Returns:
        str: CSV text without a trailing line separator

    Raises:
        EmptyInputError: If the matrix has no rows at all
        EmptyHeaderError: If the header row has no fields
        ShapeMismatchError: If a data row is longer than the header
    """
    if not matrix:
        raise EmptyInputError("Cannot serialize a matrix without a header row")

    records = arrays_to_data(matrix)
    header = list(matrix[0])
    rows = [[record[name] for name in header] for record in records]

    return _serialize(header, rows, options or CsvOptions())


def data_as_csv(
    data: Any,
    options: Optional[CsvOptions] = None,
    **overrides: Any
) -> str:
    """
    Serialize tagged tabular data as CSV text.

    Args:
        data: A Matrix, a RecordSet or a pandas DataFrame
        options: Output settings (default: CsvOptions())
        **overrides: CsvOptions fields replacing those in options,
                    e.g. delimiter=";"

    Returns:
        str: CSV text without a trailing line separator

    Raises:
        TypeError: If data is not one of the accepted types
        EmptyInputError: If there is no header information
        EmptyHeaderError: If the header row or the DataFrame has no fields
        ShapeMismatchError: If a matrix row is longer than the header
        InconsistentSchemaError: If records disagree on their fields

    Example:
        data_as_csv(RecordSet([{'id': 1, 'name': 'Doe, J'}]))
        # 'id,name\\n1,"Doe, J"'

        data_as_csv(Matrix([['a', 'b'], [1, 2]]), delimiter=';')
        # 'a;b\\n1;2'
    """
    options = options or CsvOptions()
    if overrides:
        options = replace(options, **overrides)

    if isinstance(data, Matrix):
        return matrix_as_csv(data.rows, options)

    if isinstance(data, RecordSet):
        return records_as_csv(data.records, options)

    if isinstance(data, pd.DataFrame):
        return matrix_as_csv(TabularTransformer().to_matrix(data), options)

    raise TypeError(
        f"Expected Matrix, RecordSet or pandas DataFrame, got {type(data).__name__}. "
        f"Use records_as_csv() or matrix_as_csv() for plain lists."
    )
