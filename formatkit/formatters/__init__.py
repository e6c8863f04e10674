"""
Formatters - render scalar values and tabular data as text.

This module provides:
- CSV: records_as_csv, matrix_as_csv, data_as_csv and CsvOptions
- Scalars: format_date, format_number, round_number, pretty_duration,
  capitalize, camel_case
- ColumnFormatter: apply scalar formatters to DataFrame columns
"""

from .base import DataFrameFormatter, apply_formatters
from .column_formatter import ColumnFormatter
from .csv import (
    CsvOptions,
    data_as_csv,
    escape_field,
    matrix_as_csv,
    records_as_csv,
    render_scalar,
)
from .dates import format_date
from .numeric import format_number, pretty_duration, round_number
from .strings import camel_case, capitalize

__all__ = [
    "DataFrameFormatter",
    "apply_formatters",
    "ColumnFormatter",
    "CsvOptions",
    "data_as_csv",
    "escape_field",
    "matrix_as_csv",
    "records_as_csv",
    "render_scalar",
    "format_date",
    "format_number",
    "pretty_duration",
    "round_number",
    "camel_case",
    "capitalize",
]
