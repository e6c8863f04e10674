"""
Column formatter - applies scalar formatting functions to DataFrame columns.
"""

import pandas as pd
from typing import Callable, Dict, List, Optional, Union
from formatkit.transformers.dataframe import to_scalar
from .base import DataFrameFormatter
from .dates import format_date
from .numeric import format_number, pretty_duration


class ColumnFormatter(DataFrameFormatter):
    """
    Apply formatting functions to DataFrame columns.

    Missing cells (None, NaN, NaT) are left as None instead of being passed
    to the formatting function. Columns not present in the DataFrame are
    skipped.

    Args:
        formatters: Dict mapping column names to formatting functions.
                   Each function takes a single value and returns the formatted value.

    Example 1 - Built-in helpers:
        formatter = ColumnFormatter.number('revenue', decimals=2)
        # 1234.5 -> "1,234.50"
        formatted = formatter.format(df)

    Example 2 - Custom functions:
        formatter = ColumnFormatter({
            'name': capitalize,
            'started_at': lambda x: format_date(x, '%d.%m.%Y'),
        })
        formatted = formatter.format(df)
    """

    def __init__(self, formatters: Dict[str, Callable]):
        if not formatters:
            raise ValueError("formatters dictionary cannot be empty")

        self.formatters: dict[str, Callable] = formatters

    @staticmethod
    def _column_list(columns: Union[str, List[str]]) -> List[str]:
        return [columns] if isinstance(columns, str) else list(columns)

    @classmethod
    def number(
        cls,
        columns: Union[str, List[str]],
        decimals: Optional[int] = None,
        thousands_separator: str = ",",
        decimal_separator: str = "."
    ):
        """
        Helper method to create a number formatter.

        Args:
            columns: Column name or list of column names
            decimals: Fixed decimal places, None keeps natural precision
            thousands_separator: Group separator (default: ",")
            decimal_separator: Decimal point (default: ".")

        Returns:
            ColumnFormatter: Formatter configured for number formatting
        """
        if decimals is not None and decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {decimals}")

        def format_value(value):
            return format_number(
                value,
                decimals=decimals,
                thousands_separator=thousands_separator,
                decimal_separator=decimal_separator,
            )

        return cls({col: format_value for col in cls._column_list(columns)})

    @classmethod
    def date(cls, columns: Union[str, List[str]], pattern: str = "%Y-%m-%d"):
        """
        Helper method to create a date formatter.

        Args:
            columns: Column name or list of column names
            pattern: strftime pattern (default: "%Y-%m-%d")

        Returns:
            ColumnFormatter: Formatter configured for date formatting
        """
        def format_value(value):
            return format_date(value, pattern)

        return cls({col: format_value for col in cls._column_list(columns)})

    @classmethod
    def duration(cls, columns: Union[str, List[str]]):
        """
        Helper method to humanize millisecond durations, e.g. 3723000 -> "1h 2m 3s".
        """
        return cls({col: pretty_duration for col in cls._column_list(columns)})

    def format(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Apply formatting functions to columns.

        Args:
            df: Input DataFrame

        Returns:
            pd.DataFrame: Formatted DataFrame
        """
        if df.empty:
            return df.copy()

        result = df.copy()

        for column, format_func in self.formatters.items():
            if column in result.columns:
                result[column] = result[column].apply(
                    lambda value, func=format_func: (
                        None if to_scalar(value) is None else func(value)
                    )
                ).astype(object)

        return result
