"""
Base class for DataFrame formatters.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable
import pandas as pd


class DataFrameFormatter(ABC):
    """
    Abstract base class for DataFrame formatters.

    A formatter rewrites cell values into display text (numbers, dates,
    durations) ahead of CSV export. It never adds or drops rows and always
    returns a new DataFrame, so formatters can be chained:

        df = apply_formatters(df, [number_fmt, date_fmt])
    """

    def __call__(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Make formatters callable for use in plain function chains.

        Args:
            df: Input DataFrame

        Returns:
            pd.DataFrame: Formatted DataFrame
        """
        return self.format(df)

    @abstractmethod
    def format(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Render the formatter's columns as text.

        Args:
            df: Input DataFrame, left unmodified

        Returns:
            pd.DataFrame: Copy of df with formatted columns
        """
        pass


def apply_formatters(
    df: pd.DataFrame,
    formatters: Iterable[Callable[[pd.DataFrame], pd.DataFrame]]
) -> pd.DataFrame:
    """
    Run formatters in order, each one receiving the previous result.

    Raises:
        TypeError: If a formatter does not return a DataFrame
    """
    result = df
    for formatter in formatters:
        result = formatter(result)
        if not isinstance(result, pd.DataFrame):
            raise TypeError(
                f"Formatter {formatter!r} returned {type(result).__name__}, "
                f"expected pandas DataFrame"
            )
    return result
