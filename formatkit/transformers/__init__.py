"""
Tabular transformers - convert between matrices, records and DataFrames.

This module provides:
- arrays_to_data / data_to_arrays: matrix <-> record list conversion
- dataframe_to_records / records_to_dataframe: pandas adapters
- TabularTransformer: callable matrix <-> DataFrame transformer
"""

from .tabular import arrays_to_data, data_to_arrays, validate_header
from .dataframe import (
    TabularTransformer,
    dataframe_to_records,
    records_to_dataframe,
)

__all__ = [
    'arrays_to_data',
    'data_to_arrays',
    'validate_header',
    'dataframe_to_records',
    'records_to_dataframe',
    'TabularTransformer',
]
