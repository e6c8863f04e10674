"""
Tests for the pandas adapters and TabularTransformer.
"""

import warnings

import numpy as np
import pandas as pd
import pytest
from formatkit import (
    DuplicateFieldError,
    EmptyHeaderError,
    EmptyInputError,
    SchemaMismatchError,
    ShapeMismatchError,
    TabularTransformer,
    dataframe_to_records,
    records_to_dataframe,
)


class TestDataFrameToRecords:
    """Tests for dataframe_to_records"""

    def test_basic_conversion(self):
        """Test one record per row with Python scalars."""
        df = pd.DataFrame({'id': [1, 2], 'name': ['Ann', 'Bo']})

        result = dataframe_to_records(df)

        assert result == [{'id': 1, 'name': 'Ann'}, {'id': 2, 'name': 'Bo'}]
        assert type(result[0]['id']) is int

    def test_nan_becomes_none(self):
        """Test that missing values are converted to None."""
        df = pd.DataFrame({'value': [1.5, np.nan]})

        result = dataframe_to_records(df)

        assert result == [{'value': 1.5}, {'value': None}]

    def test_timestamps_become_iso_strings(self):
        """Test that datetime cells are rendered as ISO strings."""
        df = pd.DataFrame({'date': pd.to_datetime(['2024-01-15', None])})

        result = dataframe_to_records(df)

        assert result[0]['date'] == '2024-01-15T00:00:00'
        assert result[1]['date'] is None

    def test_non_string_labels_warn(self):
        """Test that integer column labels are stringified with a warning."""
        df = pd.DataFrame([[1, 2]])

        with pytest.warns(UserWarning, match="non-string column labels"):
            result = dataframe_to_records(df)

        assert result == [{'0': 1, '1': 2}]

    def test_string_labels_do_not_warn(self):
        """Test that string labels convert silently."""
        df = pd.DataFrame({'a': [1]})

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            dataframe_to_records(df)

    def test_duplicate_labels_raise_error(self):
        """Test that duplicate column labels are rejected."""
        df = pd.DataFrame([[1, 2]], columns=['a', 'a'])

        with pytest.raises(DuplicateFieldError):
            dataframe_to_records(df)

    def test_no_columns_raises_error(self):
        """Test that a DataFrame without columns has no header."""
        with pytest.raises(EmptyHeaderError):
            dataframe_to_records(pd.DataFrame())

    def test_invalid_type_raises_error(self):
        """Test that non-DataFrame input is rejected."""
        with pytest.raises(TypeError, match="Expected pandas DataFrame"):
            dataframe_to_records([{'a': 1}])


class TestRecordsToDataFrame:
    """Tests for records_to_dataframe"""

    def test_basic_conversion(self):
        """Test column order follows the first record."""
        records = [{'b': 1, 'a': 'x'}, {'a': 'y', 'b': 2}]

        result = records_to_dataframe(records)

        assert list(result.columns) == ['b', 'a']
        assert result['b'].tolist() == [1, 2]
        assert result['a'].tolist() == ['x', 'y']

    def test_empty_input_raises_error(self):
        """Test that empty input is rejected."""
        with pytest.raises(EmptyInputError):
            records_to_dataframe([])

    def test_schema_mismatch_raises_error(self):
        """Test that inconsistent records are rejected."""
        with pytest.raises(SchemaMismatchError):
            records_to_dataframe([{'a': 1}, {'b': 2}])


class TestTabularTransformer:
    """Tests for TabularTransformer"""

    def test_callable_returns_dataframe(self):
        """Test that calling the transformer converts a matrix."""
        transformer = TabularTransformer()

        result = transformer([["id", "name"], [1, "Ann"], [2, "Bo"]])

        assert isinstance(result, pd.DataFrame)
        assert list(result.columns) == ['id', 'name']
        assert result['id'].tolist() == [1, 2]
        assert result['name'].tolist() == ['Ann', 'Bo']

    def test_header_only_matrix(self):
        """Test that a header-only matrix gives an empty DataFrame with columns."""
        result = TabularTransformer().to_dataframe([["a", "b"]])

        assert result.empty
        assert list(result.columns) == ["a", "b"]

    def test_fill_value_pads_short_rows(self):
        """Test that fill_value replaces missing trailing fields."""
        transformer = TabularTransformer(fill_value="n/a")

        result = transformer.to_dataframe([["a", "b", "c"], [1], [2, None, 3]])

        assert result.loc[0, 'b'] == "n/a"
        assert result.loc[0, 'c'] == "n/a"
        assert pd.isna(result.loc[1, 'b'])

    def test_long_row_raises_error(self):
        """Test that shape errors propagate."""
        with pytest.raises(ShapeMismatchError):
            TabularTransformer().to_dataframe([["a"], [1, 2]])

    def test_to_matrix(self):
        """Test DataFrame converted back to a matrix."""
        df = pd.DataFrame({'id': [1, 2], 'name': ['Ann', None]})

        result = TabularTransformer().to_matrix(df)

        assert result == [["id", "name"], [1, "Ann"], [2, None]]

    def test_to_matrix_empty_dataframe_keeps_header(self):
        """Test that a DataFrame without rows gives a header-only matrix."""
        df = pd.DataFrame(columns=['a', 'b'])

        assert TabularTransformer().to_matrix(df) == [["a", "b"]]

    def test_round_trip(self):
        """Test matrix -> DataFrame -> matrix."""
        matrix = [["id", "name"], [1, "Ann"], [2, "Bo"]]
        transformer = TabularTransformer()

        assert transformer.to_matrix(transformer(matrix)) == matrix

    def test_input_not_modified(self):
        """Test that the source DataFrame is unchanged."""
        df = pd.DataFrame({'value': [1.0, np.nan]})
        original = df.copy()

        TabularTransformer().to_matrix(df)

        pd.testing.assert_frame_equal(df, original)
