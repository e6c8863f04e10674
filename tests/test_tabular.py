"""
Tests for matrix <-> record conversion.
"""

import pytest
from formatkit import (
    DuplicateFieldError,
    EmptyHeaderError,
    EmptyInputError,
    InconsistentSchemaError,
    SchemaMismatchError,
    ShapeMismatchError,
    TabularError,
    arrays_to_data,
    data_to_arrays,
)


class TestArraysToData:
    """Tests for arrays_to_data"""

    def test_basic_conversion(self):
        """Test header zipped with each data row."""
        matrix = [["id", "name"], [1, "Ann"], [2, "Bo"]]

        result = arrays_to_data(matrix)

        assert result == [{"id": 1, "name": "Ann"}, {"id": 2, "name": "Bo"}]

    def test_field_order_follows_header(self):
        """Test that record key order equals header order."""
        result = arrays_to_data([["z", "a", "m"], [1, 2, 3]])

        assert list(result[0].keys()) == ["z", "a", "m"]

    def test_short_row_padded_with_none(self):
        """Test that missing trailing values become None."""
        result = arrays_to_data([["a", "b", "c"], [1]])

        assert result == [{"a": 1, "b": None, "c": None}]

    def test_long_row_raises_shape_mismatch(self):
        """Test that extra values are rejected instead of dropped."""
        with pytest.raises(ShapeMismatchError, match="Row 1 has 2 values"):
            arrays_to_data([["id"], [1, 2]])

    def test_header_only(self):
        """Test that a header without data rows gives no records."""
        assert arrays_to_data([["id", "name"]]) == []

    def test_empty_header_raises_error(self):
        """Test that a header with zero fields is rejected."""
        with pytest.raises(EmptyHeaderError):
            arrays_to_data([[]])

    def test_empty_matrix_raises_error(self):
        """Test that a matrix without rows has no header."""
        with pytest.raises(EmptyHeaderError):
            arrays_to_data([])

    def test_non_string_header_raises_error(self):
        """Test that header values must be strings."""
        with pytest.raises(TypeError, match="must be strings"):
            arrays_to_data([["id", 2], [1, 2]])

    def test_duplicate_header_raises_error(self):
        """Test that repeated field names are rejected."""
        with pytest.raises(DuplicateFieldError, match="'id'"):
            arrays_to_data([["id", "name", "id"], [1, "Ann", 2]])

    def test_accepts_tuples(self):
        """Test that any sequence works as matrix and row."""
        result = arrays_to_data((("a", "b"), (True, None)))

        assert result == [{"a": True, "b": None}]

    def test_input_not_modified(self):
        """Test that padding does not touch the input rows."""
        matrix = [["a", "b"], [1]]
        arrays_to_data(matrix)

        assert matrix == [["a", "b"], [1]]

    def test_errors_are_value_errors(self):
        """Test that tabular errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            arrays_to_data([["id"], [1, 2]])
        assert issubclass(ShapeMismatchError, TabularError)


class TestDataToArrays:
    """Tests for data_to_arrays"""

    def test_basic_conversion(self):
        """Test records converted to header plus rows."""
        records = [{"id": 1, "name": "Ann"}, {"id": 2, "name": "Bo"}]

        assert data_to_arrays(records) == [["id", "name"], [1, "Ann"], [2, "Bo"]]

    def test_later_records_reordered_to_first(self):
        """Test that the first record's key order is canonical."""
        records = [{"a": 1, "b": 2}, {"b": 4, "a": 3}]

        assert data_to_arrays(records) == [["a", "b"], [1, 2], [3, 4]]

    def test_empty_input_raises_error(self):
        """Test that an empty record list has no schema."""
        with pytest.raises(EmptyInputError):
            data_to_arrays([])

    def test_schema_mismatch_raises_error(self):
        """Test that differing key sets are rejected."""
        with pytest.raises(SchemaMismatchError) as exc_info:
            data_to_arrays([{"a": 1, "b": 2}, {"a": 1, "c": 3}])

        assert exc_info.value.index == 1
        assert exc_info.value.missing == ["b"]
        assert exc_info.value.unexpected == ["c"]

    def test_missing_key_raises_error(self):
        """Test strict equality when a record lacks a field."""
        with pytest.raises(SchemaMismatchError, match="missing fields"):
            data_to_arrays([{"a": 1, "b": 2}, {"a": 1}])

    def test_extra_key_raises_error(self):
        """Test strict equality when a record has an extra field."""
        with pytest.raises(SchemaMismatchError, match="unexpected fields"):
            data_to_arrays([{"a": 1}, {"a": 1, "b": 2}])

    def test_schema_mismatch_is_inconsistent_schema(self):
        """Test that schema mismatches surface as InconsistentSchemaError."""
        with pytest.raises(InconsistentSchemaError):
            data_to_arrays([{"a": 1}, {"b": 1}])


class TestRoundTrip:
    """Tests for the matrix -> records -> matrix round trip"""

    @pytest.mark.parametrize("matrix", [
        [["id", "name"], [1, "Ann"], [2, "Bo"]],
        [["a"], [None], [True], [1.5]],
        [["x", "y", "z"], ["", False, 0]],
    ])
    def test_round_trip(self, matrix):
        """Test that data_to_arrays inverts arrays_to_data."""
        assert data_to_arrays(arrays_to_data(matrix)) == matrix

    def test_round_trip_from_records(self):
        """Test that arrays_to_data inverts data_to_arrays."""
        records = [{"id": 1, "name": "Ann"}, {"id": 2, "name": None}]

        assert arrays_to_data(data_to_arrays(records)) == records
