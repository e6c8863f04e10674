"""
Conversion between the matrix and record representations of tabular data.
"""

from typing import List, Sequence
from formatkit.shared.errors import (
    DuplicateFieldError,
    EmptyHeaderError,
    EmptyInputError,
    SchemaMismatchError,
    ShapeMismatchError,
)
from formatkit.shared.types import Record, Scalar


def validate_header(header: Sequence[Scalar]) -> List[str]:
    """
    Validate a header row and return it as a list of field names.

    Args:
        header: Candidate header row

    Returns:
        list[str]: Field names in header order

    Raises:
        EmptyHeaderError: If the header has zero fields
        TypeError: If any field name is not a string
        DuplicateFieldError: If a field name appears more than once
    """
    fields = list(header)

    if not fields:
        raise EmptyHeaderError("Header row must contain at least one field")

    non_strings = [name for name in fields if not isinstance(name, str)]
    if non_strings:
        raise TypeError(
            f"Header field names must be strings, got {non_strings!r}"
        )

    seen = set()
    duplicates = []
    for name in fields:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)

    if duplicates:
        raise DuplicateFieldError(
            f"Header contains duplicate field names: {duplicates}"
        )

    return fields


def align_row(row: Sequence[Scalar], width: int, row_number: int) -> List[Scalar]:
    """
    Pad a data row with None up to the header width.

    Raises:
        ShapeMismatchError: If the row is longer than the header
    """
    values = list(row)

    if len(values) > width:
        raise ShapeMismatchError(
            f"Row {row_number} has {len(values)} values but the header "
            f"has {width} fields"
        )

    return values + [None] * (width - len(values))


def arrays_to_data(matrix: Sequence[Sequence[Scalar]]) -> List[Record]:
    """
    Convert a matrix (header row plus data rows) into a list of records.

    Each data row is zipped positionally with the header. Short rows are
    padded with None; long rows are rejected rather than truncated.

    Args:
        matrix: Row 0 is the header, rows 1..n are data rows

    Returns:
        list[dict]: One record per data row, keys in header order

    Raises:
        EmptyHeaderError: If the matrix is empty or the header has no fields
        ShapeMismatchError: If a data row is longer than the header
        DuplicateFieldError: If the header repeats a field name

    Example:
        arrays_to_data([["id", "name"], [1, "Ann"], [2, "Bo"]])
        # [{'id': 1, 'name': 'Ann'}, {'id': 2, 'name': 'Bo'}]
    """
    if not matrix:
        raise EmptyHeaderError("Matrix has no header row")

    header = validate_header(matrix[0])
    width = len(header)

    return [
        dict(zip(header, align_row(row, width, row_number)))
        for row_number, row in enumerate(matrix[1:], start=1)
    ]


def data_to_arrays(records: Sequence[Record]) -> List[List[Scalar]]:
    """
    Convert a list of records back into a matrix.

    The first record's key order is the canonical header. Every other record
    must have exactly the same set of keys, in any order.

    Args:
        records: Schema-homogeneous records

    Returns:
        list[list]: Header row followed by one row per record

    Raises:
        EmptyInputError: If no records are given
        SchemaMismatchError: If a record's keys differ from the first record's
    """
    if not records:
        raise EmptyInputError("Cannot infer a header from an empty record set")

    header = list(records[0].keys())
    expected = set(header)
    matrix: List[List[Scalar]] = [header]

    for index, record in enumerate(records):
        keys = set(record.keys())
        if keys != expected:
            raise SchemaMismatchError(
                index,
                missing=[name for name in header if name not in keys],
                unexpected=[name for name in record if name not in expected],
            )
        matrix.append([record[name] for name in header])

    return matrix
