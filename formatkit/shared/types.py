"""
Scalar and container types for tabular data.
"""

import numbers
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Union

Scalar = Optional[Union[str, int, float, bool]]
Record = Dict[str, Scalar]


def is_scalar(value: Any) -> bool:
    """
    Check whether a value is one of the permitted field value types.

    numpy numeric scalars count as numbers since they register with
    ``numbers.Real``.
    """
    return value is None or isinstance(value, (str, bool, numbers.Real))


@dataclass(frozen=True)
class Matrix:
    """
    Tag for a header row followed by positional data rows.

    Args:
        rows: Row 0 is the header, the remaining rows are data rows
    """

    rows: Sequence[Sequence[Scalar]]


@dataclass(frozen=True)
class RecordSet:
    """
    Tag for an ordered sequence of schema-homogeneous records.

    Args:
        records: One mapping of field name to value per data row
    """

    records: Sequence[Record]
