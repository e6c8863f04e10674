"""
Shared building blocks: scalar types, tagged tabular containers and errors.
"""

from .errors import (
    TabularError,
    EmptyHeaderError,
    ShapeMismatchError,
    DuplicateFieldError,
    InconsistentSchemaError,
    SchemaMismatchError,
    EmptyInputError,
)
from .types import Scalar, Record, Matrix, RecordSet, is_scalar

__all__ = [
    'TabularError',
    'EmptyHeaderError',
    'ShapeMismatchError',
    'DuplicateFieldError',
    'InconsistentSchemaError',
    'SchemaMismatchError',
    'EmptyInputError',
    'Scalar',
    'Record',
    'Matrix',
    'RecordSet',
    'is_scalar',
]
