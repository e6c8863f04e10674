"""
Error classes raised by the tabular converters and the CSV serializer.

Every error derives from ValueError so callers that already guard conversions
with ``except ValueError`` keep working.
"""


class TabularError(ValueError):
    """Base class for malformed tabular input."""


class EmptyHeaderError(TabularError):
    """The header row is missing or has zero fields."""


class ShapeMismatchError(TabularError):
    """A data row has more values than the header has fields."""


class DuplicateFieldError(TabularError):
    """The header names the same field more than once."""


class InconsistentSchemaError(TabularError):
    """Records passed for serialization disagree on their fields."""


class SchemaMismatchError(InconsistentSchemaError):
    """A record's key set differs from the first record's key set."""

    def __init__(self, index: int, missing: list, unexpected: list):
        self.index = index
        self.missing = missing
        self.unexpected = unexpected

        details = []
        if missing:
            details.append(f"missing fields {missing}")
        if unexpected:
            details.append(f"unexpected fields {unexpected}")

        super().__init__(
            f"Record {index} does not match the schema of record 0: "
            f"{', '.join(details)}"
        )


class EmptyInputError(TabularError):
    """No records were given, so no schema can be inferred."""
