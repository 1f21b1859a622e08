"""
Custom exceptions for RecordQuery.
"""

from typing import Optional


class RecordQueryError(Exception):
    """Base exception for RecordQuery."""
    pass


class QueryStateError(RecordQueryError):
    """Builder used out of order (no field selected, frozen chain)."""
    pass


class ConfigError(RecordQueryError):
    """Configuration file could not be applied."""
    pass


class FieldError(RecordQueryError):
    """Error related to a record field."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        super().__init__(message)
        self.field_name = field_name


class FieldNotFoundError(FieldError):
    """Field does not exist on the record type."""
    pass


class UnpopulatedFieldError(FieldError):
    """Field exists but is not populated on a record."""
    pass


class ValueModelError(RecordQueryError):
    """Error related to value comparison or conversion."""
    pass


class UnsupportedComparisonError(ValueModelError):
    """Operands are of different, non-null kinds."""
    pass


class UnsupportedContainmentError(ValueModelError):
    """Containment operand is not a list."""
    pass


class InvalidNumericFormatError(ValueModelError):
    """String value cannot be parsed as a number."""
    pass


class UnsupportedValueTypeError(ValueModelError):
    """Value kind not supported by the requested operation."""
    pass
