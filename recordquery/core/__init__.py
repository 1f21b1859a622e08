"""
Core components for RecordQuery.
"""

from .values import (
    Value,
    ValueKind,
    NULL,
    compare,
    contained_in,
    to_numeric,
)
from .record import (
    Record,
    FieldDescriptor,
    Field,
    MappingRecord,
    ObjectRecord,
)
from .exceptions import (
    RecordQueryError,
    QueryStateError,
    ConfigError,
    FieldError,
    FieldNotFoundError,
    UnpopulatedFieldError,
    ValueModelError,
    UnsupportedComparisonError,
    UnsupportedContainmentError,
    InvalidNumericFormatError,
    UnsupportedValueTypeError,
)

__all__ = [
    # Values
    "Value",
    "ValueKind",
    "NULL",
    "compare",
    "contained_in",
    "to_numeric",
    # Records
    "Record",
    "FieldDescriptor",
    "Field",
    "MappingRecord",
    "ObjectRecord",
    # Exceptions
    "RecordQueryError",
    "QueryStateError",
    "ConfigError",
    "FieldError",
    "FieldNotFoundError",
    "UnpopulatedFieldError",
    "ValueModelError",
    "UnsupportedComparisonError",
    "UnsupportedContainmentError",
    "InvalidNumericFormatError",
    "UnsupportedValueTypeError",
]
