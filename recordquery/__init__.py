"""
RecordQuery - fluent filtering, grouping and aggregation over in-memory records.

Example:
    >>> from recordquery import RecordQuery, MappingRecord, Field
    >>>
    >>> INDUSTRY, REVENUE = Field("industry"), Field("revenue")
    >>> query = RecordQuery([
    ...     MappingRecord({"industry": "Energy", "revenue": 1200}),
    ...     MappingRecord({"industry": "Retail", "revenue": 300}),
    ...     MappingRecord({"industry": "Energy", "revenue": 800}),
    ... ])
    >>>
    >>> # Filter
    >>> big = query.filter().by_field(REVENUE).gte(800).get()
    >>>
    >>> # Filter, then aggregate
    >>> query.filter().by_field(INDUSTRY).eq("Energy").then().reduce().by_field(REVENUE).average()
    Decimal('1000')
"""

from .core import (
    # Values
    Value,
    ValueKind,
    NULL,
    # Records
    Record,
    FieldDescriptor,
    Field,
    MappingRecord,
    ObjectRecord,
    # Exceptions
    RecordQueryError,
    QueryStateError,
    ConfigError,
    FieldNotFoundError,
    UnpopulatedFieldError,
    UnsupportedComparisonError,
    UnsupportedContainmentError,
    InvalidNumericFormatError,
    UnsupportedValueTypeError,
)

from .query import (
    RecordQuery,
    OperationKind,
    RelationKind,
    PredicateNode,
    PredicateCollection,
)

from .config import QuerySettings, load_config

__version__ = "0.1.0"
__author__ = "RecordQuery Team"

__all__ = [
    # Entry point
    "RecordQuery",
    # Values
    "Value",
    "ValueKind",
    "NULL",
    # Records
    "Record",
    "FieldDescriptor",
    "Field",
    "MappingRecord",
    "ObjectRecord",
    # Predicates
    "OperationKind",
    "RelationKind",
    "PredicateNode",
    "PredicateCollection",
    # Config
    "QuerySettings",
    "load_config",
    # Exceptions
    "RecordQueryError",
    "QueryStateError",
    "ConfigError",
    "FieldNotFoundError",
    "UnpopulatedFieldError",
    "UnsupportedComparisonError",
    "UnsupportedContainmentError",
    "InvalidNumericFormatError",
    "UnsupportedValueTypeError",
]
