"""
Query module for RecordQuery.

This module provides:
- Predicate nodes and their comparison/relation kinds
- The predicate collection that runs the single-pass filter
- Filter, group and reduce builders
- The RecordQuery entry point

Example:
    >>> from recordquery.query import RecordQuery
    >>>
    >>> query = RecordQuery(records)
    >>> by_industry = (
    ...     query.filter()
    ...     .by_field(REVENUE).gt(1000)
    ...     .then()
    ...     .group().by_field(INDUSTRY).get()
    ... )
"""

from .predicates import (
    OperationKind,
    RelationKind,
    PredicateNode,
    apply_operation,
)

from .collection import PredicateCollection

from .builders import (
    FilterBuilder,
    FilterResult,
    ChainedQuery,
    GroupBuilder,
    ReduceBuilder,
)

from .engine import RecordQuery

__all__ = [
    # Predicates
    "OperationKind",
    "RelationKind",
    "PredicateNode",
    "apply_operation",
    # Collection
    "PredicateCollection",
    # Builders
    "FilterBuilder",
    "FilterResult",
    "ChainedQuery",
    "GroupBuilder",
    "ReduceBuilder",
    # Entry point
    "RecordQuery",
]
