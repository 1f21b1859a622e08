"""
Fluent builders over a predicate collection.

Three builders share one ``PredicateCollection``:

- ``FilterBuilder`` adds predicate nodes and returns matching records
- ``GroupBuilder`` buckets matching records by a field's value
- ``ReduceBuilder`` sums or averages a numeric field over matches

Example:
    >>> query = RecordQuery(records)
    >>> energy = (
    ...     query.filter()
    ...     .by_field(INDUSTRY).eq("Energy")
    ...     .and_also()
    ...     .by_field(REVENUE).gte(1000)
    ...     .get()
    ... )
    >>> total = (
    ...     query.filter()
    ...     .by_field(INDUSTRY).in_(["Energy", "Mining"])
    ...     .then()
    ...     .reduce().by_field(REVENUE).sum()
    ... )
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

from ..core.exceptions import QueryStateError
from ..core.record import FieldDescriptor, Record
from ..core.values import Value, to_numeric
from .collection import PredicateCollection
from .predicates import OperationKind, RelationKind


def _require_field(field: Optional[FieldDescriptor], action: str) -> FieldDescriptor:
    if field is None:
        raise QueryStateError(f"Call by_field() before {action}")
    return field


class FilterBuilder:
    """
    Entry state of a filter chain.

    Select a field with ``by_field`` and then compare it. After
    ``and_also()``/``or_else()`` the chain returns here, keeping the
    selected field, so ``eq(1).or_else().eq(2)`` compares the same field
    twice.
    """

    def __init__(self, collection: PredicateCollection):
        self._collection = collection
        self._field: Optional[FieldDescriptor] = None

    @property
    def collection(self) -> PredicateCollection:
        return self._collection

    def by_field(self, field: FieldDescriptor) -> "FilterBuilder":
        """Select the field the next comparison reads."""
        self._field = field
        return self

    def ignore_non_populated_fields(self) -> "FilterBuilder":
        """Stop checking that filtered fields are populated on each record."""
        if self._collection.frozen:
            raise QueryStateError("Predicate chain is frozen; populated-field checking cannot change")
        self._collection.ignore_non_populated_fields = True
        return self

    def _add(self, operation: OperationKind, operand: Any) -> "FilterResult":
        field = _require_field(self._field, "comparing")
        self._collection.add(field, operation, operand)
        return FilterResult(self)

    def eq(self, value: Any) -> "FilterResult":
        """Field equals value."""
        return self._add(OperationKind.EQUAL, value)

    def ne(self, value: Any) -> "FilterResult":
        """Field not equals value."""
        return self._add(OperationKind.NOT_EQUAL, value)

    def gt(self, value: Any) -> "FilterResult":
        """Field greater than value."""
        return self._add(OperationKind.GREATER_THAN, value)

    def gte(self, value: Any) -> "FilterResult":
        """Field greater than or equal to value."""
        return self._add(OperationKind.GREATER_EQUAL, value)

    def lt(self, value: Any) -> "FilterResult":
        """Field less than value."""
        return self._add(OperationKind.LESS_THAN, value)

    def lte(self, value: Any) -> "FilterResult":
        """Field less than or equal to value."""
        return self._add(OperationKind.LESS_EQUAL, value)

    def in_(self, values: Any) -> "FilterResult":
        """Field value in list."""
        return self._add(OperationKind.IS_IN, values)

    def not_in(self, values: Any) -> "FilterResult":
        """Field value not in list."""
        return self._add(OperationKind.IS_NOT_IN, values)

    def is_in(self, values: Any) -> "FilterResult":
        """Alias for in_."""
        return self.in_(values)

    def is_not_in(self, values: Any) -> "FilterResult":
        """Alias for not_in."""
        return self.not_in(values)

    def is_null(self) -> "FilterResult":
        """Field is null (same as eq(None))."""
        return self.eq(None)

    def is_not_null(self) -> "FilterResult":
        """Field is not null (same as ne(None))."""
        return self.ne(None)

    def then(self) -> "ChainedQuery":
        """Freeze the chain and continue with get/group/reduce."""
        self._collection.freeze()
        return ChainedQuery(self._collection)


class FilterResult:
    """State after a comparison: combine, continue or run the filter."""

    def __init__(self, builder: FilterBuilder):
        self._builder = builder

    def and_also(self) -> FilterBuilder:
        """Combine the next comparison with AND."""
        self._builder.collection.relation = RelationKind.AND
        return self._builder

    def or_else(self) -> FilterBuilder:
        """Combine the next comparison with OR."""
        self._builder.collection.relation = RelationKind.OR
        return self._builder

    def then(self) -> "ChainedQuery":
        """Freeze the chain and continue with get/group/reduce."""
        return self._builder.then()

    def get(self, limit: int = -1) -> List[Record]:
        """
        Return matching records.

        Args:
            limit: Maximum number of records (negative = all)
        """
        return self._builder.collection.process(limit)

    def get_first(self) -> Optional[Record]:
        """Return the first matching record, or None."""
        results = self.get(1)
        return results[0] if results else None


class ChainedQuery:
    """A frozen filter chain, ready to run or to feed group/reduce."""

    def __init__(self, collection: PredicateCollection):
        self._collection = collection

    def get(self, limit: int = -1) -> List[Record]:
        """Return matching records (negative limit = all)."""
        return self._collection.process(limit)

    def get_first(self) -> Optional[Record]:
        """Return the first matching record, or None."""
        results = self._collection.process(1)
        return results[0] if results else None

    def group(self) -> "GroupBuilder":
        """Group the records matched by this chain."""
        return GroupBuilder(self._collection)

    def reduce(self) -> "ReduceBuilder":
        """Reduce the records matched by this chain."""
        return ReduceBuilder(self._collection)


class GroupBuilder:
    """Buckets matching records by the value of one field."""

    def __init__(self, collection: PredicateCollection):
        self._collection = collection
        self._field: Optional[FieldDescriptor] = None

    def by_field(self, field: FieldDescriptor) -> "GroupBuilder":
        """Select the group key field."""
        self._field = field
        return self

    def get(self) -> Dict[Value, List[Record]]:
        """
        Group all matching records.

        Returns:
            Buckets keyed by field value, in order of first occurrence;
            records keep source order within each bucket
        """
        field = _require_field(self._field, "get()")
        groups: Dict[Value, List[Record]] = {}
        for record in self._collection.process(-1):
            key = Value.of(record.get_field(field))
            groups.setdefault(key, []).append(record)
        return groups


class ReduceBuilder:
    """Folds a numeric field over matching records."""

    def __init__(self, collection: PredicateCollection):
        self._collection = collection
        self._field: Optional[FieldDescriptor] = None

    def by_field(self, field: FieldDescriptor) -> "ReduceBuilder":
        """Select the numeric field."""
        self._field = field
        return self

    def _accumulate(self, action: str):
        field = _require_field(self._field, action)
        name = field.describe_name()
        total = Decimal(0)
        count = 0
        for record in self._collection.process(-1):
            total += to_numeric(Value.of(record.get_field(field)), name)
            count += 1
        return total, count

    def sum(self) -> Decimal:
        """Exact decimal sum of the field over all matches (0 if none)."""
        total, _ = self._accumulate("sum()")
        return total

    def average(self) -> Decimal:
        """Mean of the field over all matches; exactly 0 when none match."""
        total, count = self._accumulate("average()")
        if count == 0:
            return Decimal(0)
        return total / count
