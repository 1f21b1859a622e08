"""
Predicate collection and the single-pass filter.

A ``PredicateCollection`` accumulates predicate nodes for one query chain
and evaluates them against a record sequence:

1. Nodes are grouped by field (fields in order of first use, nodes in
   insertion order within a field).
2. Records are streamed once, stopping as soon as ``limit`` matches are
   collected.
3. Unless disabled, every field carrying a node must be populated on each
   record; an unpopulated field aborts the whole pass.
4. Each node's result is folded into a running flag with the node's
   relation. There is no short-circuit: every node is evaluated.

Example:
    >>> collection = PredicateCollection(records)
    >>> collection.add(Field("industry"), OperationKind.EQUAL, "Energy")
    >>> collection.relation = RelationKind.OR
    >>> collection.add(Field("revenue"), OperationKind.GREATER_THAN, 1000)
    >>> matches = collection.process(limit=10)
"""

from __future__ import annotations

from itertools import islice
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from ..core.exceptions import QueryStateError, UnpopulatedFieldError
from ..core.record import FieldDescriptor, Record
from ..core.values import Value
from ..utils.logging import get_logger
from .predicates import OperationKind, PredicateNode, RelationKind, combine

logger = get_logger(__name__)


class PredicateCollection:
    """
    Ordered, deduplicated set of predicate nodes over a record sequence.

    One collection is shared by every stage of a chain (filter, then group
    or reduce) so later stages see all accumulated predicates.

    Attributes:
        records: The record sequence evaluated by ``process``
        relation: Relation given to the next node added
        ignore_non_populated_fields: Skip the populated-field check
    """

    def __init__(
        self,
        records: Iterable[Record],
        ignore_non_populated_fields: bool = False,
    ):
        self.records = records
        self.relation = RelationKind.AND
        self.ignore_non_populated_fields = ignore_non_populated_fields
        # dict keys as an insertion-ordered set
        self._nodes: Dict[PredicateNode, None] = {}
        self._frozen = False

    @property
    def nodes(self) -> List[PredicateNode]:
        """Nodes in insertion order."""
        return list(self._nodes)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject further nodes."""
        self._frozen = True

    def add(
        self,
        field: FieldDescriptor,
        operation: OperationKind,
        operand: Any,
    ) -> PredicateNode:
        """
        Add a node using the relation currently in force.

        Args:
            field: Field to compare
            operation: Comparison to apply
            operand: Raw operand or Value

        Returns:
            The node (an existing equal node is not duplicated)

        Raises:
            QueryStateError: If the collection is frozen
        """
        if self._frozen:
            raise QueryStateError(
                "Predicate chain is frozen; start a new filter() to add conditions"
            )
        node = PredicateNode(
            field=field,
            operand=Value.of(operand),
            operation=operation,
            relation=self.relation,
        )
        self._nodes[node] = None
        return node

    def group_by_field(self) -> Dict[FieldDescriptor, List[PredicateNode]]:
        """Map each field to its nodes, preserving insertion order."""
        grouped: Dict[FieldDescriptor, List[PredicateNode]] = {}
        for node in self._nodes:
            grouped.setdefault(node.field, []).append(node)
        return grouped

    def matches(
        self,
        record: Record,
        grouped: Mapping[FieldDescriptor, List[PredicateNode]],
        position: Optional[int] = None,
    ) -> bool:
        """
        Evaluate all nodes against one record.

        Args:
            record: The record to test
            grouped: Output of ``group_by_field``
            position: Index of the record in the sequence, for errors

        Returns:
            True if the record matches

        Raises:
            UnpopulatedFieldError: If a filtered field is not populated
            FieldNotFoundError: If the record has no such field
        """
        if not self.ignore_non_populated_fields:
            populated = record.get_populated_field_names()
            for field in grouped:
                name = field.describe_name()
                if name not in populated:
                    where = f" on record #{position}" if position is not None else ""
                    raise UnpopulatedFieldError(
                        f"Field '{name}' is not populated{where}",
                        field_name=name,
                    )

        running = True
        first = True
        for field, nodes in grouped.items():
            value = Value.of(record.get_field(field))
            for node in nodes:
                result = node.evaluate(value)
                if first:
                    running = result
                    first = False
                else:
                    running = combine(running, result, node.relation)
        return running

    def iter_matches(self) -> Iterator[Record]:
        """Lazily yield matching records in source order."""
        grouped = self.group_by_field()
        for position, record in enumerate(self.records):
            if self.matches(record, grouped, position):
                yield record

    def process(self, limit: int = -1) -> List[Record]:
        """
        Run the filter over the record sequence.

        Args:
            limit: Maximum number of matches (negative = unbounded)

        Returns:
            Matching records in source order
        """
        if limit == 0:
            return []

        logger.debug("Processing %d predicate(s), limit=%d", len(self._nodes), limit)

        matches = self.iter_matches()
        if limit > 0:
            matches = islice(matches, limit)
        results = list(matches)

        logger.debug("Matched %d record(s)", len(results))
        return results

    def describe(self) -> List[Dict[str, Any]]:
        """Nodes as plain dictionaries, in insertion order."""
        return [node.to_dict() for node in self._nodes]

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"PredicateCollection({self.nodes})"
