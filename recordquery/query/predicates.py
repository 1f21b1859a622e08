"""
Predicate nodes for RecordQuery.

A predicate node is one field comparison plus the relation (AND/OR) that
links its result to everything evaluated before it.

Example:
    >>> node = PredicateNode(
    ...     field=Field("industry"),
    ...     operand=Value.of("Energy"),
    ...     operation=OperationKind.EQUAL,
    ... )
    >>> node.evaluate(Value.of("Energy"))
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..core.record import FieldDescriptor
from ..core.values import Value, compare, contained_in


class OperationKind(str, Enum):
    """Comparison operations."""

    EQUAL = "eq"
    NOT_EQUAL = "ne"
    LESS_THAN = "lt"
    LESS_EQUAL = "lte"
    GREATER_THAN = "gt"
    GREATER_EQUAL = "gte"
    IS_IN = "in"
    IS_NOT_IN = "nin"


class RelationKind(str, Enum):
    """Combinator linking a node to the nodes evaluated before it."""

    AND = "and"
    OR = "or"


def apply_operation(
    operation: OperationKind,
    value: Value,
    operand: Value,
    field_name: Optional[str] = None,
) -> bool:
    """
    Evaluate one operation between a field value and an operand.

    Args:
        operation: The operation to apply
        value: The record's field value
        operand: The predicate operand
        field_name: Field name used in error messages

    Returns:
        The comparison result
    """
    if operation == OperationKind.IS_IN:
        return contained_in(value, operand, field_name)

    if operation == OperationKind.IS_NOT_IN:
        return not contained_in(value, operand, field_name)

    order = compare(value, operand, field_name)

    if operation == OperationKind.EQUAL:
        return order == 0

    if operation == OperationKind.NOT_EQUAL:
        return order != 0

    if operation == OperationKind.LESS_THAN:
        return order < 0

    if operation == OperationKind.LESS_EQUAL:
        return order <= 0

    if operation == OperationKind.GREATER_THAN:
        return order > 0

    if operation == OperationKind.GREATER_EQUAL:
        return order >= 0

    raise ValueError(f"Unknown operation: {operation}")


def combine(running: bool, result: bool, relation: RelationKind) -> bool:
    """Fold a node result into the running match flag."""
    if relation == RelationKind.OR:
        return running or result
    return running and result


@dataclass(frozen=True)
class PredicateNode:
    """
    A single field comparison.

    Nodes are immutable and compare structurally on all four attributes,
    so adding an identical node twice keeps one.

    Attributes:
        field: Field the comparison reads
        operand: Value compared against
        operation: Comparison to apply
        relation: Relation in force when the node was added
    """

    field: FieldDescriptor
    operand: Value
    operation: OperationKind
    relation: RelationKind = RelationKind.AND

    def evaluate(self, value: Value) -> bool:
        """Evaluate the node against a field value."""
        return apply_operation(
            self.operation,
            value,
            self.operand,
            self.field.describe_name(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field.describe_name(),
            "operation": self.operation.value,
            "operand": self.operand.to_python(),
            "relation": self.relation.value,
        }

    def __repr__(self) -> str:
        return (
            f"PredicateNode({self.relation.value} {self.field.describe_name()} "
            f"{self.operation.value} {self.operand!r})"
        )
