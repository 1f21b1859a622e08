"""
Value model for RecordQuery.

Every field value and every predicate operand is wrapped in a ``Value``,
a small tagged union over the kinds the engine knows how to compare:

- STRING, INTEGER, DECIMAL, BOOLEAN
- DATE, DATETIME, TIME
- IDENTIFIER (UUID)
- NULL
- LIST (of Values, used as the operand of in/not in)

Comparison and containment are only defined between values of the same
kind, or against NULL. Mixing two different non-null kinds raises instead
of coercing.

Example:
    >>> compare(Value.of(3), Value.of(5))
    -1
    >>> contained_in(Value.of("b"), Value.of(["a", "b"]))
    True
    >>> compare(Value.of("3"), Value.of(Decimal("3")))
    Traceback (most recent call last):
        ...
    UnsupportedComparisonError: ...
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Tuple
import uuid

import numpy as np

from .exceptions import (
    InvalidNumericFormatError,
    UnsupportedComparisonError,
    UnsupportedContainmentError,
    UnsupportedValueTypeError,
)


class ValueKind(str, Enum):
    """Kinds of values the engine can compare."""

    STRING = "string"
    INTEGER = "integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    IDENTIFIER = "identifier"
    NULL = "null"
    LIST = "list"


@dataclass(frozen=True)
class Value:
    """
    An immutable, hashable tagged value.

    Two values are equal when both kind and payload are equal, so
    ``Value.of(1) != Value.of(Decimal(1))``.

    Attributes:
        kind: The value kind
        payload: The wrapped Python object (a tuple of Values for LIST)
    """

    kind: ValueKind
    payload: Any = None

    @classmethod
    def of(cls, raw: Any) -> "Value":
        """
        Wrap a raw Python object.

        Args:
            raw: A Python object, numpy scalar/array, or an existing Value

        Returns:
            The corresponding Value

        Raises:
            UnsupportedValueTypeError: If the object has no matching kind
        """
        if isinstance(raw, Value):
            return raw

        if isinstance(raw, np.ndarray):
            raw = raw.tolist()
        elif isinstance(raw, np.generic):
            raw = raw.item()

        if raw is None:
            return NULL
        # bool is a subclass of int, datetime of date
        if isinstance(raw, bool):
            return cls(ValueKind.BOOLEAN, raw)
        if isinstance(raw, int):
            return cls(ValueKind.INTEGER, raw)
        if isinstance(raw, float):
            raw = Decimal(str(raw))
        if isinstance(raw, Decimal):
            if not raw.is_finite():
                raise UnsupportedValueTypeError(
                    f"Non-finite decimal {raw} cannot be compared"
                )
            return cls(ValueKind.DECIMAL, raw)
        if isinstance(raw, str):
            return cls(ValueKind.STRING, raw)
        if isinstance(raw, datetime):
            return cls(ValueKind.DATETIME, raw)
        if isinstance(raw, date):
            return cls(ValueKind.DATE, raw)
        if isinstance(raw, time):
            return cls(ValueKind.TIME, raw)
        if isinstance(raw, uuid.UUID):
            return cls(ValueKind.IDENTIFIER, raw)
        if isinstance(raw, (list, tuple)):
            return cls(ValueKind.LIST, tuple(cls.of(item) for item in raw))

        raise UnsupportedValueTypeError(
            f"Unsupported value type: {type(raw).__name__}"
        )

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def to_python(self) -> Any:
        """Unwrap back to a plain Python object."""
        if self.kind is ValueKind.LIST:
            return [item.to_python() for item in self.payload]
        return self.payload

    def __repr__(self) -> str:
        if self.kind is ValueKind.NULL:
            return "Value(null)"
        return f"Value({self.kind.value}: {self.payload!r})"


NULL = Value(ValueKind.NULL)


def _describe(field_name: Optional[str]) -> str:
    return f" on field '{field_name}'" if field_name else ""


def _sign(left: Any, right: Any) -> int:
    if left == right:
        return 0
    return -1 if left < right else 1


def compare(
    left: Value,
    right: Value,
    field_name: Optional[str] = None,
) -> int:
    """
    Order two values.

    NULL equals NULL and sorts after every non-null value.

    Args:
        left: Left-hand value (usually the record's field value)
        right: Right-hand value (usually the predicate operand)
        field_name: Field name used in error messages

    Returns:
        -1, 0 or 1

    Raises:
        UnsupportedComparisonError: If both values are non-null and of
            different kinds
    """
    if left.is_null and right.is_null:
        return 0
    if left.is_null:
        return 1
    if right.is_null:
        return -1

    if left.kind is not right.kind:
        raise UnsupportedComparisonError(
            f"Cannot compare {left.kind.value} with {right.kind.value}"
            f"{_describe(field_name)}"
        )

    if left.kind is ValueKind.LIST:
        return _compare_lists(left.payload, right.payload, field_name)

    try:
        return _sign(left.payload, right.payload)
    except TypeError as e:
        # e.g. naive vs aware datetimes
        raise UnsupportedComparisonError(
            f"Cannot order {left.payload!r} and {right.payload!r}"
            f"{_describe(field_name)}"
        ) from e


def _compare_lists(
    left: Tuple[Value, ...],
    right: Tuple[Value, ...],
    field_name: Optional[str],
) -> int:
    for a, b in zip(left, right):
        result = compare(a, b, field_name)
        if result != 0:
            return result
    return _sign(len(left), len(right))


def contained_in(
    value: Value,
    operand: Value,
    field_name: Optional[str] = None,
) -> bool:
    """
    Check whether a value equals one of a list's elements.

    Each element is compared with ``compare``, so the result matches
    OR-ing equality checks: every element is tested, null equals null,
    and a non-null element of another kind raises.

    Args:
        value: The value to look for
        operand: A LIST value
        field_name: Field name used in error messages

    Returns:
        True if any element equals the value

    Raises:
        UnsupportedContainmentError: If the operand is not a LIST
        UnsupportedComparisonError: If an element is of another non-null kind
    """
    if operand.kind is not ValueKind.LIST:
        raise UnsupportedContainmentError(
            f"Expected a list operand{_describe(field_name)}, "
            f"got {operand.kind.value}"
        )
    results = [compare(value, element, field_name) == 0 for element in operand.payload]
    return any(results)


def to_numeric(value: Value, field_name: Optional[str] = None) -> Decimal:
    """
    Convert a value to an exact decimal.

    Args:
        value: An INTEGER, DECIMAL or numeric STRING value
        field_name: Field name used in error messages

    Returns:
        The decimal representation

    Raises:
        InvalidNumericFormatError: If a string does not parse as a number
        UnsupportedValueTypeError: For any other kind
    """
    if value.kind is ValueKind.INTEGER:
        return Decimal(value.payload)
    if value.kind is ValueKind.DECIMAL:
        return value.payload
    if value.kind is ValueKind.STRING:
        try:
            number = Decimal(value.payload.strip())
        except InvalidOperation:
            number = None
        if number is None or not number.is_finite():
            raise InvalidNumericFormatError(
                f"Invalid numeric format{_describe(field_name)}: "
                f"{value.payload!r}"
            )
        return number

    raise UnsupportedValueTypeError(
        f"Expected a number or numeric string{_describe(field_name)}, "
        f"got {value.kind.value}"
    )
