"""
Record and field descriptor interfaces.

The engine never assumes a concrete record shape. Anything implementing
``Record`` can be queried; two adapters are bundled:

- ``MappingRecord`` wraps a dict, optionally with a declared schema
- ``ObjectRecord`` wraps an arbitrary object and reads its attributes

Example:
    >>> record = MappingRecord(
    ...     {"name": "Acme", "revenue": 1200},
    ...     schema=["name", "revenue", "industry"],
    ... )
    >>> record.get_field(Field("name"))
    Value(string: 'Acme')
    >>> record.get_populated_field_names()
    {'name', 'revenue'}
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Iterable, Mapping, Optional, Set

from .exceptions import FieldNotFoundError
from .values import NULL, Value


class FieldDescriptor(ABC):
    """
    Handle identifying one field of a record type.

    Implementations must hash and compare structurally so that two
    descriptors naming the same field are interchangeable as dict keys.
    """

    @abstractmethod
    def describe_name(self) -> str:
        """Return the field name (used for populated checks and errors)."""
        pass


@dataclass(frozen=True)
class Field(FieldDescriptor):
    """Field descriptor identified by name."""

    name: str

    def describe_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


class Record(ABC):
    """Abstract base class for queryable records."""

    @abstractmethod
    def get_field(self, descriptor: FieldDescriptor) -> Any:
        """
        Get a field's value.

        Args:
            descriptor: The field to read

        Returns:
            A Value, or a raw object accepted by ``Value.of``

        Raises:
            FieldNotFoundError: If the record type has no such field
        """
        pass

    @abstractmethod
    def get_populated_field_names(self) -> Set[str]:
        """Return the names of the fields populated on this record."""
        pass


class MappingRecord(Record):
    """
    Record backed by a mapping.

    Keys present in the mapping are populated, even when their value is
    None. With a schema, declared fields missing from the mapping read as
    null and are reported as unpopulated; names outside the schema raise
    ``FieldNotFoundError``. Without a schema every missing key raises.
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        schema: Optional[Iterable[str]] = None,
    ):
        self.data = data
        self.schema = frozenset(schema) if schema is not None else None

    def get_field(self, descriptor: FieldDescriptor) -> Value:
        name = descriptor.describe_name()
        if name in self.data:
            return Value.of(self.data[name])
        if self.schema is not None and name in self.schema:
            return NULL
        raise FieldNotFoundError(f"Field not found: '{name}'", field_name=name)

    def get_populated_field_names(self) -> Set[str]:
        return set(self.data.keys())

    def __repr__(self) -> str:
        return f"MappingRecord({dict(self.data)!r})"


class ObjectRecord(Record):
    """
    Record backed by an object's attributes.

    Dataclass fields (or, for plain objects, instance attributes) are
    populated. Reading an attribute the object does not have raises
    ``FieldNotFoundError``.
    """

    def __init__(self, obj: Any):
        self.obj = obj

    def get_field(self, descriptor: FieldDescriptor) -> Value:
        name = descriptor.describe_name()
        try:
            raw = getattr(self.obj, name)
        except AttributeError:
            raise FieldNotFoundError(
                f"Field not found on {type(self.obj).__name__}: '{name}'",
                field_name=name,
            ) from None
        return Value.of(raw)

    def get_populated_field_names(self) -> Set[str]:
        if is_dataclass(self.obj):
            return {f.name for f in fields(self.obj)}
        return set(getattr(self.obj, "__dict__", {}).keys())

    def __repr__(self) -> str:
        return f"ObjectRecord({self.obj!r})"
