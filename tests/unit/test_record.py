"""
Unit tests for record adapters and field descriptors.
"""

import pytest
from dataclasses import dataclass

from recordquery.core.record import Field, MappingRecord, ObjectRecord
from recordquery.core.values import NULL, Value
from recordquery.core.exceptions import FieldNotFoundError


class TestField:
    """Tests for the Field descriptor."""

    def test_structural_equality(self):
        """Test two descriptors naming the same field are interchangeable."""
        assert Field("name") == Field("name")
        assert {Field("name"): 1}[Field("name")] == 1

    def test_describe_name(self):
        assert Field("revenue").describe_name() == "revenue"


class TestMappingRecord:
    """Tests for MappingRecord."""

    def test_get_field(self):
        record = MappingRecord({"name": "Acme"})
        assert record.get_field(Field("name")) == Value.of("Acme")

    def test_explicit_none_is_populated(self):
        """Test a key holding None counts as populated."""
        record = MappingRecord({"name": None})
        assert record.get_populated_field_names() == {"name"}
        assert record.get_field(Field("name")) == NULL

    def test_missing_without_schema(self):
        """Test missing keys raise without a schema."""
        record = MappingRecord({"name": "Acme"})
        with pytest.raises(FieldNotFoundError) as exc_info:
            record.get_field(Field("revenue"))
        assert exc_info.value.field_name == "revenue"

    def test_schema_field_not_populated(self):
        """Test declared but absent fields read as null and are unpopulated."""
        record = MappingRecord({"name": "Acme"}, schema=["name", "revenue"])
        assert record.get_field(Field("revenue")) == NULL
        assert "revenue" not in record.get_populated_field_names()

    def test_outside_schema(self):
        record = MappingRecord({"name": "Acme"}, schema=["name"])
        with pytest.raises(FieldNotFoundError):
            record.get_field(Field("bogus"))


@dataclass
class Contact:
    email: str
    age: int


class Plain:
    def __init__(self):
        self.city = "Oslo"


class TestObjectRecord:
    """Tests for ObjectRecord."""

    def test_dataclass_fields(self):
        record = ObjectRecord(Contact("a@b.c", 30))
        assert record.get_field(Field("age")) == Value.of(30)
        assert record.get_populated_field_names() == {"email", "age"}

    def test_plain_object(self):
        record = ObjectRecord(Plain())
        assert record.get_populated_field_names() == {"city"}
        assert record.get_field(Field("city")) == Value.of("Oslo")

    def test_missing_attribute(self):
        record = ObjectRecord(Plain())
        with pytest.raises(FieldNotFoundError, match="zip"):
            record.get_field(Field("zip"))
