"""
Pytest fixtures for RecordQuery tests.
"""

import pytest
from datetime import date
from decimal import Decimal
from typing import List

from recordquery import Field, MappingRecord, RecordQuery


NAME = Field("name")
INDUSTRY = Field("industry")
REVENUE = Field("revenue")
EMPLOYEES = Field("employees")
FOUNDED = Field("founded")
RATING = Field("rating")

ACCOUNT_SCHEMA = ["name", "industry", "revenue", "employees", "founded", "rating"]


@pytest.fixture
def accounts() -> List[MappingRecord]:
    """Six account records with mixed kinds and a null industry."""
    rows = [
        {"name": "Acme", "industry": "Energy", "revenue": 1200,
         "employees": 50, "founded": date(1990, 5, 1), "rating": Decimal("4.5")},
        {"name": "Birch", "industry": "Retail", "revenue": 300,
         "employees": 12, "founded": date(2005, 1, 20), "rating": Decimal("3.1")},
        {"name": "Cobalt", "industry": "Mining", "revenue": 800,
         "employees": 200, "founded": date(1975, 9, 9), "rating": Decimal("4.0")},
        {"name": "Delta", "industry": "Energy", "revenue": 450,
         "employees": 30, "founded": date(2012, 3, 15), "rating": Decimal("2.8")},
        {"name": "Ember", "industry": None, "revenue": 0,
         "employees": 3, "founded": date(2020, 7, 4), "rating": Decimal("5.0")},
        {"name": "Fjord", "industry": "Retail", "revenue": 950,
         "employees": 75, "founded": date(1999, 12, 31), "rating": Decimal("3.9")},
    ]
    return [MappingRecord(row, schema=ACCOUNT_SCHEMA) for row in rows]


@pytest.fixture
def query(accounts: List[MappingRecord]) -> RecordQuery:
    """RecordQuery over the account records."""
    return RecordQuery(accounts)


def names(records) -> List[str]:
    """Extract account names, preserving order."""
    return [r.data["name"] for r in records]
