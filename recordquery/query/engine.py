"""
Entry point for querying a record sequence.

Example:
    >>> from recordquery import RecordQuery, MappingRecord, Field
    >>>
    >>> records = [
    ...     MappingRecord({"name": "Acme", "industry": "Energy", "revenue": 1200}),
    ...     MappingRecord({"name": "Birch", "industry": "Retail", "revenue": 300}),
    ... ]
    >>> query = RecordQuery(records)
    >>> query.filter().by_field(Field("industry")).eq("Energy").get_first()
    MappingRecord({'name': 'Acme', 'industry': 'Energy', 'revenue': 1200})
    >>> query.reduce().by_field(Field("revenue")).sum()
    Decimal('1500')
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Iterable, Optional

from ..config.settings import QuerySettings, get_default_config_path, load_config
from ..core.record import Record
from ..utils.logging import get_logger
from .builders import ChainedQuery, FilterBuilder, GroupBuilder, ReduceBuilder
from .collection import PredicateCollection

logger = get_logger(__name__)


class RecordQuery:
    """
    Wraps a record sequence and hands out filter, group and reduce builders.

    Every builder obtained here starts a fresh predicate chain. One-shot
    iterators are read into a list up front so that any number of
    terminal calls can run against the same records; re-iterable
    sequences are used as given.

    Args:
        records: Records implementing the ``Record`` interface
        settings: Optional settings; when omitted, settings come from
            ``recordquery.yaml`` or ``RECORDQUERY_CONFIG`` if present,
            otherwise defaults apply
    """

    def __init__(
        self,
        records: Iterable[Record],
        settings: Optional[QuerySettings] = None,
    ):
        if isinstance(records, Iterator):
            records = list(records)
            logger.debug("Materialized %d records from a one-shot iterator", len(records))
        self.records = records
        if settings is not None or get_default_config_path() is not None:
            settings = settings or load_config()
            settings.configure_logging()
        self.settings = settings or QuerySettings()

    def _new_collection(self) -> PredicateCollection:
        return PredicateCollection(
            self.records,
            ignore_non_populated_fields=self.settings.ignore_non_populated_fields,
        )

    def filter(self) -> FilterBuilder:
        """Start a filter chain."""
        return FilterBuilder(self._new_collection())

    def group(self) -> GroupBuilder:
        """Group all records (no predicates)."""
        return ChainedQuery(self._new_collection()).group()

    def reduce(self) -> ReduceBuilder:
        """Reduce over all records (no predicates)."""
        return ChainedQuery(self._new_collection()).reduce()

    def __repr__(self) -> str:
        return f"RecordQuery({self.records!r})"
