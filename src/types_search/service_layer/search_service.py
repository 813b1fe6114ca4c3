"""Search service orchestration layer.

Composes the record store and the ranker into the caller-facing search API
and owns the current index snapshot.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from typing import Any

from types_search.config import Settings
from types_search.domain.model import DEFAULT_NAMESPACE, PackageMatch, SearchRecord
from types_search.observability.context import bind_log_context
from types_search.observability.tracing import create_span
from types_search.search.fuzzy import suggest_tokens
from types_search.search.ranker import rank
from types_search.search.record_store import RecordStore


logger = logging.getLogger(__name__)


class TypesSearchService:
    """High-level search over one record store snapshot.

    The store is never mutated. :meth:`refresh` builds a replacement and
    swaps the reference, so a search already running keeps the snapshot it
    started with.
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        namespace: str = DEFAULT_NAMESPACE,
        max_results: int | None = None,
        suggestion_limit: int = 5,
    ):
        self._store = store
        self.namespace = namespace
        self.max_results = max_results
        self.suggestion_limit = suggestion_limit

    @classmethod
    def from_records(
        cls,
        records: Iterable[SearchRecord | Mapping[str, Any]],
        settings: Settings,
    ) -> TypesSearchService:
        with create_span("record_store.load"):
            store = RecordStore.load(records, case_sensitive=settings.case_sensitive)
        return cls(
            store,
            namespace=settings.namespace,
            max_results=settings.max_results,
            suggestion_limit=settings.suggestion_limit,
        )

    @property
    def store(self) -> RecordStore:
        return self._store

    def search(self, term: str) -> list[PackageMatch]:
        """Return packages matching ``term``, best match first.

        Raises:
            ValueError: if ``term`` is empty or whitespace.
        """
        if not term or not term.strip():
            raise ValueError("search term must not be empty")

        store = self._store
        with bind_log_context(search_term=term), create_span("search", attributes={"search.term": term}) as span:
            ranked = rank(term, store.query(term), case_sensitive=store.case_sensitive)
            if self.max_results is not None:
                ranked = ranked[: self.max_results]
            span.set_attribute("search.result_count", len(ranked))
            logger.debug("Search %r matched %d packages", term, len(ranked))

        return [PackageMatch.from_record(record, namespace=self.namespace) for record in ranked]

    def suggest(self, term: str, limit: int | None = None) -> list[str]:
        """Index tokens that are close to ``term``; used when a search finds nothing."""
        resolved_limit = self.suggestion_limit if limit is None else limit
        return suggest_tokens(term, self._store.vocabulary(), limit=resolved_limit)

    def refresh(self, records: Iterable[SearchRecord | Mapping[str, Any]]) -> RecordStore:
        """Replace the current snapshot with one built from ``records``.

        If loading fails the previous snapshot stays in place and the error
        propagates.
        """
        with create_span("record_store.refresh"):
            replacement = RecordStore.load(records, case_sensitive=self._store.case_sensitive)
        previous = self._store
        self._store = replacement
        logger.info("Search index refreshed: %d -> %d records", len(previous), len(replacement))
        return replacement
