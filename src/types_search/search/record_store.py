"""Immutable record store with an inverted token index.

The store is built once from the prefetched index and never mutated.
Refreshing means building a new store and swapping the reference (see
``TypesSearchService.refresh``), so concurrent readers always see a
complete snapshot.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping
import logging
from types import MappingProxyType
from typing import Any

from types_search.domain.model import InvalidInputError, SearchQuery, SearchRecord
from types_search.search.tokenizer import tokenize_query, tokenize_record


logger = logging.getLogger(__name__)


class RecordStore:
    """Read-only collection of search records indexed by token.

    Use :meth:`load` to build one; the constructor assumes its inputs are
    already validated.
    """

    def __init__(
        self,
        records: tuple[SearchRecord, ...],
        index: Mapping[str, frozenset[str]],
        *,
        case_sensitive: bool = True,
    ):
        self._records = records
        self._by_key = MappingProxyType({record.types_package_name: record for record in records})
        self._positions = MappingProxyType({record.types_package_name: pos for pos, record in enumerate(records)})
        self._index = index
        self.case_sensitive = case_sensitive

    @classmethod
    def load(
        cls,
        records: Iterable[SearchRecord | Mapping[str, Any]],
        *,
        case_sensitive: bool = True,
    ) -> RecordStore:
        """Validate ``records`` and build the token index.

        Raw mappings (decoded JSON objects) are accepted and validated as
        :class:`SearchRecord`.

        Raises:
            InvalidInputError: on a malformed record or a duplicate
                ``types_package_name``. No store is built in that case.
        """
        accepted: dict[str, SearchRecord] = {}
        for position, item in enumerate(records):
            record = _coerce_record(item, position)
            key = record.types_package_name
            if key in accepted:
                raise InvalidInputError(f"duplicate typesPackageName {key!r} at record #{position}")
            accepted[key] = record

        postings: defaultdict[str, set[str]] = defaultdict(set)
        for key, record in accepted.items():
            for token in tokenize_record(record, case_sensitive=case_sensitive):
                postings[token].add(key)

        index = MappingProxyType({token: frozenset(keys) for token, keys in postings.items()})
        logger.info("Loaded %d search records (%d distinct tokens)", len(accepted), len(index))
        return cls(tuple(accepted.values()), index, case_sensitive=case_sensitive)

    def tokenize(self, record: SearchRecord) -> set[str]:
        return tokenize_record(record, case_sensitive=self.case_sensitive)

    def parse_query(self, term: str) -> SearchQuery:
        return SearchQuery(raw=term, tokens=tokenize_query(term, case_sensitive=self.case_sensitive))

    def query(self, term: str) -> tuple[SearchRecord, ...]:
        """Return every record whose token set contains ``term``.

        Matching is exact token membership; there is no prefix or substring
        matching. Results come back in load order, and an unmatched term
        yields an empty tuple.
        """
        parsed = self.parse_query(term)
        keys: set[str] = set()
        for token in parsed.tokens:
            keys.update(self._index.get(token, ()))
        if not keys:
            return ()
        ordered = sorted(keys, key=self._positions.__getitem__)
        return tuple(self._by_key[key] for key in ordered)

    def get(self, types_package_name: str) -> SearchRecord | None:
        return self._by_key.get(types_package_name)

    def vocabulary(self) -> list[str]:
        """All indexed tokens, sorted."""
        return sorted(self._index)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SearchRecord]:
        return iter(self._records)

    def __contains__(self, types_package_name: object) -> bool:
        return types_package_name in self._by_key


def _coerce_record(item: SearchRecord | Mapping[str, Any], position: int) -> SearchRecord:
    if isinstance(item, SearchRecord):
        return item
    if isinstance(item, Mapping):
        try:
            return SearchRecord.from_payload(item)
        except InvalidInputError as exc:
            raise InvalidInputError(f"record #{position}: {exc}") from exc
    raise InvalidInputError(f"record #{position} is a {type(item).__name__}, expected an object")
