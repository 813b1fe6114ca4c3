"""Result ordering for matched records.

Users usually type a library's common name ("lodash"), while the types
package may carry a ``js``/``.js``/``-js`` suffix. Records whose package
name is one of those exact forms rank first; everything else is ordered by
monthly downloads, highest first.
"""

from __future__ import annotations

from collections.abc import Iterable

from types_search.domain.model import SearchRecord
from types_search.search.tokenizer import normalize_token


EXACT_FORM_SUFFIXES = ("", "js", ".js", "-js")


def exact_forms(query_term: str, *, case_sensitive: bool = True) -> frozenset[str]:
    """Package names treated as a direct match for ``query_term``.

    Examples:
        >>> sorted(exact_forms("react"))
        ['react', 'react-js', 'react.js', 'reactjs']
    """
    term = normalize_token(query_term, case_sensitive=case_sensitive)
    return frozenset(term + suffix for suffix in EXACT_FORM_SUFFIXES)


def is_exact_match(record: SearchRecord, forms: frozenset[str], *, case_sensitive: bool = True) -> bool:
    return normalize_token(record.types_package_name, case_sensitive=case_sensitive) in forms


def rank(
    query_term: str,
    matches: Iterable[SearchRecord],
    *,
    case_sensitive: bool = True,
) -> list[SearchRecord]:
    """Order ``matches`` by relevance to ``query_term``.

    Exact-form records come first, in the order they were matched; the
    remaining records follow by downloads descending, ties keeping their
    input order. Downloads never reorder exact forms among themselves, so
    ``lodash`` matched ahead of ``lodash-js`` stays ahead of it.
    """
    forms = exact_forms(query_term, case_sensitive=case_sensitive)

    def sort_key(record: SearchRecord) -> tuple[int, int]:
        if is_exact_match(record, forms, case_sensitive=case_sensitive):
            return (0, 0)
        return (1, -record.monthly_downloads)

    return sorted(matches, key=sort_key)
