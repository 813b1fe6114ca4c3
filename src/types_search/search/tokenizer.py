"""Record and query tokenizers.

Every field value is one opaque token: ``"lodash.debounce"`` stays a single
token and is never split on punctuation or whitespace. The project URL is
not tokenized.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from types_search.domain.model import SearchRecord


def normalize_token(token: str, *, case_sensitive: bool = True) -> str:
    return token if case_sensitive else token.casefold()


def tokenize_record(record: SearchRecord, *, case_sensitive: bool = True) -> set[str]:
    """Return the token set of a record.

    Tokens are ``{library_name, types_package_name} | globals | modules``.
    Empty field values produce no token.
    """
    fields = [record.library_name, record.types_package_name, *record.globals, *record.modules]
    return {normalize_token(value, case_sensitive=case_sensitive) for value in fields if value}


def tokenize_query(term: str, *, case_sensitive: bool = True) -> tuple[str, ...]:
    """The whole search term is a single token."""
    if not term:
        return ()
    return (normalize_token(term, case_sensitive=case_sensitive),)
