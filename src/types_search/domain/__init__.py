"""Domain layer - records, queries and results with no infrastructure dependencies."""

from types_search.domain.model import (
    DEFAULT_NAMESPACE,
    InvalidInputError,
    PackageMatch,
    SearchQuery,
    SearchRecord,
    TypesSearchError,
)


__all__ = [
    "DEFAULT_NAMESPACE",
    "InvalidInputError",
    "PackageMatch",
    "SearchQuery",
    "SearchRecord",
    "TypesSearchError",
]
