"""Search the published index of TypeScript type-definition packages."""

from types_search.domain.model import InvalidInputError, PackageMatch, SearchRecord, TypesSearchError
from types_search.search.ranker import rank
from types_search.search.record_store import RecordStore
from types_search.service_layer.search_service import TypesSearchService


__version__ = "0.3.0"

__all__ = [
    "InvalidInputError",
    "PackageMatch",
    "RecordStore",
    "SearchRecord",
    "TypesSearchError",
    "TypesSearchService",
    "rank",
]
