"""Service layer - orchestrates the search core for callers."""

from types_search.service_layer.search_service import TypesSearchService


__all__ = ["TypesSearchService"]
