"""Loading the prefetched search index.

The types publisher hosts the whole index as a single minified JSON array.
It is fetched once per run (or read from a local copy) and decoded into
validated :class:`SearchRecord` objects; nothing is cached between runs.
"""

from __future__ import annotations

from collections.abc import Mapping
import json
import logging
from pathlib import Path
from typing import Any

import httpx

from types_search.config import Settings
from types_search.domain.model import InvalidInputError, SearchRecord, TypesSearchError
from types_search.observability.tracing import create_span


logger = logging.getLogger(__name__)


class IndexFeedError(TypesSearchError, RuntimeError):
    """Raised when the search index cannot be fetched or decoded."""


def parse_records(payload: Any) -> list[SearchRecord]:
    """Decode a parsed JSON payload into search records.

    Raises:
        IndexFeedError: if the payload is not a JSON array.
        InvalidInputError: if any entry is not a valid record.
    """
    if not isinstance(payload, list):
        raise IndexFeedError(f"search index must be a JSON array, got {type(payload).__name__}")

    records: list[SearchRecord] = []
    for position, entry in enumerate(payload):
        if not isinstance(entry, Mapping):
            raise InvalidInputError(f"record #{position} is a {type(entry).__name__}, expected an object")
        try:
            records.append(SearchRecord.from_payload(entry))
        except InvalidInputError as exc:
            raise InvalidInputError(f"record #{position}: {exc}") from exc
    return records


def _decode(content: bytes, source: str) -> Any:
    try:
        return json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise IndexFeedError(f"search index at {source} is not valid JSON: {exc}") from exc


class IndexFeed:
    """Fetches the search index over HTTP or reads it from disk.

    Pass ``client`` to reuse an existing :class:`httpx.Client` (its lifetime
    stays with the caller); otherwise a client is opened per fetch.
    """

    def __init__(self, settings: Settings, *, client: httpx.Client | None = None):
        self.settings = settings
        self._client = client

    def fetch(self, url: str | None = None) -> list[SearchRecord]:
        """Download and decode the index at ``url`` (default: ``settings.index_url``)."""
        target = url or self.settings.index_url
        with create_span("index_feed.fetch", attributes={"index.url": target}) as span:
            logger.info("Fetching search index: %s", target)
            content = self._get(target)
            span.set_attribute("index.bytes", len(content))
            records = parse_records(_decode(content, target))
            span.set_attribute("index.records", len(records))

        logger.info("Search index %s: %d records (%d bytes)", target, len(records), len(content))
        return records

    def load_file(self, path: Path) -> list[SearchRecord]:
        """Read and decode a local copy of the index."""
        with create_span("index_feed.load_file", attributes={"index.path": str(path)}):
            try:
                content = Path(path).expanduser().read_bytes()
            except OSError as exc:
                raise IndexFeedError(f"cannot read search index file {path}: {exc}") from exc
            records = parse_records(_decode(content, str(path)))

        logger.info("Search index %s: %d records", path, len(records))
        return records

    def _get(self, url: str) -> bytes:
        if self._client is not None:
            return self._request(self._client, url)

        timeout = httpx.Timeout(float(self.settings.http_timeout), connect=min(10.0, self.settings.http_timeout))
        headers = {"User-Agent": self.settings.user_agent, "Accept": "application/json"}
        with httpx.Client(timeout=timeout, follow_redirects=True, headers=headers) as client:
            return self._request(client, url)

    @staticmethod
    def _request(client: httpx.Client, url: str) -> bytes:
        try:
            response = client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise IndexFeedError(f"search index request failed with HTTP {exc.response.status_code}: {url}") from exc
        except httpx.HTTPError as exc:
            raise IndexFeedError(f"could not fetch search index from {url}: {exc}") from exc

        if not response.content:
            raise IndexFeedError(f"empty response for search index {url}")
        return response.content
