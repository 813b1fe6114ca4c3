"""Log context shared between spans and log records.

The JSON formatter reads this context so every line emitted during a
search carries the active trace/span ids and the search term.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from opentelemetry.trace import Span

log_context: ContextVar[dict[str, object] | None] = ContextVar("log_context", default=None)


def get_log_context() -> dict[str, object]:
    return dict(log_context.get() or {})


@contextmanager
def bind_log_context(**fields: object) -> Iterator[dict[str, object]]:
    """Add ``fields`` to the log context for the duration of the block."""
    merged = {**get_log_context(), **fields}
    token = log_context.set(merged)
    try:
        yield merged
    finally:
        log_context.reset(token)


def span_ids(span: Span) -> dict[str, str]:
    """Hex trace/span ids of an OpenTelemetry span, empty for a non-recording span."""
    span_context = span.get_span_context()
    if not span_context.is_valid:
        return {}
    return {
        "trace_id": format(span_context.trace_id, "032x"),
        "span_id": format(span_context.span_id, "016x"),
    }
