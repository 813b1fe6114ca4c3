"""Observability module: structured logging and OpenTelemetry tracing."""

from types_search.observability.context import bind_log_context, get_log_context, span_ids
from types_search.observability.logging import JsonFormatter, configure_logging
from types_search.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "JsonFormatter",
    "bind_log_context",
    "configure_logging",
    "create_span",
    "get_log_context",
    "get_tracer",
    "init_tracing",
    "span_ids",
]
