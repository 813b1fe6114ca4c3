"""Look up TypeScript type-definition packages by library, global or module name."""

# ruff: noqa: T201  # CLI intentionally prints results

from __future__ import annotations

import argparse
from collections.abc import Sequence
import json
import logging
from pathlib import Path
import sys
import textwrap
from typing import Any

from pydantic import ValidationError

from types_search.config import Settings
from types_search.domain.model import TypesSearchError
from types_search.index_feed import IndexFeed
from types_search.observability.logging import configure_logging
from types_search.observability.tracing import init_tracing
from types_search.service_layer.search_service import TypesSearchService


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="types-search",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent(
            """
            Examples:
              types-search lodash
              types-search --limit 3 react
              types-search --ignore-case JQuery
              types-search --index-file ./search-index-min.json express
            """
        ).strip(),
    )
    parser.add_argument("term", nargs="?", help="Library name, global or module specifier to look up")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--index-url",
        help="URL of the minified search index (default: the types publisher's search-index-min.json)",
    )
    source.add_argument(
        "--index-file",
        type=Path,
        help="Read the search index from a local JSON file instead of downloading it",
    )
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of results to print")
    parser.add_argument(
        "--ignore-case",
        dest="case_sensitive",
        action="store_false",
        default=None,
        help="Match names case-insensitively",
    )
    parser.add_argument("--json", action="store_true", help="Print results as a JSON array")
    parser.add_argument("--log-level", default=None, help="Logging level (default: warning)")
    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    overrides: dict[str, Any] = {
        "index_url": args.index_url,
        "max_results": args.limit,
        "case_sensitive": args.case_sensitive,
        "log_level": args.log_level,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def _print_matches(term: str, service: TypesSearchService, *, as_json: bool) -> None:
    matches = service.search(term)

    if as_json:
        print(json.dumps([match.to_dict() for match in matches], indent=2))
        return

    if not matches:
        print(f"No type definitions found for '{term}'.")
        suggestions = service.suggest(term)
        if suggestions:
            print(f"Did you mean: {', '.join(suggestions)}?")
        return

    for match in matches:
        print(f"► {match.package_identifier} ({match.reference_url})")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    if not args.term or not args.term.strip():
        print("No search term found!", file=sys.stderr)
        return EXIT_USAGE

    try:
        settings = _settings_from_args(args)
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_ERROR

    configure_logging(settings.log_level, json_output=settings.json_logs)
    init_tracing()

    feed = IndexFeed(settings)
    try:
        records = feed.load_file(args.index_file) if args.index_file else feed.fetch()
        service = TypesSearchService.from_records(records, settings)
    except TypesSearchError as exc:
        logger.debug("Index load failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    _print_matches(args.term, service, as_json=args.json)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
