"""Unit tests for the types-search command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from types_search import cli
from types_search.index_feed import IndexFeed, IndexFeedError


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    calls: list[tuple] = []
    monkeypatch.setattr(cli, "configure_logging", lambda *args, **kwargs: calls.append((args, kwargs)))
    return calls


@pytest.fixture
def index_file(tmp_path: Path, sample_payload) -> Path:
    path = tmp_path / "search-index-min.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    return path


def test_prints_matches(index_file, capsys):
    exit_code = cli.main(["--index-file", str(index_file), "lodash"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.splitlines() == ["► @types/lodash (https://lodash.com)"]


def test_missing_term_warns_before_loading(monkeypatch, capsys):
    def fail(*args, **kwargs):
        raise AssertionError("index must not be loaded without a term")

    monkeypatch.setattr(IndexFeed, "fetch", fail)
    monkeypatch.setattr(IndexFeed, "load_file", fail)

    assert cli.main([]) == cli.EXIT_USAGE
    assert cli.main(["   "]) == cli.EXIT_USAGE
    assert "No search term found!" in capsys.readouterr().err


def test_fetches_remote_index_by_default(monkeypatch, sample_records, capsys):
    fetched: list[str | None] = []

    def fake_fetch(self, url=None):
        fetched.append(self.settings.index_url)
        return sample_records

    monkeypatch.setattr(IndexFeed, "fetch", fake_fetch)

    assert cli.main(["--index-url", "https://mirror.example.com/i.json", "jQuery"]) == 0
    assert fetched == ["https://mirror.example.com/i.json"]
    assert "► @types/jquery (https://jquery.com)" in capsys.readouterr().out


def test_no_match_prints_suggestions(index_file, capsys):
    exit_code = cli.main(["--index-file", str(index_file), "expres"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "No type definitions found for 'expres'." in out
    assert "Did you mean: Express, express?" in out


def test_no_match_without_suggestions(index_file, capsys):
    cli.main(["--index-file", str(index_file), "zzzzzzzzzz"])

    out = capsys.readouterr().out
    assert "No type definitions found" in out
    assert "Did you mean" not in out


def test_json_output(index_file, capsys):
    exit_code = cli.main(["--index-file", str(index_file), "--json", "React"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload == [{"packageName": "@types/react", "url": "https://react.dev"}]


def test_json_output_for_no_match(index_file, capsys):
    cli.main(["--index-file", str(index_file), "--json", "nothing"])
    assert json.loads(capsys.readouterr().out) == []


def test_ignore_case(index_file, capsys):
    cli.main(["--index-file", str(index_file), "--ignore-case", "JQUERY"])
    assert capsys.readouterr().out.splitlines() == ["► @types/jquery (https://jquery.com)"]


def test_limit(tmp_path, record_factory, capsys):
    records = [record_factory(f"pkg{i}", i, globals=("shared",)).to_payload() for i in range(5)]
    path = tmp_path / "index.json"
    path.write_text(json.dumps(records), encoding="utf-8")

    cli.main(["--index-file", str(path), "--limit", "2", "shared"])

    assert capsys.readouterr().out.splitlines() == [
        "► @types/pkg4 (https://example.com/pkg4)",
        "► @types/pkg3 (https://example.com/pkg3)",
    ]


def test_feed_error_exits_nonzero(monkeypatch, capsys):
    def broken_fetch(self, url=None):
        raise IndexFeedError("search index request failed with HTTP 503")

    monkeypatch.setattr(IndexFeed, "fetch", broken_fetch)

    assert cli.main(["lodash"]) == cli.EXIT_ERROR
    assert "Error: search index request failed with HTTP 503" in capsys.readouterr().err


def test_duplicate_records_exit_nonzero(tmp_path, sample_payload, capsys):
    path = tmp_path / "dupes.json"
    path.write_text(json.dumps(sample_payload + sample_payload[:1]), encoding="utf-8")

    assert cli.main(["--index-file", str(path), "lodash"]) == cli.EXIT_ERROR
    assert "duplicate typesPackageName 'lodash'" in capsys.readouterr().err


def test_invalid_configuration(index_file, capsys):
    assert cli.main(["--index-file", str(index_file), "--limit", "0", "lodash"]) == cli.EXIT_ERROR
    assert "Invalid configuration" in capsys.readouterr().err


def test_log_level_forwarded(index_file, quiet_logging):
    cli.main(["--index-file", str(index_file), "--log-level", "debug", "lodash"])
    assert quiet_logging[0][0][0] == "debug"


def test_index_sources_are_mutually_exclusive(index_file):
    with pytest.raises(SystemExit):
        cli.main(["--index-file", str(index_file), "--index-url", "https://x.example.com", "lodash"])
