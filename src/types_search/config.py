"""Centralized configuration for types-search using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from types_search.domain.model import DEFAULT_NAMESPACE


DEFAULT_INDEX_URL = "https://typespublisher.blob.core.windows.net/typespublisher/data/search-index-min.json"


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``TYPES_SEARCH_*`` environment variables.

    Command-line flags override individual values by passing them as
    keyword arguments.
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPES_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Index feed
    index_url: str = Field(default=DEFAULT_INDEX_URL, description="URL of the minified search index JSON")
    http_timeout: int = Field(default=30, ge=1, description="HTTP request timeout in seconds")
    user_agent: str = Field(default="types-search/0.3", description="User-Agent sent with index requests")

    # Search behaviour
    case_sensitive: bool = Field(
        default=True,
        description="Match tokens case-sensitively; when false both index and query are casefolded",
    )
    namespace: str = Field(default=DEFAULT_NAMESPACE, description="Prefix applied to package names in results")
    max_results: int | None = Field(default=None, ge=1, description="Maximum number of results to print")
    suggestion_limit: int = Field(default=5, ge=0, description="Maximum 'did you mean' suggestions on no match")

    # Logging
    log_level: str = Field(default="warning", description="Logging level")
    json_logs: bool = Field(default=False, description="Emit structured JSON logs instead of plain text")

    @field_validator("index_url")
    @classmethod
    def _check_index_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("TYPES_SEARCH_INDEX_URL must be an http(s) URL")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"debug", "info", "warning", "error", "critical"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized
