"""Domain model - search records and the values derived from them.

Records mirror one entry of the published ``search-index-min.json`` feed.
The feed uses single-letter keys to keep the download small; the model
accepts those wire keys as aliases and exposes readable attribute names.

- Records are immutable value objects (frozen=True)
- Validation happens at construction, never later
- No infrastructure dependencies (no HTTP, no files)
"""

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError


DEFAULT_NAMESPACE = "@types/"


class TypesSearchError(Exception):
    """Base class for every error raised by types-search."""


class InvalidInputError(TypesSearchError, ValueError):
    """Raised when a record set cannot be loaded.

    Covers malformed records (missing or mistyped fields) and duplicate
    ``types_package_name`` keys.
    """


class SearchRecord(BaseModel):
    """One type-definitions package from the search index.

    ``types_package_name`` is the canonical key: it is unique within a
    record store and is what ``@types/`` gets prefixed to.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    types_package_name: str = Field(alias="t", min_length=1)
    globals: tuple[str, ...] = Field(default=(), alias="g")
    modules: tuple[str, ...] = Field(default=(), alias="m")
    project_url: str = Field(alias="p")
    library_name: str = Field(alias="l")
    monthly_downloads: int = Field(alias="d", ge=0)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        """Build a record from a decoded JSON object.

        Raises:
            InvalidInputError: if a required field is missing or has the wrong type.
        """
        try:
            return cls.model_validate(dict(payload))
        except ValidationError as exc:
            fields = ", ".join(".".join(str(part) for part in error["loc"]) for error in exc.errors())
            raise InvalidInputError(f"invalid search record ({fields}): {exc.error_count()} error(s)") from exc

    def to_payload(self) -> dict[str, Any]:
        """Serialize back to the minified wire format."""
        return self.model_dump(by_alias=True, mode="json")


class SearchQuery(BaseModel):
    """A raw search term together with its tokens.

    Lives for the duration of one search call.
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    tokens: tuple[str, ...] = ()


class PackageMatch(BaseModel):
    """Caller-facing search result."""

    model_config = ConfigDict(frozen=True)

    package_identifier: str
    reference_url: str
    record: SearchRecord

    @classmethod
    def from_record(cls, record: SearchRecord, *, namespace: str = DEFAULT_NAMESPACE) -> Self:
        return cls(
            package_identifier=f"{namespace}{record.types_package_name}",
            reference_url=record.project_url,
            record=record,
        )

    def to_dict(self) -> dict[str, str]:
        return {"packageName": self.package_identifier, "url": self.reference_url}
