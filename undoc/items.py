"""Pydantic models for simplified documentation output."""

from __future__ import annotations

import json
from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

from undoc.settings import DEFAULT_TITLE, MAX_SECTIONS, MAX_TAKEAWAYS

SectionType = Literal[
    "overview",
    "quickstart",
    "key-concepts",
    "api-reference",
    "examples",
    "troubleshooting",
]

SECTION_TYPES: tuple[str, ...] = get_args(SectionType)


class Section(BaseModel):
    """A titled, classified span of body text."""

    model_config = ConfigDict(frozen=True)

    title: str
    content: str
    type: SectionType = "overview"


class ProcessedDocument(BaseModel):
    """Canonical output of one processing call.

    Field names are snake_case in Python; the outward JSON names
    (``keyTakeaways``, ``originalUrl``) are aliases and are accepted on
    construction as well.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = DEFAULT_TITLE
    summary: str = ""
    sections: tuple[Section, ...] = Field(default=(), max_length=MAX_SECTIONS)
    key_takeaways: tuple[str, ...] = Field(
        default=(), max_length=MAX_TAKEAWAYS, alias="keyTakeaways",
    )
    original_url: str = Field(default="", alias="originalUrl")

    @field_validator("title", mode="before")
    @classmethod
    def default_title(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
        return v or DEFAULT_TITLE

    @field_validator("original_url", mode="before")
    @classmethod
    def strip_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_json_dict(self) -> dict[str, Any]:
        """Return a plain ``dict`` using the outward (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int | None = None) -> str:
        """Return the document as a JSON string; non-ASCII is kept as-is."""
        return json.dumps(self.to_json_dict(), indent=indent, ensure_ascii=False)
