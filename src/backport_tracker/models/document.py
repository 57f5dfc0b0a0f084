"""Document model — an issue with backport metadata and its chain of clones."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_VERSION_SEPARATOR = ","


def parse_versions(raw: object) -> list[str]:
    """Split a delimited version string (``"v1, v2"``) into an ordered list.

    Entries are trimmed and empty ones dropped. A list is accepted as-is after
    the same cleanup; ``None`` yields an empty list.
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        items: list[Any] = raw.split(_VERSION_SEPARATOR)
    elif isinstance(raw, (list, tuple)):
        items = list(raw)
    else:
        raise ValueError(f"unsupported backport version payload: {type(raw).__name__}")
    return [str(item).strip() for item in items if item is not None and str(item).strip()]


class Document(BaseModel):
    """A tracked issue as served by ``GET /api/documents``.

    Clone nodes share this shape; only top-level documents are guaranteed to
    carry an ``_id``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = Field(default=None, alias="_id")
    summary: str | None = None
    status: str | None = None
    target_version: str | None = None
    target_backport_versions: list[str] = Field(default_factory=list)
    assignee: str | None = None
    completed: bool = False
    clone: Document | None = None

    @field_validator("target_backport_versions", mode="before")
    @classmethod
    def _split_versions(cls, value: object) -> list[str]:
        return parse_versions(value)

    @field_validator("assignee", "target_version", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


Document.model_rebuild()
