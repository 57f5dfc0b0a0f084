"""Card view derivation — display state as a pure function of a document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from backport_tracker.services.backports import find_missing_backports

if TYPE_CHECKING:
    from collections.abc import Sequence

    from backport_tracker.models.document import Document

NO_SUMMARY = "No summary available"
NO_TARGET_VERSION = "N/A"
UNASSIGNED = "Unassigned"


class CloneView(BaseModel):
    """One backport row under a card."""

    id: str | None = None
    url: str | None = None
    status: str | None = None
    status_class: str | None = None
    target_version: str | None = None


class CardView(BaseModel):
    id: str
    url: str
    summary: str
    status: str | None
    status_class: str
    target_version: str
    backport_versions: str
    assignee: str
    completed: bool
    toggle_label: str
    toggle_title: str
    missing_backports: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    clones: list[CloneView] = Field(default_factory=list)
    visible: bool = True


def status_class(status: str | None) -> str:
    return f"status-{status.lower()}" if status else "status-unknown"


def toggle_text(completed: bool) -> tuple[str, str]:
    """Label and tooltip of the completion toggle for the current state."""
    if completed:
        return "Mark as Incomplete", "Mark this card as incomplete"
    return "Mark as Complete", "Mark this card as complete"


def _clone_view(node: Document, browse_url: str) -> CloneView:
    return CloneView(
        id=node.id,
        url=f"{browse_url}{node.id}" if node.id else None,
        status=node.status,
        status_class=status_class(node.status) if node.status else None,
        target_version=node.target_version,
    )


def build_card(
    doc: Document,
    *,
    chain: Sequence[Document],
    visible: bool,
    browse_url: str,
) -> CardView:
    """Build the card for ``doc``; ``chain`` is its flattened clone chain."""
    missing = find_missing_backports(doc)
    label, title = toggle_text(doc.completed)
    return CardView(
        id=doc.id or "",
        url=f"{browse_url}{doc.id}",
        summary=doc.summary or NO_SUMMARY,
        status=doc.status,
        status_class=status_class(doc.status),
        target_version=doc.target_version or NO_TARGET_VERSION,
        backport_versions=", ".join(doc.target_backport_versions),
        assignee=doc.assignee or UNASSIGNED,
        completed=doc.completed,
        toggle_label=label,
        toggle_title=title,
        missing_backports=missing,
        warnings=[f"Missing backport for version {version}" for version in missing],
        clones=[_clone_view(node, browse_url) for node in chain],
        visible=visible,
    )
