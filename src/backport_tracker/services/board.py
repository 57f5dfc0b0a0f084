"""Board — one session's filters, visibility and completion toggles over the store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from backport_tracker.models.outcome import SyncOutcome
from backport_tracker.services.backports import find_missing_backports
from backport_tracker.services.cards import CardView, build_card
from backport_tracker.services.completion import CompletionSynchronizer
from backport_tracker.services.filters import FilterEngine, FilterState

if TYPE_CHECKING:
    from backport_tracker.client import DocumentServiceClient
    from backport_tracker.models.document import Document
    from backport_tracker.store import DocumentStore

logger = logging.getLogger(__name__)


class Board:
    """Owns the store for a session and keeps visibility in step with it.

    Build it after the store is loaded: the assignee options are derived once
    at construction.
    """

    def __init__(
        self,
        store: DocumentStore,
        client: DocumentServiceClient,
        *,
        browse_url: str,
    ) -> None:
        self._store = store
        self._browse_url = browse_url
        self._engine = FilterEngine(store.documents)
        self._filters = FilterState()
        self._dismissed: set[str] = set()
        self._visibility: dict[str, bool] = {}
        self._synchronizer = CompletionSynchronizer(
            client, store, on_change=self._on_completion_changed
        )
        self.refresh()

    @property
    def store(self) -> DocumentStore:
        return self._store

    @property
    def assignees(self) -> list[str]:
        return self._engine.assignees

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def visibility(self) -> dict[str, bool]:
        return dict(self._visibility)

    def refresh(self) -> dict[str, bool]:
        """Recompute visibility from committed store values and the filters."""
        visibility = self._engine.visibility(self._store.documents, self._filters)
        for document_id in self._dismissed:
            visibility[document_id] = False
        self._visibility = visibility
        return self.visibility

    def apply_filters(
        self,
        *,
        assignee: str | None = None,
        show_completed: bool | None = None,
    ) -> dict[str, bool]:
        """Change one or both filter controls and recompute visibility."""
        updates: dict[str, object] = {}
        if assignee is not None:
            updates["assignee"] = assignee
        if show_completed is not None:
            updates["show_completed"] = show_completed
        self._filters = self._filters.model_copy(update=updates)
        logger.debug(
            "Filters applied — assignee=%s show_completed=%s",
            self._filters.assignee,
            self._filters.show_completed,
        )
        return self.refresh()

    async def toggle(self, document_id: str, completed: bool) -> SyncOutcome:
        """Set completion for one document, skipping the remote call if already set."""
        doc = self._store.find_by_id(document_id)
        if doc is not None and doc.completed == completed:
            return SyncOutcome(document_id=document_id, completed=completed, success=True)
        return await self._synchronizer.set_completed(document_id, completed)

    async def _on_completion_changed(self, doc: Document) -> None:
        self.refresh()

    def dismiss(self, document_id: str) -> bool:
        """Hide a card for the rest of the session. The document stays loaded."""
        if document_id not in self._store:
            return False
        self._dismissed.add(document_id)
        self._visibility[document_id] = False
        return True

    def missing_backports(self, document_id: str) -> list[str] | None:
        """Re-run gap analysis for one document; None if it is unknown."""
        doc = self._store.find_by_id(document_id)
        return find_missing_backports(doc) if doc is not None else None

    def cards(self) -> list[CardView]:
        """Card views for every loaded document, in load order."""
        return [
            build_card(
                doc,
                chain=self._store.chain(doc.id or ""),
                visible=self._visibility.get(doc.id or "", False),
                browse_url=self._browse_url,
            )
            for doc in self._store.documents
        ]

    def stats(self) -> dict[str, int]:
        documents = self._store.documents
        return {
            "documents": len(documents),
            "completed": sum(1 for doc in documents if doc.completed),
            "with_missing_backports": sum(1 for doc in documents if find_missing_backports(doc)),
            "visible": sum(1 for visible in self._visibility.values() if visible),
        }
