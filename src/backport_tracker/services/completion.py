"""Completion synchronizer — remote update first, local commit on acknowledgment."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from backport_tracker.exceptions import SyncError
from backport_tracker.models.outcome import SyncFailure, SyncOutcome

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from backport_tracker.client import DocumentServiceClient
    from backport_tracker.models.document import Document
    from backport_tracker.store import DocumentStore

logger = logging.getLogger(__name__)


class CompletionSynchronizer:
    """Applies completion changes to one document at a time.

    The store is written only after the document service acknowledges the
    change with ``success: true``. Toggles on different documents are
    independent; overlapping toggles on the same document resolve in arrival
    order of their acknowledgments.
    """

    def __init__(
        self,
        client: DocumentServiceClient,
        store: DocumentStore,
        *,
        on_change: Callable[[Document], Awaitable[None]] | None = None,
    ) -> None:
        self._client = client
        self._store = store
        self._on_change = on_change

    async def set_completed(self, document_id: str, completed: bool) -> SyncOutcome:
        """Send the change and commit it locally once confirmed."""
        doc = self._store.find_by_id(document_id)
        if doc is None:
            return SyncOutcome.failed(
                document_id, None, SyncFailure.NOT_FOUND, f"Unknown document {document_id}"
            )

        previous = doc.completed
        try:
            ack = await self._client.update_completion(document_id, completed)
        except SyncError as exc:
            logger.warning(
                "Completion update failed — document=%s reason=%s detail=%s",
                document_id,
                exc.reason,
                exc.detail,
            )
            return SyncOutcome.failed(document_id, doc.completed, exc.reason, exc.detail)

        if not ack.success:
            logger.warning("Completion update rejected — document=%s", document_id)
            return SyncOutcome.failed(
                document_id,
                doc.completed,
                SyncFailure.REJECTED,
                "Document service reported failure",
            )

        self._store.set_completed(document_id, completed)
        logger.info("Completion updated — document=%s completed=%s", document_id, completed)
        if self._on_change is not None:
            await self._on_change(doc)
        return SyncOutcome(
            document_id=document_id,
            completed=completed,
            success=True,
            changed=previous != completed,
        )
