"""In-memory document store — the session's single source of truth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from backport_tracker.exceptions import InvalidDocumentError
from backport_tracker.services.backports import clone_chain

if TYPE_CHECKING:
    from collections.abc import Iterable

    from backport_tracker.models.document import Document

logger = logging.getLogger(__name__)


class DocumentStore:
    """Holds the documents fetched at startup.

    ``completed`` is the only field written after load, and only through
    :meth:`set_completed`.
    """

    def __init__(self) -> None:
        self._documents: list[Document] = []
        self._by_id: dict[str, Document] = {}
        self._chains: dict[str, tuple[Document, ...]] = {}

    def load(self, documents: Iterable[Document]) -> None:
        """Replace the store contents with ``documents``, keeping their order.

        Raises :class:`InvalidDocumentError` for a document without an id or a
        repeated id; the previous contents are kept in that case.
        """
        ordered = list(documents)
        by_id: dict[str, Document] = {}
        for index, doc in enumerate(ordered):
            if not doc.id:
                raise InvalidDocumentError(f"Document at position {index} has no _id")
            if doc.id in by_id:
                raise InvalidDocumentError(f"Duplicate document id {doc.id}")
            by_id[doc.id] = doc

        self._documents = ordered
        self._by_id = by_id
        self._chains = {doc_id: clone_chain(doc.clone) for doc_id, doc in by_id.items()}
        logger.info("Document store loaded — documents=%d", len(ordered))

    @property
    def documents(self) -> list[Document]:
        return list(self._documents)

    def find_by_id(self, document_id: str) -> Document | None:
        """Return the document with ``document_id``, or None if it is not loaded."""
        return self._by_id.get(document_id)

    def chain(self, document_id: str) -> tuple[Document, ...]:
        """Clone chain of a document, flattened at load time."""
        return self._chains.get(document_id, ())

    def set_completed(self, document_id: str, completed: bool) -> bool:
        """Write ``completed`` on the matching document. Returns False if unknown."""
        doc = self._by_id.get(document_id)
        if doc is None:
            logger.warning("set_completed for unknown document %s", document_id)
            return False
        doc.completed = completed
        return True

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._by_id
