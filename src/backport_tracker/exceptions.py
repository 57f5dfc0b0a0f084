"""Errors raised while talking to the document service or loading its payload."""

from __future__ import annotations

from backport_tracker.models.outcome import SyncFailure


class DocumentServiceError(Exception):
    """Base class for document service failures."""


class LoadError(DocumentServiceError):
    """The initial document fetch failed; the session has no documents."""


class InvalidDocumentError(LoadError):
    """The fetched payload violates store invariants (missing or duplicate ids)."""


class SyncError(DocumentServiceError):
    """A completion update was not acknowledged by the document service."""

    def __init__(self, reason: SyncFailure, detail: str) -> None:
        super().__init__(detail)
        self.reason = reason
        self.detail = detail
