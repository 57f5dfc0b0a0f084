"""Outcome of a completion toggle as reported to the invoking layer."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class SyncFailure(StrEnum):
    NOT_FOUND = "not_found"
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    REJECTED = "rejected"
    MALFORMED_RESPONSE = "malformed_response"


class SyncOutcome(BaseModel):
    """Result of one completion toggle.

    ``completed`` is the value held locally after the attempt: the requested
    value on success, the unchanged previous value on failure, and ``None``
    when the document is unknown.
    """

    document_id: str
    completed: bool | None
    success: bool
    changed: bool = False
    reason: SyncFailure | None = None
    detail: str = ""

    @classmethod
    def failed(
        cls, document_id: str, completed: bool | None, reason: SyncFailure, detail: str
    ) -> SyncOutcome:
        return cls(
            document_id=document_id,
            completed=completed,
            success=False,
            reason=reason,
            detail=detail,
        )
