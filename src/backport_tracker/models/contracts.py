"""Wire contracts for ``POST /api/documents/complete``."""

from __future__ import annotations

from pydantic import BaseModel


class CompletionRequest(BaseModel):
    """Request body asking the document service to change completion state."""

    id: str
    completed: bool


class CompletionAck(BaseModel):
    """Acknowledgment returned by the document service.

    Only ``success`` decides the outcome; the service also echoes how many
    records it modified and the value it stored.
    """

    success: bool
    modified: int | None = None
    completed: bool | None = None
