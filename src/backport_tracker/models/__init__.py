"""Data models for tracked documents and completion wire contracts."""

from backport_tracker.models.contracts import CompletionAck, CompletionRequest
from backport_tracker.models.document import Document
from backport_tracker.models.outcome import SyncFailure, SyncOutcome

__all__ = [
    "CompletionAck",
    "CompletionRequest",
    "Document",
    "SyncFailure",
    "SyncOutcome",
]
