"""Tests for completion wire contracts and sync outcomes."""

import pytest
from pydantic import ValidationError

from backport_tracker.models.contracts import CompletionAck, CompletionRequest
from backport_tracker.models.outcome import SyncFailure, SyncOutcome


def test_completion_request_dumps_wire_body() -> None:
    """Completion requests serialize to ``{id, completed}``."""
    assert CompletionRequest(id="A", completed=True).model_dump() == {"id": "A", "completed": True}


def test_completion_ack_accepts_backend_echo_fields() -> None:
    """Acknowledgments keep the optional fields the backend echoes."""
    ack = CompletionAck.model_validate({"success": True, "modified": 1, "completed": True})
    assert ack.success is True
    assert ack.modified == 1


def test_completion_ack_requires_success() -> None:
    """Acknowledgments without ``success`` are malformed."""
    with pytest.raises(ValidationError):
        CompletionAck.model_validate({"modified": 1})


def test_failed_outcome() -> None:
    """Failed outcomes carry the reason and the unchanged value."""
    outcome = SyncOutcome.failed("A", False, SyncFailure.NETWORK, "boom")
    assert outcome.success is False
    assert outcome.changed is False
    assert outcome.completed is False
    assert outcome.reason == SyncFailure.NETWORK
    assert outcome.detail == "boom"
