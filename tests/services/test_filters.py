"""Tests for the Filter Engine."""

import pytest

from backport_tracker.models.document import Document
from backport_tracker.services.filters import (
    ALL_ASSIGNEES,
    FilterEngine,
    FilterState,
    assignee_options,
    is_visible,
)


@pytest.fixture
def documents() -> list[Document]:
    return [
        Document(id="A", assignee="bob"),
        Document(id="B", assignee="alice", completed=True),
        Document(id="C"),
        Document(id="D", assignee="bob", completed=True),
        Document(id="E", assignee=""),
    ]


class TestIsVisible:
    """Test the per-document visibility rule."""

    def test_all_hides_only_completed(self, documents: list[Document]) -> None:
        """Verify "all" without completed shows exactly the open documents."""
        state = FilterState(assignee=ALL_ASSIGNEES, show_completed=False)
        for doc in documents:
            assert is_visible(doc, state) is (not doc.completed)

    def test_all_with_completed_shows_everything(self, documents: list[Document]) -> None:
        """Verify "all" with show_completed shows every document."""
        state = FilterState(show_completed=True)
        assert all(is_visible(doc, state) for doc in documents)

    def test_specific_assignee(self) -> None:
        """Verify a specific assignee matches only that owner's documents."""
        state = FilterState(assignee="bob")
        assert is_visible(Document(id="A", assignee="bob"), state) is True
        assert is_visible(Document(id="B", assignee="alice"), state) is False

    def test_unassigned_never_matches_specific_assignee(self) -> None:
        """Verify unassigned documents only match the "all" selector."""
        doc = Document(id="C")
        assert is_visible(doc, FilterState(assignee="bob", show_completed=True)) is False
        assert is_visible(doc, FilterState(assignee="Unassigned")) is False
        assert is_visible(doc, FilterState()) is True

    def test_completed_hidden_even_for_matching_assignee(self) -> None:
        """Verify the completed filter applies on top of the assignee filter."""
        doc = Document(id="D", assignee="bob", completed=True)
        assert is_visible(doc, FilterState(assignee="bob")) is False
        assert is_visible(doc, FilterState(assignee="bob", show_completed=True)) is True


class TestAssigneeOptions:
    """Test derivation of the assignee selector options."""

    def test_sorted_distinct_non_empty(self, documents: list[Document]) -> None:
        """Verify options are sorted, unique and never blank."""
        assert assignee_options(documents) == ["alice", "bob"]

    def test_empty(self) -> None:
        """Verify no documents means no options."""
        assert assignee_options([]) == []


class TestFilterEngine:
    """Test the Filter Engine."""

    def test_options_fixed_at_construction(self, documents: list[Document]) -> None:
        """Verify the option set is not refreshed from later document changes."""
        engine = FilterEngine(documents)
        documents.append(Document(id="F", assignee="zed"))

        assert engine.assignees == ["alice", "bob"]

    def test_visibility_is_total(self, documents: list[Document]) -> None:
        """Verify every document gets a decision."""
        visibility = FilterEngine(documents).visibility(documents, FilterState())
        assert visibility == {"A": True, "B": False, "C": True, "D": False, "E": True}

    def test_visibility_is_deterministic(self, documents: list[Document]) -> None:
        """Verify identical inputs give identical results."""
        engine = FilterEngine(documents)
        state = FilterState(assignee="bob", show_completed=True)
        assert engine.visibility(documents, state) == engine.visibility(documents, state)
        assert engine.visibility(documents, state) == {
            "A": True,
            "B": False,
            "C": False,
            "D": True,
            "E": False,
        }
