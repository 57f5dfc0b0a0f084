"""Tests for the in-memory DocumentStore."""

import pytest

from backport_tracker.exceptions import InvalidDocumentError, LoadError
from backport_tracker.models.document import Document
from backport_tracker.store import DocumentStore


@pytest.fixture
def store() -> DocumentStore:
    store = DocumentStore()
    store.load(
        [
            Document(id="A", clone=Document(id="A-1", target_version="v1")),
            Document(id="B", completed=True),
        ]
    )
    return store


class TestDocumentStore:
    """Test the Document Store."""

    def test_load_keeps_order(self, store: DocumentStore) -> None:
        """Verify documents are returned in load order."""
        assert [doc.id for doc in store.documents] == ["A", "B"]
        assert len(store) == 2

    def test_load_replaces_contents(self, store: DocumentStore) -> None:
        """Verify a second load drops the previous documents."""
        store.load([Document(id="C")])

        assert [doc.id for doc in store.documents] == ["C"]
        assert store.find_by_id("A") is None
        assert store.chain("A") == ()

    def test_find_by_id(self, store: DocumentStore) -> None:
        """Verify lookup by id and the not-found signal."""
        found = store.find_by_id("A")
        assert found is not None
        assert found.id == "A"
        assert store.find_by_id("missing") is None
        assert "A" in store
        assert "missing" not in store

    def test_chain_flattened_at_load(self, store: DocumentStore) -> None:
        """Verify each document's clone chain is available by id."""
        assert [node.id for node in store.chain("A")] == ["A-1"]
        assert store.chain("B") == ()

    def test_set_completed(self, store: DocumentStore) -> None:
        """Verify completion is written in place on the stored document."""
        doc = store.find_by_id("A")

        assert store.set_completed("A", True) is True
        assert doc is not None
        assert doc.completed is True
        assert store.find_by_id("A").completed is True

    def test_set_completed_unknown_is_noop(self, store: DocumentStore) -> None:
        """Verify unknown ids return False and change nothing."""
        assert store.set_completed("missing", True) is False
        assert [doc.completed for doc in store.documents] == [False, True]

    def test_documents_returns_copy(self, store: DocumentStore) -> None:
        """Verify callers cannot reorder the store through the returned list."""
        store.documents.clear()
        assert len(store) == 2

    def test_rejects_missing_id(self, store: DocumentStore) -> None:
        """Verify a top-level document without id is rejected and contents kept."""
        with pytest.raises(InvalidDocumentError):
            store.load([Document(id="C"), Document(summary="no id")])
        assert [doc.id for doc in store.documents] == ["A", "B"]

    def test_rejects_duplicate_id(self) -> None:
        """Verify repeated ids are a load error."""
        with pytest.raises(LoadError):
            DocumentStore().load([Document(id="A"), Document(id="A")])
