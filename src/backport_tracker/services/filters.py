"""Card visibility from the assignee selector and the show-completed toggle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import Iterable

    from backport_tracker.models.document import Document

ALL_ASSIGNEES = "all"


class FilterState(BaseModel):
    """Current value of the two filter controls."""

    assignee: str = ALL_ASSIGNEES
    show_completed: bool = False


def is_visible(doc: Document, state: FilterState) -> bool:
    """Whether ``doc`` passes both filters.

    Unassigned documents only match the ``"all"`` selector.
    """
    assignee_ok = state.assignee == ALL_ASSIGNEES or doc.assignee == state.assignee
    return assignee_ok and (not doc.completed or state.show_completed)


def assignee_options(documents: Iterable[Document]) -> list[str]:
    """Distinct non-empty assignees, sorted ascending."""
    return sorted({doc.assignee for doc in documents if doc.assignee})


class FilterEngine:
    """Derives per-document visibility.

    The assignee option set is computed once from the loaded documents;
    completion toggles never change an assignee so it is not refreshed.
    """

    def __init__(self, documents: Iterable[Document]) -> None:
        self._assignees = tuple(assignee_options(documents))

    @property
    def assignees(self) -> list[str]:
        return list(self._assignees)

    def visibility(self, documents: Iterable[Document], state: FilterState) -> dict[str, bool]:
        """Map each document id to its visibility under ``state``."""
        return {doc.id: is_visible(doc, state) for doc in documents if doc.id}
