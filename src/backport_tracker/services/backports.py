"""Clone-chain traversal and backport gap analysis."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from backport_tracker.models.document import Document

logger = logging.getLogger(__name__)


def clone_chain(head: Document | None) -> tuple[Document, ...]:
    """Flatten a clone chain into an ordered tuple, starting at ``head``.

    The walk is iterative and stops at the first node it has already visited,
    so a malformed (cyclic) chain ends the traversal instead of looping.
    """
    nodes: list[Document] = []
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            logger.warning(
                "Clone chain cycle detected at %s after %d nodes — stopping walk",
                node.id or "<unnamed clone>",
                len(nodes),
            )
            break
        seen.add(id(node))
        nodes.append(node)
        node = node.clone
    return tuple(nodes)


def collect_clone_versions(head: Document | None) -> set[str]:
    """Return every ``target_version`` present in the chain starting at ``head``.

    ``head`` is usually ``doc.clone``; pass the document itself to include its
    own target version.
    """
    return {node.target_version for node in clone_chain(head) if node.target_version}


def missing_backports(required: Iterable[str], covered: set[str]) -> list[str]:
    """Required versions absent from ``covered``, in declaration order."""
    return [version for version in required if version and version not in covered]


def find_missing_backports(doc: Document) -> list[str]:
    """Required backport versions of ``doc`` with no matching clone.

    A document that declares no backport versions never has gaps, whatever its
    chain holds.
    """
    if not doc.target_backport_versions:
        return []
    return missing_backports(doc.target_backport_versions, collect_clone_versions(doc.clone))
