"""Sparse tree construction.

Filters a syntax tree down to the nodes a category cares about. Nodes that
fail the predicate vanish, and their matching descendants are re-attached to
the nearest matching ancestor, so containment and document order survive
while everything in between is dropped.
"""

from __future__ import annotations

from typing import Any

from adaoutline.outline.models import NodePredicate, SparseNode


def _collect(
    node: Any, predicate: NodePredicate, depth: int, max_depth: int | None
) -> list[SparseNode]:
    """Sparse contributions of ``node``'s children, which sit at ``depth``."""
    if max_depth is not None and depth > max_depth:
        return []
    contributions: list[SparseNode] = []
    for child in node.children:
        grandchildren = _collect(child, predicate, depth + 1, max_depth)
        if predicate(child):
            contributions.append(SparseNode(child, tuple(grandchildren)))
        else:
            contributions.extend(grandchildren)
    return contributions


def build_sparse(
    root: Any, predicate: NodePredicate, max_depth: int | None = None
) -> SparseNode:
    """Build the sparse tree of ``root`` for ``predicate``.

    The root is always kept as the anchor, whether or not it matches.

    Args:
        root: Root syntax node.
        predicate: Relevance test applied to every node below the root.
        max_depth: When set, nodes more than this many levels below the
            root are not visited at all.
    """
    return SparseNode(root, tuple(_collect(root, predicate, 1, max_depth)))
