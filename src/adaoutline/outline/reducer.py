"""Folding sparse trees into outline entries.

Every level is reduced bottom-up: children first, then the sibling sort,
then the node's own rule decides whether it becomes a leaf, a nested group,
a plain grouping branch, or disappears and lets its children through.
"""

from __future__ import annotations

from collections.abc import Callable

from adaoutline.config.constants import DEFAULT_PLACEHOLDER
from adaoutline.outline.models import Branch, CategorySpec, Leaf, OutlineEntry, SparseNode

NestingStrategy = Callable[[str, int, list[OutlineEntry]], list[OutlineEntry]]
"""(container name, container position, nested entries) -> entries for the container."""

SortStrategy = Callable[[list[OutlineEntry]], list[OutlineEntry]]


# =============================================================================
# Nesting strategies
# =============================================================================


def nest_before(name: str, position: int, children: list[OutlineEntry]) -> list[OutlineEntry]:
    """A leaf for the container, then a branch of the same name with its members."""
    return [Leaf(name, position), Branch(name, tuple(children))]


def make_nest_within(placeholder: str = DEFAULT_PLACEHOLDER) -> NestingStrategy:
    """A single branch whose first child is a ``placeholder`` leaf for the container."""

    def nest_within(
        name: str, position: int, children: list[OutlineEntry]
    ) -> list[OutlineEntry]:
        return [Branch(name, (Leaf(placeholder, position), *children))]

    return nest_within


def get_nesting_strategy(name: str, placeholder: str = DEFAULT_PLACEHOLDER) -> NestingStrategy:
    if name == "before":
        return nest_before
    if name == "within":
        return make_nest_within(placeholder)
    raise ValueError(f"Unknown nesting strategy: {name}")


# =============================================================================
# Sort strategies
# =============================================================================


def sort_none(entries: list[OutlineEntry]) -> list[OutlineEntry]:
    return entries


def make_sort_alphabetical(placeholder: str = DEFAULT_PLACEHOLDER) -> SortStrategy:
    """Case-insensitive order by name, with ``placeholder`` entries always first."""

    def key(entry: OutlineEntry) -> tuple[bool, str]:
        return (entry.name != placeholder, entry.name.casefold())

    def sort_alphabetical(entries: list[OutlineEntry]) -> list[OutlineEntry]:
        return sorted(entries, key=key)

    return sort_alphabetical


def get_sort_strategy(name: str, placeholder: str = DEFAULT_PLACEHOLDER) -> SortStrategy:
    if name == "none":
        return sort_none
    if name == "alphabetical":
        return make_sort_alphabetical(placeholder)
    raise ValueError(f"Unknown sort strategy: {name}")


# =============================================================================
# Reduction
# =============================================================================


def reduce(
    node: SparseNode,
    spec: CategorySpec,
    sort: SortStrategy = sort_none,
    nesting: NestingStrategy = nest_before,
) -> list[OutlineEntry]:
    """Reduce a sparse tree to the ordered entries it contributes.

    A node whose name function yields nothing is treated as neither item
    nor branch, so its children pass through unchanged.
    """
    subtrees: list[OutlineEntry] = []
    for child in node.children:
        subtrees.extend(reduce(child, spec, sort, nesting))
    subtrees = sort(subtrees)

    origin = node.origin
    marker = origin.start_byte

    item_name = spec.item_name_fn(origin) if spec.item_predicate(origin) else None
    if item_name is not None:
        if not subtrees:
            return [Leaf(item_name, marker)]
        return nesting(item_name, marker, subtrees)

    if subtrees and spec.branch_predicate(origin):
        branch_name = spec.branch_name_fn(origin)
        if branch_name is not None:
            return [Branch(branch_name, tuple(subtrees))]

    return subtrees
