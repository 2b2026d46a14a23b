"""Data model for the navigation index.

The index builder never owns syntax nodes: it holds references into a tree
produced by tree-sitter (or any object shaped like one) for the duration of
a single build. Everything it produces is a plain value.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SyntaxNode(Protocol):
    """The subset of ``tree_sitter.Node`` the index builder reads."""

    @property
    def type(self) -> str: ...

    @property
    def start_byte(self) -> int: ...

    @property
    def children(self) -> Sequence[SyntaxNode]: ...

    @property
    def parent(self) -> SyntaxNode | None: ...

    @property
    def text(self) -> bytes | None: ...

    def child_by_field_name(self, name: str, /) -> SyntaxNode | None: ...


NodePredicate = Callable[[Any], bool]
NameFunction = Callable[[Any], "str | None"]


@dataclass(frozen=True, slots=True)
class SparseNode:
    """A node of a filtered tree: the origin node plus its relevant descendants."""

    origin: Any  # SyntaxNode
    children: tuple[SparseNode, ...] = ()


@dataclass(frozen=True, slots=True)
class Leaf:
    """A navigable entry: jumping to it moves to ``position``."""

    name: str
    position: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "position": self.position}


@dataclass(frozen=True, slots=True)
class Branch:
    """A grouping entry; not navigable itself."""

    name: str
    children: tuple[OutlineEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "children": [c.to_dict() for c in self.children]}


OutlineEntry = Leaf | Branch

CategoryOutline = tuple[str, list[OutlineEntry]]
"""(category display name, top-level entries)."""


@dataclass(frozen=True)
class CategorySpec:
    """How one outline category recognizes and names its nodes.

    A node is relevant to the category when either predicate holds; items
    produce navigable entries, branches only group the items nested in them.
    ``max_depth`` limits how far below the root the sparse tree is built.
    """

    category_id: str
    display_name: str
    item_predicate: NodePredicate
    branch_predicate: NodePredicate
    item_name_fn: NameFunction
    branch_name_fn: NameFunction
    max_depth: int | None = None

    def is_relevant(self, node: Any) -> bool:
        return self.item_predicate(node) or self.branch_predicate(node)
