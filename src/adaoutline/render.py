"""Terminal and JSON rendering of outlines.

Positions are byte offsets; when the source is at hand they are shown as
1-based ``line:column`` instead.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.markup import escape
from rich.tree import Tree

from adaoutline.outline.models import Branch, CategoryOutline, Leaf, OutlineEntry


def offset_to_line_col(source: bytes, offset: int) -> tuple[int, int]:
    """1-based line and column of a byte offset."""
    line_start = source.rfind(b"\n", 0, offset) + 1
    return source.count(b"\n", 0, offset) + 1, offset - line_start + 1


def format_position(position: int, source: bytes | None = None) -> str:
    if source is None:
        return f"@{position}"
    line, col = offset_to_line_col(source, position)
    return f"{line}:{col}"


def _add_entries(node: Tree, entries: Sequence[OutlineEntry], source: bytes | None) -> None:
    for entry in entries:
        if isinstance(entry, Leaf):
            node.add(f"{escape(entry.name)} [dim]{format_position(entry.position, source)}[/dim]")
        elif isinstance(entry, Branch):
            _add_entries(node.add(f"[bold]{escape(entry.name)}[/bold]"), entry.children, source)


def outline_tree(
    outline: Sequence[CategoryOutline], title: str, source: bytes | None = None
) -> Tree:
    """Build a rich Tree with one top-level node per category."""
    tree = Tree(title)
    for category_name, entries in outline:
        _add_entries(tree.add(f"[cyan]{escape(category_name)}[/cyan]"), entries, source)
    return tree


def outline_to_dict(outline: Sequence[CategoryOutline]) -> list[dict[str, Any]]:
    """JSON-ready form: a list of {category, entries} objects."""
    return [
        {"category": name, "entries": [entry.to_dict() for entry in entries]}
        for name, entries in outline
    ]
