"""Category assembly: the per-category sparse-tree + reduce pipeline.

Usage::

    builder = OutlineBuilder(config.outline)
    for name, entries in builder.build_file(Path("src/foo.adb")):
        ...
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any

from adaoutline.config.models import OutlineConfig
from adaoutline.core.logging import get_logger, set_build_id
from adaoutline.outline.categories import get_category
from adaoutline.outline.models import Branch, CategoryOutline, Leaf, OutlineEntry
from adaoutline.outline.reducer import (
    NestingStrategy,
    SortStrategy,
    get_nesting_strategy,
    get_sort_strategy,
    reduce,
)
from adaoutline.outline.sparse import build_sparse

log = get_logger(__name__)


def build_outline(
    root: Any,
    config: OutlineConfig | None = None,
    *,
    categories: Sequence[str] | None = None,
    nesting: NestingStrategy | None = None,
    sort: SortStrategy | None = None,
) -> list[CategoryOutline]:
    """Build the navigation index of a syntax tree.

    Args:
        root: Root node of the syntax tree.
        config: Outline configuration (defaults when None).
        categories: Category ids overriding ``config.categories``.
        nesting: Custom nesting strategy overriding ``config.nesting_strategy``.
        sort: Custom sort strategy overriding ``config.sort``.

    Returns:
        (display name, entries) pairs in category order; categories with no
        entries are left out.

    Raises:
        ConfigError: If a category id is not registered.
    """
    config = config or OutlineConfig()
    category_ids = list(categories) if categories is not None else config.categories
    # Unknown ids fail before any tree is walked.
    specs = [get_category(category_id) for category_id in category_ids]
    nesting = nesting or get_nesting_strategy(config.nesting_strategy, config.placeholder)
    sort = sort or get_sort_strategy(config.sort, config.placeholder)

    outline: list[CategoryOutline] = []
    for spec in specs:
        sparse = build_sparse(root, spec.is_relevant, spec.max_depth)
        entries = reduce(sparse, spec, sort, nesting)
        if not entries:
            continue
        name = config.category_names.get(spec.category_id, spec.display_name)
        outline.append((name, entries))
    return outline


def flatten(outline: Sequence[CategoryOutline], separator: str = "/") -> Iterator[tuple[str, int]]:
    """Yield (path, position) for every leaf, paths joined with ``separator``."""

    def walk(prefix: str, entries: Sequence[OutlineEntry]) -> Iterator[tuple[str, int]]:
        for entry in entries:
            path = f"{prefix}{separator}{entry.name}"
            if isinstance(entry, Leaf):
                yield path, entry.position
            elif isinstance(entry, Branch):
                yield from walk(path, entry.children)

    for category_name, entries in outline:
        yield from walk(category_name, entries)


class OutlineBuilder:
    """Builds outlines for parsed trees or Ada files with a fixed configuration.

    Stateless between calls apart from the cached parser.
    """

    def __init__(self, config: OutlineConfig | None = None) -> None:
        self.config = config or OutlineConfig()
        self._parser: Any = None

    def build(self, root: Any) -> list[CategoryOutline]:
        outline = build_outline(root, self.config)
        log.debug(
            "outline_built",
            categories=[name for name, _ in outline],
            entries=sum(len(entries) for _, entries in outline),
        )
        return outline

    def build_file(self, path: Path, content: bytes | None = None) -> list[CategoryOutline]:
        """Parse ``path`` as Ada and build its outline."""
        from adaoutline.parsing import AdaParser

        set_build_id()
        if self._parser is None:
            self._parser = AdaParser()
        result = self._parser.parse(path, content)
        if result.error_count:
            log.info("parse_errors", path=str(path), errors=result.error_count)
        return self.build(result.root_node)
