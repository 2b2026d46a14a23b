"""Tree-sitter parsing of Ada sources."""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tree_sitter

from adaoutline.config.constants import ADA_EXTENSIONS, GRAMMAR_MODULE
from adaoutline.core.errors import ParseError


@dataclass
class ParseResult:
    """Result of parsing a file."""

    tree: Any  # Tree-sitter Tree
    error_count: int
    total_nodes: int
    root_node: Any  # Tree-sitter Node


def count_nodes(root: Any) -> tuple[int, int]:
    """Return (error_count, total_nodes) for the tree under ``root``."""
    error_count = 0
    total_nodes = 0

    def visit(node: Any) -> None:
        nonlocal error_count, total_nodes
        total_nodes += 1
        if node.type == "ERROR" or node.is_missing:
            error_count += 1
        for child in node.children:
            visit(child)

    visit(root)
    return error_count, total_nodes


def is_ada_file(path: Path) -> bool:
    return path.suffix.lower().lstrip(".") in ADA_EXTENSIONS


@dataclass
class AdaParser:
    """
    Tree-sitter parser for Ada.

    Usage::

        parser = AdaParser()
        result = parser.parse(Path("src/foo.adb"))
        root = result.root_node
    """

    grammar_module: str = GRAMMAR_MODULE
    _parser: Any = field(default=None, repr=False)
    _language: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Initialize the parser."""
        self._parser = tree_sitter.Parser()

    def _get_language(self) -> Any:
        """Load the Ada language, once."""
        if self._language is None:
            try:
                lang_module = importlib.import_module(self.grammar_module)
            except ImportError as err:
                raise ParseError.grammar_unavailable(self.grammar_module) from err
            self._language = tree_sitter.Language(lang_module.language())
        return self._language

    def parse(self, path: Path, content: bytes | None = None) -> ParseResult:
        """
        Parse an Ada file with Tree-sitter.

        Args:
            path: Path to file (used for language detection)
            content: File content as bytes. If None, reads from path.

        Returns:
            ParseResult with tree and error info.

        Raises:
            ParseError: If the file is not Ada or the grammar is missing.
        """
        if not is_ada_file(path):
            raise ParseError.unsupported_file(str(path))
        if content is None:
            content = path.read_bytes()
        return self.parse_bytes(content)

    def parse_bytes(self, content: bytes) -> ParseResult:
        """Parse Ada source already in memory."""
        self._parser.language = self._get_language()
        tree = self._parser.parse(content)
        error_count, total_nodes = count_nodes(tree.root_node)
        return ParseResult(
            tree=tree,
            error_count=error_count,
            total_nodes=total_nodes,
            root_node=tree.root_node,
        )
