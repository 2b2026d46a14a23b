"""Tree-sitter parsing for Ada."""

from adaoutline.parsing.grammars import install_grammar, is_grammar_installed
from adaoutline.parsing.treesitter import AdaParser, ParseResult, count_nodes, is_ada_file

__all__ = [
    "AdaParser",
    "ParseResult",
    "count_nodes",
    "install_grammar",
    "is_ada_file",
    "is_grammar_installed",
]
