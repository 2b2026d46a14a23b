"""Configuration constants.

Values that are not user-configurable: category identifiers, default
ordering and grammar metadata.
"""

# =============================================================================
# Outline Categories
# =============================================================================

DEFAULT_CATEGORIES: tuple[str, ...] = (
    "package",
    "subprogram",
    "protected",
    "task",
    "type-declaration",
    "with-clause",
)
"""Category identifiers in default display order."""

DEFAULT_PLACEHOLDER = "<<parent>>"
"""Label of the synthetic leaf inserted by the 'within' nesting strategy."""

WITH_CLAUSE_MAX_DEPTH = 3
"""compilation -> compilation_unit -> with_clause -> name."""

# =============================================================================
# Grammar
# =============================================================================

GRAMMAR_PACKAGE = "tree-sitter-ada"
GRAMMAR_MODULE = "tree_sitter_ada"
GRAMMAR_MIN_VERSION = "0.1.0"

ADA_EXTENSIONS = frozenset({"adb", "ads", "ada"})
"""File extensions parsed as Ada (lowercase, without dot)."""
