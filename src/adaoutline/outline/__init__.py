"""Navigation index (outline) builder."""

from adaoutline.outline.assembler import OutlineBuilder, build_outline, flatten
from adaoutline.outline.categories import CATEGORIES, get_category
from adaoutline.outline.models import (
    Branch,
    CategoryOutline,
    CategorySpec,
    Leaf,
    OutlineEntry,
    SparseNode,
    SyntaxNode,
)
from adaoutline.outline.names import declaration_name, resolve_name
from adaoutline.outline.reducer import (
    NestingStrategy,
    SortStrategy,
    get_nesting_strategy,
    get_sort_strategy,
    make_nest_within,
    make_sort_alphabetical,
    nest_before,
    reduce,
    sort_none,
)
from adaoutline.outline.sparse import build_sparse

__all__ = [
    # Assembly
    "OutlineBuilder",
    "build_outline",
    "flatten",
    # Categories
    "CATEGORIES",
    "get_category",
    # Models
    "Branch",
    "CategoryOutline",
    "CategorySpec",
    "Leaf",
    "OutlineEntry",
    "SparseNode",
    "SyntaxNode",
    # Names
    "declaration_name",
    "resolve_name",
    # Reduction
    "NestingStrategy",
    "SortStrategy",
    "get_nesting_strategy",
    "get_sort_strategy",
    "make_nest_within",
    "make_sort_alphabetical",
    "nest_before",
    "reduce",
    "sort_none",
    # Sparse trees
    "build_sparse",
]
