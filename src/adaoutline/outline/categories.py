"""Ada outline categories.

Each category is a ``CategorySpec`` over tree-sitter-ada node types. Most
categories group their items under the enclosing "defuns" (packages,
subprograms, protected units and tasks), so that e.g. a type declared in a
package body shows up nested under that package.
"""

from __future__ import annotations

from typing import Any

from adaoutline.config.constants import WITH_CLAUSE_MAX_DEPTH
from adaoutline.core.errors import ConfigError
from adaoutline.outline.models import CategorySpec
from adaoutline.outline.names import declaration_name, resolve_name

PACKAGE_TYPES = frozenset(
    {
        "package_declaration",
        "package_body",
        "package_body_stub",
        "generic_package_declaration",
        "package_renaming_declaration",
        "generic_package_renaming_declaration",
    }
)

SUBPROGRAM_TYPES = frozenset(
    {
        "subprogram_declaration",
        "subprogram_body",
        "subprogram_body_stub",
        "expression_function_declaration",
        "null_procedure_declaration",
        "abstract_subprogram_declaration",
        "subprogram_renaming_declaration",
        "generic_subprogram_declaration",
        "generic_subprogram_renaming_declaration",
        "entry_declaration",
        "entry_body",
    }
)

PROTECTED_TYPES = frozenset(
    {
        "protected_type_declaration",
        "single_protected_declaration",
        "protected_body",
        "protected_body_stub",
    }
)

TASK_TYPES = frozenset(
    {
        "task_type_declaration",
        "single_task_declaration",
        "task_body",
        "task_body_stub",
    }
)

TYPE_DECLARATION_TYPES = frozenset(
    {
        "full_type_declaration",
        "private_type_declaration",
        "private_extension_declaration",
        "incomplete_type_declaration",
        "subtype_declaration",
        "task_type_declaration",
        "protected_type_declaration",
    }
)

_WRAPPED_TYPE_TYPES = frozenset({"task_type_declaration", "protected_type_declaration"})

WITH_CLAUSE_NAME_TYPES = frozenset({"identifier", "selected_component"})


def _instantiation_kind(node: Any) -> str | None:
    """'package', 'procedure' or 'function' for a generic instantiation."""
    if node.type != "generic_instantiation":
        return None
    for child in node.children:
        if child.type in ("package", "procedure", "function"):
            return child.type
    return None


def is_package(node: Any) -> bool:
    if node.type in PACKAGE_TYPES:
        # The generic wrapper is the item, not the declaration it wraps.
        parent = node.parent
        return not (
            node.type == "package_declaration"
            and parent is not None
            and parent.type == "generic_package_declaration"
        )
    return _instantiation_kind(node) == "package"


def is_subprogram(node: Any) -> bool:
    if node.type in SUBPROGRAM_TYPES:
        return True
    return _instantiation_kind(node) in ("procedure", "function")


def is_protected(node: Any) -> bool:
    return node.type in PROTECTED_TYPES


def is_task(node: Any) -> bool:
    return node.type in TASK_TYPES


def is_type_declaration(node: Any) -> bool:
    if node.type not in TYPE_DECLARATION_TYPES:
        return False
    # full_type_declaration wraps task and protected types; count it once.
    parent = node.parent
    return not (
        node.type in _WRAPPED_TYPE_TYPES
        and parent is not None
        and parent.type == "full_type_declaration"
    )


def is_defun(node: Any) -> bool:
    return is_package(node) or is_subprogram(node) or is_protected(node) or is_task(node)


def is_with_clause_name(node: Any) -> bool:
    parent = node.parent
    return (
        node.type in WITH_CLAUSE_NAME_TYPES
        and parent is not None
        and parent.type == "with_clause"
    )


def _never(node: Any) -> bool:  # noqa: ARG001
    return False


CATEGORIES: dict[str, CategorySpec] = {
    spec.category_id: spec
    for spec in (
        CategorySpec(
            category_id="package",
            display_name="Package",
            item_predicate=is_package,
            branch_predicate=is_package,
            item_name_fn=declaration_name,
            branch_name_fn=declaration_name,
        ),
        CategorySpec(
            category_id="subprogram",
            display_name="Subprogram",
            item_predicate=is_subprogram,
            branch_predicate=is_defun,
            item_name_fn=declaration_name,
            branch_name_fn=declaration_name,
        ),
        CategorySpec(
            category_id="protected",
            display_name="Protected",
            item_predicate=is_protected,
            branch_predicate=is_defun,
            item_name_fn=declaration_name,
            branch_name_fn=declaration_name,
        ),
        CategorySpec(
            category_id="task",
            display_name="Task",
            item_predicate=is_task,
            branch_predicate=is_defun,
            item_name_fn=declaration_name,
            branch_name_fn=declaration_name,
        ),
        CategorySpec(
            category_id="type-declaration",
            display_name="Type Declaration",
            item_predicate=is_type_declaration,
            branch_predicate=is_defun,
            item_name_fn=declaration_name,
            branch_name_fn=declaration_name,
        ),
        CategorySpec(
            category_id="with-clause",
            display_name="With Clause",
            item_predicate=is_with_clause_name,
            branch_predicate=_never,
            item_name_fn=resolve_name,
            branch_name_fn=resolve_name,
            max_depth=WITH_CLAUSE_MAX_DEPTH,
        ),
    )
}


def get_category(category_id: str) -> CategorySpec:
    """Look up a registered category.

    Raises:
        ConfigError: If ``category_id`` is not registered.
    """
    try:
        return CATEGORIES[category_id]
    except KeyError:
        raise ConfigError.unknown_category(category_id, sorted(CATEGORIES)) from None
