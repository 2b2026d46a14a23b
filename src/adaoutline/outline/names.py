"""Name reconstruction for Ada declarations.

Ada names come in three shapes that matter for navigation:

- ``identifier``: ``Foo``
- ``string_literal``: operator designators such as ``"+"``
- ``selected_component``: ``Prefix.Selector``, where the prefix may itself be
  a selected component (``Ada.Text_IO.Unbounded_IO``)

Anything else has no navigable name.
"""

from __future__ import annotations

from typing import Any

SIMPLE_NAME_TYPES = frozenset({"identifier", "string_literal"})

SPECIFICATION_TYPES = frozenset({"procedure_specification", "function_specification"})

# Declarations whose name lives on a nested node instead of on themselves:
# subprograms on their specification, generic packages on the wrapped
# package declaration, task and protected types on the full_type_declaration
# wrapper's child.
_NAMED_CHILD_TYPES = SPECIFICATION_TYPES | {
    "package_declaration",
    "task_type_declaration",
    "protected_type_declaration",
}

_NAME_FIELDS = ("name", "entry_name")


def _node_text(node: Any) -> str | None:
    text = node.text
    if text is None:
        return None
    return text.decode("utf-8", errors="replace")


def resolve_name(node: Any) -> str | None:
    """Return the dotted name spelled by ``node``, or None.

    A selected component resolves only when every part resolves.
    """
    if node is None:
        return None
    if node.type in SIMPLE_NAME_TYPES:
        return _node_text(node)
    if node.type == "selected_component":
        prefix = resolve_name(node.child_by_field_name("prefix"))
        if prefix is None:
            return None
        selector = node.child_by_field_name("selector_name")
        if selector is None or selector.type not in SIMPLE_NAME_TYPES:
            return None
        selector_name = _node_text(selector)
        if selector_name is None:
            return None
        return f"{prefix}.{selector_name}"
    return None


def declaration_name(node: Any) -> str | None:
    """Return the name of a declaration node, or None.

    Tried in order: the ``name`` or ``entry_name`` field, the first nested
    specification or wrapped declaration, then the first direct identifier
    child (task, protected, type and stub declarations).
    """
    for field_name in _NAME_FIELDS:
        name_node = node.child_by_field_name(field_name)
        if name_node is not None:
            return resolve_name(name_node)
    for child in node.children:
        if child.type in _NAMED_CHILD_TYPES:
            return declaration_name(child)
    for child in node.children:
        if child.type == "identifier":
            return resolve_name(child)
    return None
