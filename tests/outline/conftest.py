"""Shared fixtures for outline tests.

Syntax trees here are hand-built stand-ins for tree-sitter-ada output: same
node types and field names, positions assigned in document (preorder) order.
"""

from __future__ import annotations

from typing import Any

import pytest


class FakeNode:
    """Minimal tree-sitter ``Node`` look-alike."""

    def __init__(
        self,
        type: str,
        children: list[FakeNode] | None = None,
        fields: dict[str, FakeNode] | None = None,
        text: str | None = None,
    ) -> None:
        self.type = type
        self.children = children or []
        self._fields = fields or {}
        self.text = text.encode() if text is not None else None
        self.parent: FakeNode | None = None
        self.start_byte = 0
        self.is_missing = False
        for child in self.children:
            child.parent = self

    def child_by_field_name(self, name: str) -> FakeNode | None:
        return self._fields.get(name)

    def __repr__(self) -> str:
        return f"FakeNode({self.type!r}, start={self.start_byte})"


def make(type_: str, *children: FakeNode, text: str | None = None, **fields: FakeNode) -> FakeNode:
    """Build a node; field nodes come first among its children."""
    return FakeNode(type_, [*fields.values(), *children], fields, text)


def assign_positions(root: FakeNode) -> FakeNode:
    counter = 0

    def visit(node: FakeNode) -> None:
        nonlocal counter
        node.start_byte = counter
        counter += 10
        for child in node.children:
            visit(child)

    visit(root)
    return root


class AdaTreeFactory:
    """Builders for the tree-sitter-ada shapes the outline cares about."""

    make = staticmethod(make)

    def name(self, dotted: str) -> FakeNode:
        """identifier, string_literal (quoted), or nested selected_component."""
        if dotted.startswith('"'):
            return make("string_literal", text=dotted)
        parts = dotted.split(".")
        node = make("identifier", text=parts[0])
        for part in parts[1:]:
            node = make(
                "selected_component", prefix=node, selector_name=make("identifier", text=part)
            )
        return node

    def package(self, name: str, *body: FakeNode) -> FakeNode:
        return make("package_declaration", *body, name=self.name(name))

    def package_body(self, name: str, *body: FakeNode) -> FakeNode:
        return make("package_body", make("non_empty_declarative_part", *body), name=self.name(name))

    def package_body_stub(self, name: str) -> FakeNode:
        return make("package_body_stub", make("identifier", text=name))

    def generic_package(self, name: str, *body: FakeNode) -> FakeNode:
        return make("generic_package_declaration", make("generic_formal_part"), self.package(name, *body))

    def procedure_body(self, name: str, *body: FakeNode) -> FakeNode:
        return make(
            "subprogram_body",
            make("procedure_specification", name=self.name(name)),
            make("non_empty_declarative_part", *body),
            make("handled_sequence_of_statements"),
        )

    def function_decl(self, name: str) -> FakeNode:
        return make(
            "subprogram_declaration", make("function_specification", name=self.name(name))
        )

    def entry_decl(self, name: str) -> FakeNode:
        return make("entry_declaration", entry_name=make("identifier", text=name))

    def entry_body(self, name: str) -> FakeNode:
        return make("entry_body", make("identifier", text=name), make("entry_barrier"))

    # Task, protected and type declarations carry their name as a bare
    # identifier child, not as a field.

    def task_type(self, name: str, *entries: FakeNode) -> FakeNode:
        return make(
            "full_type_declaration",
            make(
                "task_type_declaration",
                make("identifier", text=name),
                make("task_definition", *entries),
            ),
        )

    def single_task(self, name: str, *entries: FakeNode) -> FakeNode:
        return make(
            "single_task_declaration",
            make("identifier", text=name),
            make("task_definition", *entries),
        )

    def task_body(self, name: str, *body: FakeNode) -> FakeNode:
        return make(
            "task_body", make("identifier", text=name), make("non_empty_declarative_part", *body)
        )

    def protected_type(self, name: str, *items: FakeNode) -> FakeNode:
        return make(
            "full_type_declaration",
            make(
                "protected_type_declaration",
                make("identifier", text=name),
                make("protected_definition", *items),
            ),
        )

    def protected_body(self, name: str, *body: FakeNode) -> FakeNode:
        return make("protected_body", make("identifier", text=name), *body)

    def type_decl(self, name: str) -> FakeNode:
        return make(
            "full_type_declaration", make("identifier", text=name), make("record_type_definition")
        )

    def with_clause(self, *names: str) -> FakeNode:
        return make("compilation_unit", make("with_clause", *(self.name(n) for n in names)))

    def compilation(self, *items: FakeNode) -> FakeNode:
        units = [
            item if item.type == "compilation_unit" else make("compilation_unit", item)
            for item in items
        ]
        return assign_positions(make("compilation", *units))


@pytest.fixture
def ada() -> AdaTreeFactory:
    """Factory for fake tree-sitter-ada trees."""
    return AdaTreeFactory()


def find(root: Any, type_: str, name: str | None = None) -> Any:
    """First node of ``type_`` in preorder (optionally with a given declaration name)."""
    from adaoutline.outline.names import declaration_name

    stack = [root]
    while stack:
        node = stack.pop(0)
        if node.type == type_ and (name is None or declaration_name(node) == name):
            return node
        stack[0:0] = node.children
    raise LookupError(f"no {type_} named {name}")


@pytest.fixture
def find_node() -> Any:
    """Locate a node in a fake tree, for position assertions."""
    return find
