"""Tests for outline/names.py.

Covers:
- resolve_name() over identifiers, operator literals and selected components
- declaration_name() over the declaration shapes of tree-sitter-ada
"""

from __future__ import annotations

from typing import Any

import pytest

from adaoutline.outline.names import declaration_name, resolve_name


class TestResolveName:
    """Tests for resolve_name."""

    def test_identifier(self, ada: Any) -> None:
        """Simple identifiers resolve to their text."""
        assert resolve_name(ada.name("Foo")) == "Foo"

    def test_operator_string_literal(self, ada: Any) -> None:
        """Quoted operator designators keep their quotes."""
        assert resolve_name(ada.name('"+"')) == '"+"'

    def test_three_part_selected_component(self, ada: Any) -> None:
        """Outer.Middle.Inner resolves to the dotted literal."""
        # Given
        node = ada.name("Outer.Middle.Inner")

        # When
        result = resolve_name(node)

        # Then
        assert node.type == "selected_component"
        assert result == "Outer.Middle.Inner"

    def test_unresolvable_middle_part_yields_nothing(self, ada: Any) -> None:
        """A failing prefix makes the whole reference unnamed."""
        # Given
        middle = ada.make("function_call", text="Middle (1)")
        inner = ada.make(
            "selected_component",
            prefix=ada.make(
                "selected_component",
                prefix=ada.name("Outer"),
                selector_name=middle,
            ),
            selector_name=ada.name("Inner"),
        )

        # When
        result = resolve_name(inner)

        # Then
        assert result is None

    def test_missing_prefix_field(self, ada: Any) -> None:
        """A selected component without a prefix has no name."""
        node = ada.make("selected_component", selector_name=ada.name("Inner"))
        assert resolve_name(node) is None

    def test_unknown_shape(self, ada: Any) -> None:
        """Nodes of other types have no name."""
        assert resolve_name(ada.make("ERROR", text="???")) is None

    def test_none(self) -> None:
        """Absent nodes have no name."""
        assert resolve_name(None) is None


class TestDeclarationName:
    """Tests for declaration_name."""

    def test_package_uses_name_field(self, ada: Any) -> None:
        """Packages are named by their own name field."""
        assert declaration_name(ada.package("Ada.Containers")) == "Ada.Containers"

    def test_subprogram_body_uses_specification(self, ada: Any) -> None:
        """Subprogram bodies are named by their procedure specification."""
        assert declaration_name(ada.procedure_body("Run")) == "Run"

    def test_function_declaration_operator(self, ada: Any) -> None:
        """Operator functions are named by their quoted designator."""
        assert declaration_name(ada.function_decl('"="')) == '"="'

    def test_generic_package_uses_wrapped_declaration(self, ada: Any) -> None:
        """Generic packages are named by the package they wrap."""
        assert declaration_name(ada.generic_package("Stacks")) == "Stacks"

    def test_nameless_declaration(self, ada: Any) -> None:
        """Declarations with no recognizable name yield None."""
        assert declaration_name(ada.make("subprogram_body", ada.make("ERROR"))) is None

    def test_entry_declaration_uses_entry_name_field(self, ada: Any) -> None:
        """Entry declarations are named by their entry_name field."""
        assert declaration_name(ada.entry_decl("Start")) == "Start"

    def test_full_type_declaration_looks_through_task_type(self, ada: Any) -> None:
        """A task type wrapped in full_type_declaration names the wrapper."""
        # Given
        node = ada.task_type("Worker", ada.entry_decl("Start"))

        # When
        result = declaration_name(node)

        # Then
        assert node.type == "full_type_declaration"
        assert result == "Worker"

    def test_full_type_declaration_looks_through_protected_type(self, ada: Any) -> None:
        """A protected type wrapped in full_type_declaration names the wrapper."""
        assert declaration_name(ada.protected_type("Counter", ada.entry_decl("Bump"))) == "Counter"

    @pytest.mark.parametrize(
        "builder",
        [
            "single_task",
            "task_body",
            "protected_body",
            "type_decl",
            "entry_body",
            "package_body_stub",
        ],
    )
    def test_bare_identifier_child(self, ada: Any, builder: str) -> None:
        """Declarations without a name field are named by their first identifier."""
        assert declaration_name(getattr(ada, builder)("Plant")) == "Plant"

    def test_name_field_takes_precedence(self, ada: Any) -> None:
        """The name field wins over a later identifier such as the end name."""
        # Given
        node = ada.make(
            "package_body",
            ada.make("identifier", text="Closing"),
            name=ada.name("Opening"),
        )

        # Then
        assert declaration_name(node) == "Opening"
