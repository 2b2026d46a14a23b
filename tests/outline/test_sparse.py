"""Tests for outline/sparse.py."""

from __future__ import annotations

from typing import Any

from adaoutline.outline.models import SparseNode
from adaoutline.outline.sparse import build_sparse


def _shape(node: SparseNode) -> Any:
    return (node.origin.type, [_shape(child) for child in node.children])


def _is(type_: str) -> Any:
    return lambda node: node.type == type_


class TestBuildSparse:
    """Tests for build_sparse."""

    def test_root_kept_when_not_matching(self, ada: Any) -> None:
        """The root anchors the sparse tree even if it fails the predicate."""
        # Given
        root = ada.compilation()

        # When
        sparse = build_sparse(root, _is("nothing"))

        # Then
        assert sparse.origin is root
        assert sparse.children == ()

    def test_deep_match_spliced_to_root(self, ada: Any) -> None:
        """Only the root and one deeply nested match give exactly two levels."""
        # Given
        target = ada.make("target")
        node = target
        for _ in range(20):
            node = ada.make("wrapper", node)
        root = ada.make("compilation", node)

        # When
        sparse = build_sparse(root, _is("target"))

        # Then
        assert len(sparse.children) == 1
        assert sparse.children[0].origin is target
        assert sparse.children[0].children == ()

    def test_matches_reparented_to_nearest_matching_ancestor(self, ada: Any) -> None:
        """Matches below a non-matching node attach to the nearest matching ancestor."""
        # Given
        root = ada.compilation(
            ada.package_body(
                "Outer",
                ada.procedure_body("A"),
                ada.package_body("Inner", ada.procedure_body("B")),
            ),
            ada.procedure_body("C"),
        )
        predicate = lambda node: node.type in ("package_body", "subprogram_body")  # noqa: E731

        # When
        sparse = build_sparse(root, predicate)

        # Then
        assert _shape(sparse) == (
            "compilation",
            [
                (
                    "package_body",
                    [
                        ("subprogram_body", []),
                        ("package_body", [("subprogram_body", [])]),
                    ],
                ),
                ("subprogram_body", []),
            ],
        )

    def test_document_order_preserved(self, ada: Any) -> None:
        """Matching siblings keep their source order."""
        # Given
        root = ada.compilation(
            ada.procedure_body("First"), ada.procedure_body("Second"), ada.procedure_body("Third")
        )

        # When
        sparse = build_sparse(root, _is("subprogram_body"))

        # Then
        starts = [child.origin.start_byte for child in sparse.children]
        assert starts == sorted(starts)
        assert len(starts) == 3

    def test_max_depth_excludes_deeper_matches(self, ada: Any) -> None:
        """Nodes beyond the depth cap are not visited even if they match."""
        # Given
        shallow = ada.make("target")
        deep = ada.make("target")
        root = ada.make("root", ada.make("a", shallow), ada.make("a", ada.make("b", deep)))

        # When
        sparse = build_sparse(root, _is("target"), max_depth=2)

        # Then
        assert [child.origin for child in sparse.children] == [shallow]

    def test_max_depth_counts_from_root(self, ada: Any) -> None:
        """A depth cap of 1 sees only the root's direct children."""
        # Given
        direct = ada.make("target")
        root = ada.make("root", direct, ada.make("a", ada.make("target")))

        # When
        sparse = build_sparse(root, _is("target"), max_depth=1)

        # Then
        assert [child.origin for child in sparse.children] == [direct]
