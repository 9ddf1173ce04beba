"""Renderer unit tests."""

from __future__ import annotations

import pytest

from org2typst.ast import (
    Citation,
    CrossRef,
    Directive,
    Document,
    Drawer,
    Fence,
    Heading,
    Italic,
    Quote,
    Text,
    TitleAuthor,
)
from org2typst.render import render, render_body, render_node
from org2typst.template import TEMPLATE
from org2typst.tokens import Position, Span

S = Span(Position(1, 1, 0), Position(1, 1, 0))


def _doc(*children) -> Document:
    return Document(children, S)


class TestNodes:
    def test_text_unchanged(self) -> None:
        assert render_node(Text("a  b\n\t", S)) == "a  b\n\t"

    def test_title_with_author(self) -> None:
        result = render_node(TitleAuthor("Notes", "A B", S))
        assert result == '#show: project.with(title: "Notes", authors: ("A B",))'

    def test_title_falls_back_to_author_argument(self) -> None:
        result = render_node(TitleAuthor("Notes", None, S), author="Fallback Name")
        assert result == '#show: project.with(title: "Notes", authors: ("Fallback Name",))'

    @pytest.mark.parametrize("depth", [1, 2, 5])
    def test_heading(self, depth: int) -> None:
        assert render_node(Heading(depth, S)) == "\n" + "=" * depth

    def test_fence_open_and_close_are_identical(self) -> None:
        assert render_node(Fence(True, S)) == "```"
        assert render_node(Fence(False, S)) == "```"

    def test_drawer_and_directive_are_removed(self) -> None:
        assert render_node(Drawer("abc", S)) == ""
        assert render_node(Directive("options", S)) == ""

    def test_italic(self) -> None:
        assert render_node(Italic("word", S)) == "_word_"

    def test_cross_ref_keeps_only_label(self) -> None:
        assert render_node(CrossRef("xyz", "Target", S)) == "#underline[Target]"

    def test_quote(self) -> None:
        assert render_node(Quote("hi there", S)) == '"hi there"'

    def test_citation(self) -> None:
        assert render_node(Citation("ref1", S)) == "ref1"

    def test_citation_without_key(self) -> None:
        assert render_node(Citation(None, S)) == "error"

    def test_unknown_node_raises(self) -> None:
        with pytest.raises(TypeError):
            render_node(object())  # type: ignore[arg-type]


class TestDocument:
    def test_empty_document(self) -> None:
        assert render(_doc()) == TEMPLATE + '\n\n#bibliography("refs.bib")'

    def test_custom_bibliography(self) -> None:
        assert render(_doc(), bibliography="library.bib").endswith(
            '\n\n#bibliography("library.bib")'
        )

    def test_body_concatenates_in_order(self) -> None:
        doc = _doc(Text("a ", S), Italic("b", S), Text(" c", S))
        assert render_body(doc) == "a _b_ c"

    def test_template_precedes_body(self) -> None:
        result = render(_doc(Text("BODY", S)))
        assert result.startswith(TEMPLATE + "BODY")
