"""Tests for the --debug node dump."""

from __future__ import annotations

import io

from org2typst.debug import dump_document
from org2typst.scanner import scan


def _dump(source: str) -> list[str]:
    out = io.StringIO()
    dump_document(scan(source), file=out)
    return out.getvalue().splitlines()


class TestDump:
    def test_empty_document(self) -> None:
        assert _dump("") == ["Document"]

    def test_one_line_per_node(self) -> None:
        lines = _dump("#+title: T #+author: A\n* H [cite:@k]")
        assert lines == [
            "Document",
            "  1:1 TitleAuthor title='T' author='A'",
            "  1:23 Heading depth=1",
            "  2:2 Text(' H ')",
            "  2:5 Citation key='k'",
        ]

    def test_fences_and_removed_constructs(self) -> None:
        lines = _dump("#+begin_src c\n#+end_src\n:PROPERTIES:\n:ID: x1\n:END:\n#+options: a\n")
        assert "  1:1 Fence begin" in lines
        assert "  2:1 Fence end" in lines
        assert "  3:1 Drawer id='x1'" in lines
        assert "  6:1 Directive 'options'" in lines

    def test_default_stream_is_current_stderr(self, capsys) -> None:
        dump_document(scan("a\n* b"))
        err = capsys.readouterr().err
        assert err.startswith("Document\n")
        assert "2:1 Heading depth=1" in err
