"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from org2typst.ast import Document, Node
from org2typst.scanner import scan
from org2typst.template import DEFAULT_BIBLIOGRAPHY, TEMPLATE, bibliography_directive


@pytest.fixture
def scan_source():
    """Return a helper that scans source and returns its nodes."""

    def _scan(source: str) -> tuple[Node, ...]:
        return scan(source).children

    return _scan


def strip_wrapper(output: str, bibliography: str = DEFAULT_BIBLIOGRAPHY) -> str:
    """Remove the template header and bibliography footer from a full conversion."""
    footer = "\n\n" + bibliography_directive(bibliography)
    assert output.startswith(TEMPLATE), "output does not start with the template"
    assert output.endswith(footer), f"output does not end with {footer!r}"
    return output[len(TEMPLATE) : -len(footer)]


def assert_kinds(doc: Document | tuple[Node, ...], expected: list[type]) -> None:
    """Assert that the node classes match the expected list."""
    nodes = doc.children if isinstance(doc, Document) else doc
    actual = [type(n) for n in nodes]
    assert actual == expected, f"Expected {expected}, got {actual}"
