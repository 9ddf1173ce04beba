"""--debug dump of scanned nodes to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from org2typst.ast import (
    Citation,
    CrossRef,
    Directive,
    Document,
    Drawer,
    Fence,
    Heading,
    Italic,
    Node,
    Quote,
    Text,
    TitleAuthor,
)


def dump_document(doc: Document, *, file: TextIO | None = None) -> None:
    """Print one line per scanned node to *file* (default: the current stderr)."""
    if file is None:
        file = sys.stderr
    file.write("Document\n")
    for node in doc.children:
        pos = node.span.start
        file.write(f"  {pos.line}:{pos.column} {_describe(node)}\n")


def _describe(node: Node) -> str:
    if isinstance(node, Text):
        return f"Text({node.value!r})"
    if isinstance(node, TitleAuthor):
        return f"TitleAuthor title={node.title!r} author={node.author!r}"
    if isinstance(node, Heading):
        return f"Heading depth={node.depth}"
    if isinstance(node, Fence):
        return "Fence begin" if node.opening else "Fence end"
    if isinstance(node, Drawer):
        return f"Drawer id={node.identifier!r}"
    if isinstance(node, Directive):
        return f"Directive {node.keyword!r}"
    if isinstance(node, Italic):
        return f"Italic({node.text!r})"
    if isinstance(node, CrossRef):
        return f"CrossRef target={node.target!r} label={node.label!r}"
    if isinstance(node, Quote):
        return f"Quote({node.text!r})"
    if isinstance(node, Citation):
        return f"Citation key={node.key!r}"
    return type(node).__name__
