"""Typst renderer — turns a scanned Document into Typst markup."""

from __future__ import annotations

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
from org2typst.template import (
    DEFAULT_AUTHOR,
    DEFAULT_BIBLIOGRAPHY,
    TEMPLATE,
    bibliography_directive,
    setup_call,
)


def render(
    doc: Document,
    author: str = DEFAULT_AUTHOR,
    bibliography: str = DEFAULT_BIBLIOGRAPHY,
) -> str:
    """Render a scanned document to a complete Typst file."""
    return TEMPLATE + render_body(doc, author) + "\n\n" + bibliography_directive(bibliography)


def render_body(doc: Document, author: str = DEFAULT_AUTHOR) -> str:
    """Render only the converted body, without template or bibliography."""
    return "".join(render_node(child, author) for child in doc.children)


def render_node(node: Node, author: str = DEFAULT_AUTHOR) -> str:
    """Return the Typst fragment for a single node."""
    if isinstance(node, Text):
        return node.value
    if isinstance(node, TitleAuthor):
        return setup_call(node.title, node.author if node.author is not None else author)
    if isinstance(node, Heading):
        return "\n" + "=" * node.depth
    if isinstance(node, Fence):
        return "```"
    if isinstance(node, (Drawer, Directive)):
        return ""
    if isinstance(node, Italic):
        return f"_{node.text}_"
    if isinstance(node, CrossRef):
        return f"#underline[{node.label}]"
    if isinstance(node, Quote):
        return f'"{node.text}"'
    if isinstance(node, Citation):
        return node.key if node.key is not None else "error"
    raise TypeError(f"cannot render {type(node).__name__}")
