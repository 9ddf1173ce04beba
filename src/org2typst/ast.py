"""Node types produced by a single scan of an Org document."""

from __future__ import annotations

from dataclasses import dataclass

from org2typst.tokens import Span


@dataclass(frozen=True, slots=True)
class Text:
    """Unrecognized source text, passed through unchanged."""

    value: str
    span: Span


@dataclass(frozen=True, slots=True)
class TitleAuthor:
    """#+title: declaration, optionally followed by #+author:."""

    title: str
    author: str | None
    span: Span


@dataclass(frozen=True, slots=True)
class Heading:
    """Newline plus a run of asterisks; depth is the asterisk count."""

    depth: int
    span: Span


@dataclass(frozen=True, slots=True)
class Fence:
    """#+begin_src or #+end_src delimiter."""

    opening: bool
    span: Span


@dataclass(frozen=True, slots=True)
class Drawer:
    """:PROPERTIES: drawer holding a single :ID: line."""

    identifier: str
    span: Span


@dataclass(frozen=True, slots=True)
class Directive:
    """Any other #+keyword line."""

    keyword: str
    span: Span


@dataclass(frozen=True, slots=True)
class Italic:
    """/emphasis/ span."""

    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class CrossRef:
    """[[id:target][label]] link."""

    target: str
    label: str
    span: Span


@dataclass(frozen=True, slots=True)
class Quote:
    """``typographic quote'' span."""

    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class Citation:
    """[cite:@key] reference."""

    key: str | None
    span: Span


Node = (
    Text | TitleAuthor | Heading | Fence | Drawer | Directive | Italic | CrossRef | Quote | Citation
)


@dataclass(frozen=True, slots=True)
class Document:
    """Root node: the scanned source as an ordered run of nodes."""

    children: tuple[Node, ...]
    span: Span
