"""Recognizer table — one compiled pattern and node builder per Org construct.

Each recognizer matches independently of the others. When two recognizers
match at the same offset the one listed first in ``RULES`` wins; otherwise
the earliest match wins (see ``org2typst.scanner``).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from org2typst.ast import (
    Citation,
    CrossRef,
    Directive,
    Drawer,
    Fence,
    Heading,
    Italic,
    Node,
    Quote,
    TitleAuthor,
)
from org2typst.tokens import Span


@dataclass(frozen=True, slots=True)
class Rule:
    """A named recognizer: pattern plus the builder for its node."""

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str], Span], Node]


def _title_author(m: re.Match[str], span: Span) -> Node:
    return TitleAuthor(m.group("title"), m.group("author"), span)


def _heading(m: re.Match[str], span: Span) -> Node:
    return Heading(len(m.group("stars")), span)


def _fence(m: re.Match[str], span: Span) -> Node:
    return Fence(m.group().startswith("#+begin_src"), span)


def _drawer(m: re.Match[str], span: Span) -> Node:
    return Drawer(m.group("id"), span)


def _directive(m: re.Match[str], span: Span) -> Node:
    keyword = m.group("line").partition(":")[0].strip()
    return Directive(keyword, span)


def _italic(m: re.Match[str], span: Span) -> Node:
    return Italic(m.group("text"), span)


def _cross_ref(m: re.Match[str], span: Span) -> Node:
    return CrossRef(m.group("target"), m.group("label"), span)


def _quote(m: re.Match[str], span: Span) -> Node:
    return Quote(m.group("text"), span)


def _citation(m: re.Match[str], span: Span) -> Node:
    return Citation(m.group("key"), span)


def _rule(name: str, pattern: str, build: Callable[[re.Match[str], Span], Node]) -> Rule:
    return Rule(name, re.compile(pattern), build)


RULES: tuple[Rule, ...] = (
    _rule(
        "title-author",
        r"#\+title:\s(?P<title>[\w-]+)(?:(?:\r\n|\s)#\+author:\s(?P<author>[\w ]+))?",
        _title_author,
    ),
    _rule("heading", r"\n(?P<stars>\*+)", _heading),
    # end_src leaves its trailing newline in place
    _rule("fence", r"#\+begin_src\s|#\+end_src", _fence),
    _rule("drawer", r":PROPERTIES:\s:ID:\s+(?P<id>[\w-]*)\s:END:", _drawer),
    _rule("directive", r"#\+(?P<line>.+)\s", _directive),
    _rule("italic", r"/(?P<text>[\w ]+)/", _italic),
    # a target may contain "]" but not "]["
    _rule(
        "cross-ref",
        r"\[\[id:(?P<target>(?:(?!\]\[)[^\n])+?)\]\[(?P<label>[\w-]+)\]\]",
        _cross_ref,
    ),
    _rule("quote", r"``(?P<text>[\w\s]+)''", _quote),
    _rule("citation", r"\[cite:@(?P<key>[\w-]+)\]", _citation),
)
