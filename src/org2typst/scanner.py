"""Single-pass scanner — splits Org source into recognized nodes and pass-through text."""

from __future__ import annotations

import re

from org2typst.ast import Document, Node, Text
from org2typst.rules import RULES, Rule
from org2typst.tokens import LineIndex


class Scanner:
    """Run every recognizer over the source once, left to right.

    At each step the earliest match across all rules is taken; on a tie the
    rule listed first wins. Text between matches becomes ``Text`` nodes.
    """

    def __init__(self, source: str, rules: tuple[Rule, ...] = RULES) -> None:
        self._source = source
        self._rules = rules
        self._index = LineIndex(source)
        self._pos = 0
        # Next known match per rule; None once a rule can no longer match
        self._pending: list[re.Match[str] | None] = [None] * len(rules)
        self._exhausted: set[int] = set()

    def scan(self) -> Document:
        """Scan the full source and return the node sequence."""
        children: list[Node] = []
        while True:
            found = self._next_match()
            if found is None:
                break
            rule, match = found
            if match.start() > self._pos:
                children.append(self._text(self._pos, match.start()))
            span = self._index.span(match.start(), match.end())
            children.append(rule.build(match, span))
            self._pos = match.end()

        if self._pos < len(self._source):
            children.append(self._text(self._pos, len(self._source)))

        return Document(tuple(children), self._index.span(0, len(self._source)))

    def _next_match(self) -> tuple[Rule, re.Match[str]] | None:
        best: tuple[Rule, re.Match[str]] | None = None
        for i, rule in enumerate(self._rules):
            if i in self._exhausted:
                continue
            match = self._pending[i]
            if match is None or match.start() < self._pos:
                match = rule.pattern.search(self._source, self._pos)
                self._pending[i] = match
                if match is None:
                    self._exhausted.add(i)
                    continue
            if best is None or match.start() < best[1].start():
                best = (rule, match)
        return best

    def _text(self, start: int, end: int) -> Text:
        return Text(self._source[start:end], self._index.span(start, end))


def scan(source: str) -> Document:
    """Convenience function: scan source text and return its Document."""
    return Scanner(source).scan()
