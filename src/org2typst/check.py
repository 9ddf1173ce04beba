"""Non-fatal diagnostics for constructs that convert, but probably not as intended."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from org2typst.ast import Document, Fence, TitleAuthor
from org2typst.errors import format_snippet
from org2typst.tokens import Span


class Severity(Enum):
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A message attached to a source span."""

    message: str
    span: Span
    severity: Severity

    def format(self, source: str, filename: str = "input.org") -> str:
        return format_snippet(self.severity.value, self.message, self.span, source, filename)


def check(doc: Document) -> list[Diagnostic]:
    """Return diagnostics for a scanned document, in source order."""
    diagnostics: list[Diagnostic] = []
    seen_title = False
    open_fence: Fence | None = None

    for node in doc.children:
        if isinstance(node, TitleAuthor):
            if seen_title:
                diagnostics.append(
                    Diagnostic("duplicate title declaration", node.span, Severity.WARNING)
                )
            seen_title = True
            if node.author is None:
                diagnostics.append(
                    Diagnostic(
                        "title has no #+author; default author will be used",
                        node.span,
                        Severity.INFO,
                    )
                )
        elif isinstance(node, Fence):
            if node.opening:
                if open_fence is not None:
                    diagnostics.append(_unclosed(open_fence))
                open_fence = node
            elif open_fence is None:
                diagnostics.append(
                    Diagnostic(
                        "#+end_src without matching #+begin_src",
                        node.span,
                        Severity.WARNING,
                    )
                )
            else:
                open_fence = None

    if open_fence is not None:
        diagnostics.append(_unclosed(open_fence))

    diagnostics.sort(key=lambda d: d.span.start.offset)
    return diagnostics


def _unclosed(fence: Fence) -> Diagnostic:
    return Diagnostic("#+begin_src is never closed", fence.span, Severity.WARNING)
