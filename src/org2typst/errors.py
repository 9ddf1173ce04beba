"""Conversion I/O errors and source-snippet formatting."""

from __future__ import annotations

from pathlib import Path

from org2typst.tokens import Span


class ConvertError(Exception):
    """Base class for failures outside the conversion engine itself."""

    def __init__(self, message: str, path: Path | str) -> None:
        self.message = message
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class PathResolutionError(ConvertError):
    """The source path could not be resolved to an absolute path."""


class SourceOpenError(ConvertError):
    """The source file exists but could not be opened."""


class SourceReadError(ConvertError):
    """The source file was opened but its content is not readable text."""


class DestinationCreateError(ConvertError):
    """The destination file could not be created."""


class DestinationWriteError(ConvertError):
    """The destination file was created but writing to it failed."""


def format_snippet(
    label: str,
    message: str,
    span: Span,
    source: str,
    filename: str = "input.org",
) -> str:
    """Format a message with the offending source line and a caret underline."""
    lines = source.splitlines(keepends=True)
    line_idx = span.start.line - 1
    col = span.start.column

    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx].rstrip("\n").rstrip("\r")
    else:
        source_line = ""

    # Underline the full span when on one line, otherwise to end of line
    if span.end.line == span.start.line:
        underline_len = max(1, span.end.column - col)
    else:
        underline_len = max(1, len(source_line) - col + 1)

    pad = " " * (col - 1)
    carets = "^" * underline_len

    line_num = str(span.start.line)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"{label}: {message}\n"
        f"{' ' * gutter_width}--> {filename}:{span.start.line}:{col}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}{carets}"
    )
