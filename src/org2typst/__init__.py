"""Org to Typst converter."""

from __future__ import annotations

from org2typst.template import DEFAULT_AUTHOR, DEFAULT_BIBLIOGRAPHY

__version__ = "0.1.0"


def convert(
    source: str,
    author: str = DEFAULT_AUTHOR,
    bibliography: str = DEFAULT_BIBLIOGRAPHY,
) -> str:
    """Scan Org source and render it as a complete Typst document."""
    from org2typst.render import render
    from org2typst.scanner import scan

    return render(scan(source), author=author, bibliography=bibliography)
