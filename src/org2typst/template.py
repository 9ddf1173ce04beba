"""Typst document template and the fragments that call into it."""

from __future__ import annotations

DEFAULT_AUTHOR = "Ziqin Gong"
DEFAULT_BIBLIOGRAPHY = "refs.bib"

TEMPLATE = """\
#let project(title: "", authors: (), date: none, body) = {
  // Set the document's basic properties.
  set document(author: authors, title: title)
  set page(numbering: "1", number-align: center)

  // Save heading and body font families in variables.
  let body-font = "New Computer Modern"
  let sans-font = "New Computer Modern Sans"

  // Set body font family.
  set text(font: body-font, lang: "en")
  show math.equation: set text(weight: 400)
  show heading: set text(font: sans-font)

  // Title row.
  align(center)[
    #block(text(font: sans-font, weight: 700, 1.75em, title))
    #v(1em, weak: true)
    #date
  ]

  // Author information.
  pad(
    top: 0.5em,
    bottom: 0.5em,
    x: 2em,
    grid(
      columns: (1fr,) * calc.min(3, authors.len()),
      gutter: 1em,
      ..authors.map(author => align(center, strong(author))),
    ),
  )

  // Main body.
  set par(justify: true)

  body
}
"""


def setup_call(title: str, author: str) -> str:
    """Return the #show rule that applies the template to the document."""
    return f'#show: project.with(title: "{title}", authors: ("{author}",))'


def bibliography_directive(filename: str) -> str:
    return f'#bibliography("{filename}")'
