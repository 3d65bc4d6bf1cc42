#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Recipe sections
===============
A stored page is two sections, each opened by a marker line:

    <!-- Ingredients -->
    ...
    <!-- Instructions -->
    ...

The markers are HTML comments, so a page body rendered as a whole (the home
page) shows no trace of them.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from recipewiki.core.exceptions import MalformedPageError


INGREDIENTS_SENTINEL = "<!-- Ingredients -->"
INSTRUCTIONS_SENTINEL = "<!-- Instructions -->"


# -----------------------------------------------------------------------------

def _lines(text: str) -> list[str]:
    lines = text.replace("\r\n", "\n").split("\n")
    # A trailing newline ends the last line; it does not open an empty one.
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _normalize(section: str) -> str:
    section = section.replace("\r\n", "\n")
    if section and not section.endswith("\n"):
        section += "\n"
    return section


# -----------------------------------------------------------------------------

def parse(content: str) -> tuple[str, str]:
    """Split *content* into ``(ingredients, instructions)``.

    Raises MalformedPageError for any line seen before the first marker.
    """
    sections = {INGREDIENTS_SENTINEL: [], INSTRUCTIONS_SENTINEL: []}
    active: list[str] | None = None

    for line_no, line in enumerate(_lines(content), start=1):
        if line in sections:
            active = sections[line]
        elif active is None:
            raise MalformedPageError(line_no, line)
        else:
            active.append(line + "\n")

    return "".join(sections[INGREDIENTS_SENTINEL]), "".join(sections[INSTRUCTIONS_SENTINEL])


def serialize(ingredients: str, instructions: str) -> str:
    return (
        f"{INGREDIENTS_SENTINEL}\n{_normalize(ingredients)}"
        f"{INSTRUCTIONS_SENTINEL}\n{_normalize(instructions)}"
    )


# -----------------------------------------------------------------------------
