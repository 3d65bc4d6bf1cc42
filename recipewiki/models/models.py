#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
In-memory page records.

Nothing here is persisted directly: a Page is built per request from its
backing file and thrown away once the response is sent.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass


# -----------------------------------------------------------------------------

@dataclass
class Page:
    title: str
    filename: str           # storage slug, always slugify(title)
    ingredients: str = ""
    instructions: str = ""


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class IndexEntry:
    title: str
    url: str


# -----------------------------------------------------------------------------
