#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Exceptions raised by the page services.

Handlers turn these into responses: a missing page becomes a redirect into
the edit flow (UI) or a 404 (API); a malformed page becomes an error page for
that one request, as does a page file that cannot be decoded.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations


# -----------------------------------------------------------------------------

class RecipeWikiError(Exception):
    """Base class for all RecipeWiki errors."""


# -----------------------------------------------------------------------------

class PageNotFoundError(RecipeWikiError, LookupError):

    def __init__(self, slug: str):
        super().__init__(f"Page '{slug}' does not exist")
        self.slug = slug


# -----------------------------------------------------------------------------

class MalformedPageError(RecipeWikiError, ValueError):
    """A stored page has content before its first section marker."""

    def __init__(self, line_no: int, line: str, slug: str | None = None):
        self.line_no = line_no
        self.line = line
        self.slug = slug
        super().__init__(self._message())

    def _message(self) -> str:
        where = f"page '{self.slug}'" if self.slug else "page content"
        return f"Malformed {where}: line {self.line_no} precedes any section marker: {self.line!r}"

    def with_slug(self, slug: str) -> "MalformedPageError":
        self.slug = slug
        self.args = (self._message(),)
        return self


# -----------------------------------------------------------------------------

class PageEncodingError(RecipeWikiError, ValueError):
    """A stored page file is not valid UTF-8."""

    def __init__(self, slug: str, reason: str = ""):
        self.slug = slug
        self.reason = reason
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Page '{slug}' is not valid UTF-8{detail}")


# -----------------------------------------------------------------------------
