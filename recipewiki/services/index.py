#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page index
==========
The sidebar list of every page, rebuilt from a directory scan after each
save.  The home page always comes first, whether or not its file exists yet;
everything else is sorted by title.  Files whose names could never be
reached through a page URL are left out.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

from recipewiki.models import IndexEntry
from .pages import PAGE_SUFFIX, SLUG_RE, PageStore, slugify, title_from_slug

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def page_url(slug: str) -> str:
    return f"/view/{slug}"


# -----------------------------------------------------------------------------

class PageIndex:

    def __init__(self, home_title: str = "Home"):
        self.home_title = home_title
        self.home_slug = slugify(home_title)
        self.entries: list[IndexEntry] = [self._home_entry()]

    def _home_entry(self) -> IndexEntry:
        return IndexEntry(title=self.home_title, url=page_url(self.home_slug))

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def titles(self) -> list[str]:
        return [e.title for e in self.entries]

    async def rebuild(self, store: PageStore) -> list[IndexEntry]:
        """Rescan *store*.  On a scan failure the previous entries are kept."""
        try:
            slugs = await store.list_slugs()
        except OSError:
            log.exception("Could not scan %s; page index left stale", store.pages_dir)
            return self.entries

        routable = []
        for slug in slugs:
            if SLUG_RE.fullmatch(slug):
                routable.append(slug)
            else:
                log.warning("Skipping %s%s: its name cannot be used in a page URL",
                            slug, PAGE_SUFFIX)

        others = sorted(
            (
                IndexEntry(title=title_from_slug(slug), url=page_url(slug))
                for slug in routable
                if slug != self.home_slug
            ),
            key=lambda e: e.title,
        )
        self.entries = [self._home_entry(), *others]
        log.debug("Page index rebuilt: %d page(s)", len(self.entries))
        return self.entries


# -----------------------------------------------------------------------------
