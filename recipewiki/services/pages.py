#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page store
==========
One flat file per page: ``<pages_dir>/<slug>.txt``.

The slug is the title with spaces turned into hyphens; the title is recovered
by turning hyphens back into spaces.  Saving under a new title writes the new
file and removes the old one.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

import aiofiles
import aiofiles.os

from recipewiki.core.exceptions import (
    MalformedPageError, PageEncodingError, PageNotFoundError,
)
from recipewiki.models import Page
from .recipe import parse, serialize

log = logging.getLogger(__name__)

PAGE_SUFFIX = ".txt"

# Same shape as the links the renderer produces; keeps path segments out.
SLUG_RE = re.compile(r"[-a-zA-Z0-9]+")


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def slugify(title: str) -> str:
    """Convert a page title to its storage slug."""
    return title.replace(" ", "-")


def title_from_slug(slug: str) -> str:
    return slug.replace("-", " ")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Store
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PageStore:

    def __init__(self, pages_dir: Path | str):
        self.pages_dir = Path(pages_dir)

    def __repr__(self) -> str:
        return f"PageStore({str(self.pages_dir)!r})"

    def path_for(self, slug: str) -> Path:
        return self.pages_dir / f"{slug}{PAGE_SUFFIX}"

    def ensure_dir(self) -> None:
        if not self.pages_dir.is_dir():
            log.info("Creating pages directory %s", self.pages_dir)
            self.pages_dir.mkdir(mode=0o700, parents=True, exist_ok=True)

    # ── Read ──────────────────────────────────────────────────────────────

    async def read_raw(self, slug: str) -> str:
        try:
            async with aiofiles.open(self.path_for(slug), "r", encoding="utf-8") as f:
                return await f.read()
        except FileNotFoundError as exc:
            raise PageNotFoundError(slug) from exc
        except UnicodeDecodeError as exc:
            raise PageEncodingError(slug, exc.reason) from exc

    async def load(self, slug: str) -> Page:
        content = await self.read_raw(slug)
        try:
            ingredients, instructions = parse(content)
        except MalformedPageError as exc:
            raise exc.with_slug(slug)
        return Page(
            title=title_from_slug(slug),
            filename=slug,
            ingredients=ingredients,
            instructions=instructions,
        )

    async def list_slugs(self) -> list[str]:
        """Slugs of every stored page, in directory order."""
        names = await aiofiles.os.listdir(self.pages_dir)
        return [
            name[: -len(PAGE_SUFFIX)]
            for name in names
            if not name.startswith(".") and name.endswith(PAGE_SUFFIX)
        ]

    # ── Write ─────────────────────────────────────────────────────────────

    async def save(self, page: Page, previous_slug: Optional[str] = None) -> Path:
        """Write *page* and, on a rename, remove the file it used to live in."""
        slug = slugify(page.title)
        page.filename = slug
        path = self.path_for(slug)

        async with aiofiles.open(path, "w", encoding="utf-8") as f:
            await f.write(serialize(page.ingredients, page.instructions))
        log.info("Saved page %r to %s", page.title, path)

        if previous_slug is not None and previous_slug != slug:
            old_path = self.path_for(previous_slug)
            if await self._same_file(old_path, path):
                # Case-only rename on a case-insensitive filesystem.
                log.info("Renamed page %r -> %r in place", previous_slug, slug)
            else:
                await self._remove(previous_slug)
                log.info("Renamed page %r -> %r", previous_slug, slug)

        return path

    async def _same_file(self, a: Path, b: Path) -> bool:
        try:
            return await aiofiles.os.path.samefile(a, b)
        except FileNotFoundError:
            return False

    async def _remove(self, slug: str) -> None:
        try:
            await aiofiles.os.remove(self.path_for(slug))
        except FileNotFoundError:
            # Renaming a page that was never saved under its old name.
            pass


# -----------------------------------------------------------------------------
