#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pages router
============
GET    /api/v1/pages               — page index
GET    /api/v1/pages/{slug}        — page sections, raw and rendered
GET    /api/v1/pages/{slug}/raw    — stored file as plain text
PUT    /api/v1/pages/{slug}        — save (and possibly rename) a page
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from recipewiki.core.exceptions import PageNotFoundError
from recipewiki.core.storage import get_index, get_store, valid_slug
from recipewiki.models import Page
from recipewiki.schemas import IndexEntryResponse, PageResponse, PageSave
from recipewiki.services.index import PageIndex, page_url
from recipewiki.services.pages import PageStore, slugify
from recipewiki.services.renderer import render_page


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/pages", tags=["pages"])


# -----------------------------------------------------------------------------

def _page_response(page: Page) -> PageResponse:
    ingredients_html, instructions_html = render_page(page)
    return PageResponse(
        title=page.title,
        filename=page.filename,
        url=page_url(page.filename),
        ingredients=page.ingredients,
        instructions=page.instructions,
        ingredients_html=ingredients_html,
        instructions_html=instructions_html,
    )


async def _load_or_404(store: PageStore, slug: str) -> Page:
    try:
        return await store.load(slug)
    except PageNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


# ── List ─────────────────────────────────────────────────────────────────────

@router.get("", response_model=list[IndexEntryResponse])
async def list_pages(index: PageIndex = Depends(get_index)):
    return [IndexEntryResponse.model_validate(e) for e in index.entries]


# ── Read ──────────────────────────────────────────────────────────────────────

@router.get("/{slug}", response_model=PageResponse)
async def get_page(
    slug: str = Depends(valid_slug),
    store: PageStore = Depends(get_store),
):
    return _page_response(await _load_or_404(store, slug))


@router.get("/{slug}/raw", response_class=PlainTextResponse)
async def get_page_raw(
    slug: str = Depends(valid_slug),
    store: PageStore = Depends(get_store),
):
    try:
        return await store.read_raw(slug)
    except PageNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


# ── Save ──────────────────────────────────────────────────────────────────────

@router.put("/{slug}", response_model=PageResponse)
async def save_page(
    data: PageSave,
    slug: str = Depends(valid_slug),
    store: PageStore = Depends(get_store),
    index: PageIndex = Depends(get_index),
):
    page = Page(
        title=data.title,
        filename=slugify(data.title),
        ingredients=data.ingredients,
        instructions=data.instructions,
    )
    await store.save(page, previous_slug=slug)
    await index.rebuild(store)
    # Reload so the response shows the sections exactly as stored.
    return _page_response(await store.load(page.filename))


# -----------------------------------------------------------------------------
