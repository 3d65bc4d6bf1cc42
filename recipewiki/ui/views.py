#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Jinja2 UI views (server-rendered HTML pages)
============================================
GET  /               — redirect to the home page
GET  /view/{slug}    — view a page (missing pages redirect to the editor)
GET  /edit/{slug}    — edit form, blank for a new page
POST /save/{slug}    — save edits; a changed title renames the page
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from recipewiki.core.config import Settings
from recipewiki.core.exceptions import PageNotFoundError
from recipewiki.core.storage import get_app_settings, get_index, get_store, valid_slug
from recipewiki.models import Page
from recipewiki.services.index import PageIndex
from recipewiki.services.pages import SLUG_RE, PageStore, slugify, title_from_slug
from recipewiki.services.renderer import render as render_markup, render_page


# -----------------------------------------------------------------------------

router = APIRouter(tags=["ui"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def base_context(request: Request, **extra) -> dict:
    """Base template context (request passed separately as first arg to TemplateResponse)."""
    settings: Settings = request.app.state.settings
    index: PageIndex = request.app.state.index
    return {
        "site_name": settings.site_name,
        "app_version": settings.app_version,
        "home_title": settings.home_title,
        "index": index.entries,
        **extra,
    }


def _edit_redirect(slug: str) -> RedirectResponse:
    return RedirectResponse(url=f"/edit/{slug}", status_code=302)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Home
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/")
async def home(settings: Settings = Depends(get_app_settings)):
    return RedirectResponse(url=f"/view/{slugify(settings.home_title)}", status_code=302)


async def _view_home(request: Request, slug: str, store: PageStore):
    # The home page is rendered as one document; its section markers are
    # HTML comments and vanish from the output.
    try:
        body = await store.read_raw(slug)
    except PageNotFoundError:
        return _edit_redirect(slug)

    return templates.TemplateResponse(
        request,
        "root.html",
        base_context(request,
                     title=title_from_slug(slug),
                     slug=slug,
                     rendered=render_markup(body)),
    )


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Page view
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/view/{slug}", response_class=HTMLResponse)
async def view_page(
    request: Request,
    slug: str = Depends(valid_slug),
    store: PageStore = Depends(get_store),
    index: PageIndex = Depends(get_index),
):
    if slug == index.home_slug:
        return await _view_home(request, slug, store)

    try:
        page = await store.load(slug)
    except PageNotFoundError:
        return _edit_redirect(slug)

    ingredients_html, instructions_html = render_page(page)
    return templates.TemplateResponse(
        request,
        "view.html",
        base_context(request,
                     page=page,
                     ingredients_html=ingredients_html,
                     instructions_html=instructions_html),
    )


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Page edit
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/edit/{slug}", response_class=HTMLResponse)
async def edit_page_form(
    request: Request,
    slug: str = Depends(valid_slug),
    store: PageStore = Depends(get_store),
):
    try:
        page = await store.load(slug)
    except PageNotFoundError:
        page = Page(title=title_from_slug(slug), filename=slug)

    return templates.TemplateResponse(
        request,
        "edit.html",
        base_context(request, page=page, slug=slug, error=None),
    )


@router.post("/save/{slug}", response_class=HTMLResponse)
async def save_page(
    request: Request,
    slug: str = Depends(valid_slug),
    recipe_title: str = Form(default="", alias="recipeTitle"),
    title: str = Form(default=""),
    ingredients: str = Form(default=""),
    instructions: str = Form(default=""),
    store: PageStore = Depends(get_store),
    index: PageIndex = Depends(get_index),
):
    new_title = (recipe_title or title).strip() or title_from_slug(slug)
    page = Page(
        title=new_title,
        filename=slugify(new_title),
        ingredients=ingredients,
        instructions=instructions,
    )

    if not SLUG_RE.fullmatch(page.filename):
        return templates.TemplateResponse(
            request,
            "edit.html",
            base_context(request,
                         page=page,
                         slug=slug,
                         error="Titles may only contain letters, digits, spaces and hyphens."),
            status_code=400,
        )

    await store.save(page, previous_slug=slug)
    await index.rebuild(store)

    return RedirectResponse(url=f"/view/{page.filename}", status_code=303)


# -----------------------------------------------------------------------------
