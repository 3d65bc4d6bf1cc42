#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page storage wiring.

The store and the index are created once per application and hung off
``app.state``; handlers receive them through the dependencies below.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import FastAPI, HTTPException, Request

from recipewiki.core.config import Settings
from recipewiki.services.index import PageIndex
from recipewiki.services.pages import SLUG_RE, PageStore


# -----------------------------------------------------------------------------

def init_storage(app: FastAPI, settings: Settings) -> None:
    store = PageStore(settings.pages_dir)
    store.ensure_dir()
    app.state.settings = settings
    app.state.store = store
    app.state.index = PageIndex(settings.home_title)


async def build_index(app: FastAPI) -> PageIndex:
    index: PageIndex = app.state.index
    await index.rebuild(app.state.store)
    return index


# -----------------------------------------------------------------------------
# FastAPI dependencies
# -----------------------------------------------------------------------------

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> PageStore:
    return request.app.state.store


def get_index(request: Request) -> PageIndex:
    return request.app.state.index


def valid_slug(slug: str) -> str:
    if not SLUG_RE.fullmatch(slug):
        raise HTTPException(status_code=404, detail=f"No such page: {slug!r}")
    return slug


# -----------------------------------------------------------------------------
