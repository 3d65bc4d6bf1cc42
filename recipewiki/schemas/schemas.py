#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pydantic v2 schemas for request validation and response serialisation.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from pydantic import BaseModel, Field


# Titles that slugify to something the /view/{slug} route accepts.
TITLE_PATTERN = r"^[-a-zA-Z0-9 ]+$"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Shared
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    app: str


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Pages
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PageSave(BaseModel):
    title: str = Field(..., min_length=1, max_length=200, pattern=TITLE_PATTERN)
    ingredients: str = ""
    instructions: str = ""


# -----------------------------------------------------------------------------

class PageResponse(BaseModel):
    title: str
    filename: str
    url: str
    ingredients: str
    instructions: str
    ingredients_html: str
    instructions_html: str


# -----------------------------------------------------------------------------

class IndexEntryResponse(BaseModel):
    title: str
    url: str

    model_config = {"from_attributes": True}


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Render preview
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RenderResponse(BaseModel):
    html: str
