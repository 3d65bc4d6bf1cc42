#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render endpoint — live preview for the editor.

GET /api/v1/render?content=...
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Query

from recipewiki.schemas import RenderResponse
from recipewiki.services.renderer import render


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/render", tags=["render"])


# -----------------------------------------------------------------------------

@router.get("", response_model=RenderResponse)
async def render_preview(content: str = Query(default="", max_length=1_000_000)):
    """Return rendered HTML for a snippet of page markup."""
    return RenderResponse(html=render(content))


# -----------------------------------------------------------------------------
