#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for RecipeWiki tests.
Each test gets its own pages directory under tmp_path.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from recipewiki.core.config import Settings
from recipewiki.core.storage import build_index
from recipewiki.main import create_app
from recipewiki.services.index import PageIndex
from recipewiki.services.pages import PageStore


# -----------------------------------------------------------------------------

@pytest.fixture
def pages_dir(tmp_path) -> Path:
    return tmp_path / "pages"


@pytest.fixture
def settings(pages_dir) -> Settings:
    return Settings(
        pages_dir=pages_dir,
        environment="testing",
        open_browser=False,
        _env_file=None,
    )


@pytest.fixture
def store(pages_dir) -> PageStore:
    s = PageStore(pages_dir)
    s.ensure_dir()
    return s


@pytest.fixture
def index() -> PageIndex:
    return PageIndex("Home")


@pytest_asyncio.fixture(scope="function")
async def app(settings):
    app = create_app(settings)
    # ASGITransport does not run the lifespan; build the index the same way.
    await build_index(app)
    return app


@pytest_asyncio.fixture(scope="function")
async def client(app):
    """HTTP test client wired to an app over an isolated pages directory."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
# Helper functions for tests
# -----------------------------------------------------------------------------

def write_page(pages_dir: Path, slug: str, content: str) -> Path:
    pages_dir.mkdir(parents=True, exist_ok=True)
    path = pages_dir / f"{slug}.txt"
    path.write_text(content, encoding="utf-8")
    return path


def recipe_text(ingredients: str = "", instructions: str = "") -> str:
    return f"<!-- Ingredients -->\n{ingredients}<!-- Instructions -->\n{instructions}"


# -----------------------------------------------------------------------------
