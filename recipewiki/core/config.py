#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Application configuration.

All values can be overridden via RECIPEWIKI_* environment variables or a
.env file, e.g. RECIPEWIKI_PAGES_DIR=/srv/recipes.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from recipewiki._version import __version__ as _pkg_version


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="RECIPEWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────────────

    app_name: str = "RecipeWiki"
    app_version: str = _pkg_version
    site_name: str = "Recipe Wiki"
    debug: bool = False
    environment: Literal["development", "testing", "production"] = "development"

    # ── Storage ────────────────────────────────────────────────────────────

    pages_dir: Path = Path("pages")
    home_title: str = "Home"

    # ── Server ─────────────────────────────────────────────────────────────

    host: str = "localhost"
    port: int = 8080
    open_browser: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
