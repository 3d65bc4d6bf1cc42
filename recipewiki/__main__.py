#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Run the wiki locally and open it in the default browser.

Usage:
    python -m recipewiki [--port 8080] [--pages-dir pages] [--no-browser]
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import argparse
import logging
import threading
import webbrowser
from pathlib import Path

import uvicorn

from recipewiki.core.config import get_settings
from recipewiki.main import create_app
from recipewiki.services.pages import slugify

log = logging.getLogger("recipewiki")


# ── Browser ───────────────────────────────────────────────────────────────────

def open_browser_later(url: str, delay: float = 1.0) -> threading.Timer:
    """Open *url* once the server has had a moment to start listening."""
    def _open():
        if not webbrowser.open(url):
            log.warning("No browser available; visit %s", url)

    timer = threading.Timer(delay, _open)
    timer.daemon = True
    timer.start()
    return timer


# ── CLI ───────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="recipewiki",
        description="A flat-file recipe wiki served on localhost.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--host", default=settings.host,
                        help=f"Interface to bind (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port,
                        help=f"Port to listen on (default: {settings.port})")
    parser.add_argument("--pages-dir", type=Path, default=settings.pages_dir, metavar="DIR",
                        help=f"Directory holding the page files (default: {settings.pages_dir})")
    parser.add_argument("--home", default=settings.home_title, metavar="TITLE",
                        help=f"Title of the home page (default: {settings.home_title})")
    parser.add_argument("--browser", action=argparse.BooleanOptionalAction,
                        default=settings.open_browser,
                        help="Open the home page in a browser on start")
    parser.add_argument("--log-level", default=settings.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = get_settings().model_copy(update={
        "host": args.host,
        "port": args.port,
        "pages_dir": args.pages_dir,
        "home_title": args.home,
        "open_browser": args.browser,
        "log_level": args.log_level,
    })
    app = create_app(settings)

    url = f"http://{settings.host}:{settings.port}/view/{slugify(settings.home_title)}"
    log.info("RecipeWiki %s at %s", settings.app_version, url)
    if settings.open_browser:
        open_browser_later(url)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
