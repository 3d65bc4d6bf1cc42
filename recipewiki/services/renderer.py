#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Markup renderer
===============
Renders page text to HTML in two passes:

  1. Markdown via mistune (with extras: tables, fenced code, strikethrough,
     bare URLs).  Fenced code with a language is highlighted by Pygments.
  2. [[Page Title]] links are rewritten to anchors pointing at /view/<slug>.

The link pass runs on the rendered HTML, so a [[link]] inside a code block
becomes a link too.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html as _html
import re

from recipewiki.models import Page
from .pages import slugify


# -----------------------------------------------------------------------------
# Markdown renderer via mistune
# -----------------------------------------------------------------------------

def _highlight_code(code: str, lang: str) -> str:
    """Highlight *code* using Pygments.  Falls back to plain text on unknown language."""
    from pygments import highlight
    from pygments.formatters import HtmlFormatter
    from pygments.lexers import TextLexer, get_lexer_by_name
    from pygments.util import ClassNotFound

    try:
        lexer = get_lexer_by_name(lang.strip(), stripall=True)
    except ClassNotFound:
        lexer = TextLexer()
    formatter = HtmlFormatter(nowrap=False, cssclass="highlight")
    return highlight(code, lexer, formatter)


def _make_md_renderer():
    import mistune
    from mistune.plugins.formatting import strikethrough
    from mistune.plugins.table import table
    from mistune.plugins.url import url

    class _HighlightRenderer(mistune.HTMLRenderer):
        def block_code(self, code: str, **kwargs) -> str:
            info = kwargs.get('info') or ''
            lang = info.split()[0] if info else ''
            if lang:
                return _highlight_code(code, lang)
            return f'<pre><code>{_html.escape(code)}</code></pre>\n'

    # escape=False keeps the section markers as invisible HTML comments.
    return mistune.create_markdown(
        renderer=_HighlightRenderer(escape=False),
        plugins=[table, strikethrough, url],
    )


_md_renderer = None


def _get_md_renderer():
    global _md_renderer
    if _md_renderer is None:
        _md_renderer = _make_md_renderer()
    return _md_renderer


# -----------------------------------------------------------------------------
# WikiLink rewriting  [[Page Title]] → <a href="/view/Page-Title">
# -----------------------------------------------------------------------------

WIKILINK_RE = re.compile(r"\[\[([-a-zA-Z0-9 ]+)\]\]")


def rewrite_wikilinks(html: str) -> str:
    def _replace(m: re.Match) -> str:
        title = m.group(1)
        return f'<a href="/view/{slugify(title)}">{title}</a>'

    return WIKILINK_RE.sub(_replace, html)


# -----------------------------------------------------------------------------
# Public render functions
# -----------------------------------------------------------------------------

def render(raw: str) -> str:
    """Render *raw* Markdown with [[WikiLinks]] to HTML."""
    return rewrite_wikilinks(_get_md_renderer()(raw))


def render_page(page: Page) -> tuple[str, str]:
    """Return the rendered ``(ingredients, instructions)`` of *page*."""
    return render(page.ingredients), render(page.instructions)


# -----------------------------------------------------------------------------
