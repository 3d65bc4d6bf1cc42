#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for the Markdown + [[WikiLink]] render pipeline."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest

from recipewiki.models import Page
from recipewiki.services.renderer import render, render_page, rewrite_wikilinks


# ── Plain text ────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("text", [
    "Hello world",
    "Preheat the oven",
    "Serves 4 people",
])
def test_plain_text_only_gains_paragraph(text):
    assert render(text).strip() == f"<p>{text}</p>"


def test_empty_input():
    assert render("").strip() == ""


# ── Markdown ──────────────────────────────────────────────────────────────────

def test_markdown_heading_and_emphasis():
    html = render("# Pancakes\n\nThis is **fluffy** and *sweet*.")
    assert "<h1>Pancakes</h1>" in html
    assert "<strong>fluffy</strong>" in html
    assert "<em>sweet</em>" in html


def test_markdown_list():
    html = render("- 2 eggs\n- 1 cup milk\n")
    assert "<ul>" in html
    assert "<li>2 eggs</li>" in html


def test_markdown_table():
    html = render("| Item | Qty |\n|------|-----|\n| Salt | 1 tsp |\n")
    assert "<table>" in html
    assert "<td>Salt</td>" in html


def test_markdown_strikethrough():
    assert "<del>sugar</del>" in render("~~sugar~~ honey")


def test_bare_url_becomes_link():
    assert '<a href="https://example.com/recipe">' in render("From https://example.com/recipe")


def test_fenced_code_highlighted():
    html = render("```python\nprint('hi')\n```\n")
    assert 'class="highlight"' in html


def test_fenced_code_unknown_language():
    html = render("```nosuchlang\nplain\n```\n")
    assert 'class="highlight"' in html
    assert "plain" in html


def test_fenced_code_without_language():
    html = render("```\n<b>raw</b>\n```\n")
    assert "<pre><code>" in html
    assert "&lt;b&gt;raw&lt;/b&gt;" in html


def test_section_markers_pass_through_as_comments():
    html = render("<!-- Ingredients -->\nSalt\n<!-- Instructions -->\nMix.\n")
    assert "<!-- Ingredients -->" in html
    assert "&lt;!--" not in html
    assert "Salt" in html and "Mix." in html


# ── WikiLinks ─────────────────────────────────────────────────────────────────

def test_wikilink_home():
    assert '<a href="/view/Home">Home</a>' in render("[[Home]]")


def test_wikilink_inside_sentence():
    html = render("Serve with [[Home]] bread.")
    assert html.strip() == '<p>Serve with <a href="/view/Home">Home</a> bread.</p>'


def test_wikilink_multi_word():
    assert '<a href="/view/Banana-Bread">Banana Bread</a>' in render("See [[Banana Bread]].")


def test_wikilink_with_hyphen_and_digits():
    assert '<a href="/view/Chili-2">Chili-2</a>' in render("[[Chili-2]]")


def test_several_wikilinks():
    html = render("[[Salsa]] and [[Guacamole]]")
    assert '<a href="/view/Salsa">Salsa</a>' in html
    assert '<a href="/view/Guacamole">Guacamole</a>' in html


def test_wikilink_in_list_item():
    assert '<li><a href="/view/Pesto">Pesto</a></li>' in render("- [[Pesto]]\n")


@pytest.mark.parametrize("text", [
    "[[../../etc/passwd]]",
    "[[a/b]]",
    "[[]]",
    "[[Mom's Soup]]",
    "[single]",
])
def test_non_matching_tokens_left_alone(text):
    assert "<a " not in render(text)


def test_rewrite_wikilinks_on_html():
    assert rewrite_wikilinks("<p>[[Soup]]</p>") == '<p><a href="/view/Soup">Soup</a></p>'


# ── Pages ─────────────────────────────────────────────────────────────────────

def test_render_page_sections():
    page = Page(title="Toast", filename="Toast",
                ingredients="- Bread\n", instructions="Toast the [[Bread]].\n")
    ingredients_html, instructions_html = render_page(page)
    assert "<li>Bread</li>" in ingredients_html
    assert '<a href="/view/Bread">Bread</a>' in instructions_html


# -----------------------------------------------------------------------------
