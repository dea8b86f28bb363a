from __future__ import annotations

from typing import TypedDict

from bs4 import BeautifulSoup
from django.utils.html import escape
from django.utils.text import slugify


class HeadingNode(TypedDict):
    level: int
    id: str
    title: str
    children: list["HeadingNode"]


def extract_toc_from_html(html: str) -> list[HeadingNode]:
    """
    Given compiled HTML, return a hierarchical list of headings for a TOC.

    Ids written by the header enricher are reused; headings without one
    fall back to a slug of their text.
    """
    soup = BeautifulSoup(html, "html.parser")
    toc: list[HeadingNode] = []
    stack: list[HeadingNode] = []
    for heading in soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"]):
        level = int(heading.name[1])  # "h2" -> 2
        text = heading.get_text(separator=" ", strip=True)
        if not text:
            continue

        node: HeadingNode = {
            "level": level,
            "id": heading.get("id") or slugify(text),
            "title": text,
            "children": [],
        }

        while stack and stack[-1]["level"] >= level:
            stack.pop()

        if stack:
            stack[-1]["children"].append(node)
        else:
            toc.append(node)
        stack.append(node)

    return toc


def generate_table_of_contents(html: str) -> str:
    """Flat <ul> of links to every heading, one toc-hN class per level."""
    items = []
    soup = BeautifulSoup(html, "html.parser")
    for heading in soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"]):
        text = heading.get_text(separator=" ", strip=True)
        if not text:
            continue
        identifier = heading.get("id") or slugify(text)
        items.append(
            f'<li class="toc-{heading.name}"><a href="#{escape(identifier)}">{escape(text)}</a></li>'
        )
    return "<ul>" + "".join(items) + "</ul>"
