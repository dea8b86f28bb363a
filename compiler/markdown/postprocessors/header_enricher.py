# compiler/markdown/postprocessors/header_enricher.py
"""
Postprocessor that gives headings deterministic ids and accessibility hooks.

For every <h1>..<h6> element:
- id:         "h<level>-<first slug token>"   e.g. h1-my
- class:      "<first slug token>"             e.g. my
- tabindex:   "0"
- aria-label: "<First token title-cased> Heading"
- itemprop:   "headline" for h1, "name" for other levels

The inner HTML and other attributes are kept.  An existing class gains the
token instead of a second class attribute, and an existing id is replaced.
Headings with no text are removed.  Two headings starting with the same word
get the same id unless the unique id policy is enabled, which appends -2,
-3, ...
"""

import html as html_lib
import logging
import unicodedata
from dataclasses import dataclass
from typing import Dict, Optional

from ...conf import get_setting
from ...exceptions import HeaderFormattingError
from ..patterns import HEADING_RE, NON_ALNUM_RE, TAG_RE
from .utils import merge_class_attribute, strip_id_attribute

logger = logging.getLogger(__name__)

FALLBACK_TOKEN = "section"


@dataclass(frozen=True)
class HeadingMatch:
    tag: str
    attrs: str
    inner_html: str
    text: str
    slug: str
    id: str
    css_class: str
    aria_label: str
    itemprop: str

    @property
    def level(self) -> int:
        return int(self.tag[1])


def slugify(text: str) -> str:
    """Lowercase ASCII slug with runs of other characters collapsed to '-'."""
    folded = (
        unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    )
    return NON_ALNUM_RE.sub("-", folded.lower()).strip("-")


def first_token(slug: str) -> str:
    """The slug up to its first hyphen."""
    return slug.split("-", 1)[0] or FALLBACK_TOKEN


def to_title_case(word: str) -> str:
    return word[:1].upper() + word[1:]


def _get_text_content(inner_html: str) -> str:
    return html_lib.unescape(TAG_RE.sub("", inner_html)).strip()


def match_heading(tag: str, attrs: str, inner_html: str) -> Optional[HeadingMatch]:
    """Compute the generated attributes for a heading, or None if it has no text."""
    text = _get_text_content(inner_html)
    if not text:
        return None

    tag = tag.lower()
    slug = slugify(text)
    token = first_token(slug)

    return HeadingMatch(
        tag=tag,
        attrs=strip_id_attribute(attrs).rstrip(),
        inner_html=inner_html,
        text=text,
        slug=slug,
        id=f"{tag}-{token}",
        css_class=token,
        aria_label=f"{to_title_case(token)} Heading",
        itemprop="headline" if tag == "h1" else "name",
    )


def render_heading(heading: HeadingMatch, heading_id: Optional[str] = None) -> str:
    attrs, merged = merge_class_attribute(heading.attrs, heading.css_class)
    class_markup = "" if merged else f' class="{heading.css_class}"'
    return (
        f'<{heading.tag}{attrs} id="{heading_id or heading.id}"'
        f'{class_markup} tabindex="0"'
        f' aria-label="{heading.aria_label}" itemprop="{heading.itemprop}">'
        f"{heading.inner_html}</{heading.tag}>"
    )


def format_header_with_id_class(header: str) -> str:
    """
    Enrich a single heading element.

    >>> format_header_with_id_class("<h2>Getting started</h2>")
    '<h2 id="h2-getting" class="getting" tabindex="0" aria-label="Getting Heading" itemprop="name">Getting started</h2>'

    Raises:
        HeaderFormattingError: if ``header`` is not a single heading element
    """
    match = HEADING_RE.fullmatch(header.strip())
    if not match:
        raise HeaderFormattingError(f"Invalid header format: {header[:80]!r}")

    heading = match_heading(*match.groups())
    if heading is None:
        return ""
    return render_heading(heading)


def enrich_headers(html: str, context: dict, unique_ids: Optional[bool] = None) -> str:
    """
    Enrich every heading in ``html``.

    Args:
        html: HTML string to process
        context: Context dictionary (not used currently)
        unique_ids: Disambiguate repeated ids with a numeric suffix
            (default: SITECRAFT_UNIQUE_HEADING_IDS)

    Returns:
        HTML with enriched headings
    """
    if unique_ids is None:
        unique_ids = get_setting("SITECRAFT_UNIQUE_HEADING_IDS")

    used_ids: Dict[str, int] = {}

    def unique_id(base: str) -> str:
        count = used_ids.get(base, 0) + 1
        used_ids[base] = count
        return base if count == 1 else f"{base}-{count}"

    def replace(match) -> str:
        heading = match_heading(*match.groups())
        if heading is None:
            logger.debug("Dropping empty heading: %s", match.group(0))
            return ""
        heading_id = unique_id(heading.id) if unique_ids else heading.id
        return render_heading(heading, heading_id)

    return HEADING_RE.sub(replace, html)


def header_enricher_default(html: str, context: dict) -> str:
    """Register this in POSTPROCESSORS."""
    return enrich_headers(html, context)
