# compiler/markdown/postprocessors/image_titles.py
"""
Postprocessor that gives every described image a tooltip title.

For each ``<img>`` with a non-empty ``alt`` and no ``title``:

    <img src="cat.jpg" alt="A Sleeping Cat">
    -> <img src="cat.jpg" alt="A Sleeping Cat" title="Image of a sleeping cat">

Titles are capped at 66 characters, prefix included.  Images that already
have a title, or have no alt text, are left alone, so running the
postprocessor twice changes nothing.
"""

import html

from ..patterns import ALT_ATTR_RE, IMG_TAG_RE, TITLE_ATTR_RE

TITLE_PREFIX = "Image of "
MAX_TITLE_LENGTH = 66
MAX_ALT_LENGTH = MAX_TITLE_LENGTH - len(TITLE_PREFIX)


def derive_title(alt: str) -> str:
    """
    Build the title for an image from its escaped alt attribute value.

    The length limit applies to the decoded text, so an entity is never cut.
    """
    text = html.unescape(alt).lower()[:MAX_ALT_LENGTH]
    return TITLE_PREFIX + html.escape(text, quote=True)


def _add_title(match) -> str:
    tag, closing = match.group(1), match.group(2)

    if TITLE_ATTR_RE.search(tag):
        return match.group(0)

    alt = ALT_ATTR_RE.search(tag)
    if not alt or not alt.group(1).strip():
        return match.group(0)

    title = derive_title(alt.group(1))
    separator = " " if closing.startswith("/") else ""
    return f'{tag} title="{title}"{separator}{closing}'


def add_image_titles(html: str, context: dict) -> str:
    """
    Add derived ``title`` attributes to images.

    Args:
        html: HTML string to process
        context: Context dictionary (not used currently)

    Returns:
        HTML with titled images
    """
    return IMG_TAG_RE.sub(_add_title, html)
