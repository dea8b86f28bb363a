# compiler/markdown/postprocessors/class_attributes.py
"""
Postprocessor that turns the ``.class`` pseudo-attribute into a real class.

Authors attach a class to an image by writing it right after the image:

    ![A lighthouse](lighthouse.jpg).class="img-fluid"

Pandoc leaves the pseudo-attribute as text next to the ``<img>`` tag; with
the smart extension its quotes come out curled, ``.class=“img-fluid”``.
This postprocessor removes that text and adds ``img-fluid`` to the image's
class, merging with a class the image already has.

Limitations:
- Works line by line and rewrites at most one pseudo-attribute per line
- The pseudo-attribute and the image must be on the same line
"""

from ..patterns import CLASS_PSEUDO_RE, IMG_TAG_RE
from .utils import merge_class_attribute


def update_class_attributes(line: str) -> str:
    """
    Rewrite a single line.

    Lines without both an ``<img>`` tag and a pseudo-attribute are returned
    unchanged, so running this on already rewritten output is a no-op.
    """
    if not IMG_TAG_RE.search(line):
        return line

    match = CLASS_PSEUDO_RE.search(line)
    if not match:
        return line

    class_value = match.group(1).strip()
    remainder = line[: match.start()] + line[match.end():]

    def add_class(img) -> str:
        tag, merged = merge_class_attribute(img.group(1), class_value)
        if merged:
            return f"{tag} />"
        return f'{tag} class="{class_value}" />'

    return IMG_TAG_RE.sub(add_class, remainder, count=1)


def rewrite_class_attributes(html: str, context: dict) -> str:
    """
    Apply ``update_class_attributes`` to every line of ``html``.

    Args:
        html: HTML string to process
        context: Context dictionary (not used currently)

    Returns:
        HTML with pseudo-attributes moved onto their image tags
    """
    return "\n".join(update_class_attributes(line) for line in html.split("\n"))


def class_attributes_default(html: str, context: dict) -> str:
    """Register this in POSTPROCESSORS."""
    return rewrite_class_attributes(html, context)
