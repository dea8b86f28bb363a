# compiler/markdown/postprocessors/__init__.py

from .accessibility import add_aria_attributes, validate_wcag, wcag_audit
from .class_attributes import class_attributes_default
from .header_enricher import header_enricher_default
from .image_titles import add_image_titles

POSTPROCESSORS = [
    class_attributes_default,  # Move .class="..." pseudo-attributes onto <img> tags
    add_image_titles,  # Derive title="Image of ..." from alt text
    add_aria_attributes,  # Default ARIA attributes on buttons, navs, forms, inputs
    header_enricher_default,  # Heading ids, classes, tabindex, aria-label, itemprop
    wcag_audit,  # Advisory WCAG check, must see the final markup
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html


__all__ = (
    "POSTPROCESSORS",
    "add_aria_attributes",
    "apply_postprocessors",
    "validate_wcag",
)
