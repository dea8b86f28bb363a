# compiler/markdown/patterns.py
"""
Compiled patterns shared by the HTML postprocessors.

Everything in this module is built once, at import time, and never mutated.
The postprocessors only read from it, so the same registry can be used from
any number of threads compiling independent documents.
"""

import re
from dataclasses import dataclass
from typing import Pattern, Tuple

from ..exceptions import RegexCompilationError


def _compile(name: str, pattern: str, flags: int = 0) -> Pattern:
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise RegexCompilationError(name, pattern, exc) from exc


# Attribute lookups must not match inside longer names such as data-title
_ATTR_BOUNDARY = r"(?<![\w-])"

# --- class pseudo-attribute --------------------------------------------------

# .class="value" as authored, .class=&quot;value&quot; once escaped, or
# .class=“value” once Pandoc's smart extension curled the quotes
CLASS_PSEUDO_RE = _compile(
    "CLASS_PSEUDO_RE",
    r'\.class=(?:"|&quot;|“)([^"&<>“”]+)(?:"|&quot;|”)',
)

# --- images ------------------------------------------------------------------

# Group 1: tag up to its last attribute. Group 2: closing "/>" or ">"
IMG_TAG_RE = _compile("IMG_TAG_RE", r"(<img\b[^>]*?)\s*(/?>)", re.IGNORECASE)
ALT_ATTR_RE = _compile("ALT_ATTR_RE", _ATTR_BOUNDARY + r'alt="([^"]*)"', re.IGNORECASE)
TITLE_ATTR_RE = _compile("TITLE_ATTR_RE", _ATTR_BOUNDARY + r"title=", re.IGNORECASE)

# --- interactive elements ----------------------------------------------------

INPUT_TAG_RE = _compile("INPUT_TAG_RE", r"(<input\b[^>]*?)(\s*/?>)", re.IGNORECASE)
ARIA_LABEL_ATTR_RE = _compile(
    "ARIA_LABEL_ATTR_RE", _ATTR_BOUNDARY + r"aria-label=", re.IGNORECASE
)

# --- headings ----------------------------------------------------------------

# Group 1: tag name, group 2: attributes, group 3: inner HTML
HEADING_RE = _compile(
    "HEADING_RE", r"<(h[1-6])\b([^>]*)>(.*?)</\1\s*>", re.IGNORECASE | re.DOTALL
)
# Existing attributes on a tag, for merging instead of duplicating
CLASS_ATTR_RE = _compile(
    "CLASS_ATTR_RE", _ATTR_BOUNDARY + r'class="([^"]*)"', re.IGNORECASE
)
ID_ATTR_RE = _compile("ID_ATTR_RE", r'\s*' + _ATTR_BOUNDARY + r'id="[^"]*"', re.IGNORECASE)
TAG_RE = _compile("TAG_RE", r"<[^>]+>")
NON_ALNUM_RE = _compile("NON_ALNUM_RE", r"[^a-z0-9]+")


@dataclass(frozen=True)
class AriaRule:
    """An ARIA attribute every opening tag of ``element`` should carry."""

    element: str
    pattern: Pattern
    attribute: str
    value: str
    # Skip tags that already carry ``attribute``
    only_if_missing: bool = False

    @property
    def markup(self) -> str:
        return f' {self.attribute}="{self.value}"'


ARIA_RULES: Tuple[AriaRule, ...] = (
    AriaRule("button", _compile("BUTTON_OPEN_RE", r"<button\b", re.IGNORECASE), "aria-label", "button"),
    AriaRule("nav", _compile("NAV_OPEN_RE", r"<nav\b", re.IGNORECASE), "aria-label", "navigation"),
    AriaRule("form", _compile("FORM_OPEN_RE", r"<form\b", re.IGNORECASE), "aria-labelledby", "form-label"),
    AriaRule("input", INPUT_TAG_RE, "aria-label", "input", only_if_missing=True),
)
