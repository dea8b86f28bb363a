# compiler/markdown/postprocessors/accessibility.py
"""
Accessibility postprocessors.

Injection (``add_aria_attributes``):
- <button>  -> aria-label="button"
- <nav>     -> aria-label="navigation"
- <form>    -> aria-labelledby="form-label"
- <input>   -> aria-label="input", only when no aria-label is present

The button/nav/form attributes are appended to every opening tag without
checking what is already there, so injecting twice yields the attribute
twice.  Consumers depend on that output; see ARIA_RULES.

Validation (``validate_wcag``) checks a small WCAG subset and raises
``AccessibilityError`` for the first failing rule:
1. at least one image in the fragment has non-empty alt text
2. heading levels never skip a level going deeper (h1 -> h3)
3. every <input> has an id or an aria-label

Validation is read-only and independent of injection.
"""

import logging

from bs4 import BeautifulSoup

from ...conf import get_setting
from ...exceptions import AccessibilityError
from ..patterns import ARIA_LABEL_ATTR_RE, ARIA_RULES, AriaRule

logger = logging.getLogger(__name__)

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


# ---------------------------------------------------------------------------
# Injection
# ---------------------------------------------------------------------------


def _apply_rule(html: str, rule: AriaRule) -> str:
    if not rule.only_if_missing:
        return rule.pattern.sub(lambda m: m.group(0) + rule.markup, html)

    def replace(match):
        tag, closing = match.group(1), match.group(2)
        if ARIA_LABEL_ATTR_RE.search(tag):
            return match.group(0)
        return f"{tag}{rule.markup}{closing}"

    return rule.pattern.sub(replace, html)


def add_aria_attributes(html: str, context: dict = None) -> str:
    """
    Inject default ARIA attributes into interactive elements.

    Args:
        html: HTML string to process
        context: Context dictionary (not used currently)

    Returns:
        HTML with ARIA attributes added
    """
    for rule in ARIA_RULES:
        html = _apply_rule(html, rule)
    return html


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def check_alt_text(soup: BeautifulSoup) -> bool:
    """True when at least one image carries non-empty alt text."""
    return any(img.get("alt", "").strip() for img in soup.find_all("img"))


def check_heading_structure(soup: BeautifulSoup) -> bool:
    """True when no heading is more than one level deeper than the previous one."""
    previous = 0
    for heading in soup.find_all(_HEADING_TAGS):
        level = int(heading.name[1])
        if previous and level > previous + 1:
            logger.debug(
                "Heading structure skips from <h%s> to <h%s>", previous, level
            )
            return False
        previous = level
    return True


def check_input_labels(soup: BeautifulSoup) -> bool:
    """True when every input has an id or an aria-label."""
    for field in soup.find_all("input"):
        if not (field.has_attr("id") or field.has_attr("aria-label")):
            logger.debug("Input found without label: %s", field)
            return False
    return True


WCAG_RULES = (
    ("alt-text", check_alt_text, "Missing or invalid alt text for images."),
    (
        "heading-structure",
        check_heading_structure,
        "Improper heading structure (e.g., skipping heading levels).",
    ),
    ("input-labels", check_input_labels, "Form inputs missing associated labels."),
)


def validate_wcag(html: str) -> None:
    """
    Validate ``html`` against the WCAG rule subset.

    Raises:
        AccessibilityError: for the first rule that fails, with ``rule`` set
            to the rule's name
    """
    soup = BeautifulSoup(html, "html.parser")
    for name, check, message in WCAG_RULES:
        if not check(soup):
            raise AccessibilityError(message, rule=name)


def wcag_audit(html: str, context: dict) -> str:
    """
    Pipeline step: report WCAG violations without changing the HTML.

    Violations are logged and collected in ``context["accessibility_errors"]``.
    With ``SITECRAFT_WCAG_STRICT`` enabled the error is raised instead.
    """
    try:
        validate_wcag(html)
    except AccessibilityError as exc:
        if get_setting("SITECRAFT_WCAG_STRICT"):
            raise
        logger.warning("Accessibility check failed (%s): %s", exc.rule, exc.message)
        context.setdefault("accessibility_errors", []).append(str(exc))
    return html
