"""Compiler settings, read from Django settings with library defaults."""

from django.conf import settings

DEFAULTS = {
    "SITECRAFT_PANDOC_FROM": (
        "markdown+autolink_bare_uris+strikeout+superscript+subscript"
        "+task_lists+smart+pipe_tables+definition_lists+footnotes"
        "+fenced_code_blocks+fenced_code_attributes+raw_html"
        # Heading ids come from the header enricher, not Pandoc
        "-auto_identifiers"
    ),
    "SITECRAFT_PANDOC_EXTRA_ARGS": [],
    # Unclosed opening delimiters raise ExtractionError instead of falling through
    "SITECRAFT_STRICT_FRONTMATTER": False,
    # Re-raise AccessibilityError from the pipeline audit step instead of logging it
    "SITECRAFT_WCAG_STRICT": False,
    # Append -2, -3, ... to repeated heading ids
    "SITECRAFT_UNIQUE_HEADING_IDS": False,
}


def get_setting(name: str):
    """
    Return a compiler setting.

    Falls back to ``DEFAULTS`` when Django settings are not configured, so the
    compiler can be used as a plain library outside a Django project.
    """
    default = DEFAULTS[name]
    if not settings.configured:
        return default
    return getattr(settings, name, default)
