# compiler/markdown/renderer.py

import logging
from dataclasses import dataclass, field
from typing import List

import pypandoc

from ..frontmatter import Frontmatter, split_document
from .config import get_pandoc_config
from .postprocessors import apply_postprocessors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledDocument:
    frontmatter: Frontmatter
    html: str
    accessibility_errors: List[str] = field(default_factory=list)


def convert_markdown(text):
    """Markdown body -> raw HTML. Pandoc knows nothing about front matter."""
    pandoc_config = get_pandoc_config()

    return pypandoc.convert_text(
        text,
        to="html5",
        format=pandoc_config["format"],
        extra_args=pandoc_config["extra_args"],
    )


def render_markdown(text, context=None):
    """
    Render a Markdown body and run the postprocessor pipeline

    Args:
        text: Markdown body, front matter already removed
        context: Optional dict for processors that need additional data
    """
    context = context if context is not None else {}

    html = convert_markdown(text)

    # Post-processing: After markdown conversion
    return apply_postprocessors(html, context)


def compile_document(content, context=None):
    """
    Compile a full document: front matter, Markdown body, postprocessing.

    Raises ParseError for malformed front matter; a document without front
    matter compiles with empty metadata.
    """
    context = context if context is not None else {}

    frontmatter, body = split_document(content)
    context["frontmatter"] = frontmatter
    logger.debug("Compiling document with %s front matter keys", len(frontmatter))

    html = render_markdown(body, context)

    return CompiledDocument(
        frontmatter=frontmatter,
        html=html,
        accessibility_errors=list(context.get("accessibility_errors", [])),
    )
