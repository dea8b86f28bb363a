"""Split a document into its parsed front matter and Markdown body."""

import logging
from typing import Optional, Tuple

from ..conf import get_setting
from ..exceptions import ExtractionError, InvalidFormat
from .extractor import detect_dialect, find_unclosed_delimiter
from .parser import parse
from .types import Frontmatter

logger = logging.getLogger(__name__)


def extract(content: str) -> Tuple[Frontmatter, str]:
    """
    Extract and parse the front matter of ``content``.

    The block is decoded with the dialect its delimiters identified, so a
    ``---`` block is always YAML even when a value contains ``=``.

    Returns:
        ``(frontmatter, body)``

    Raises:
        InvalidFormat: no front matter block was found
        ParseError: the block was found but is malformed
    """
    fmt, raw, body = detect_dialect(content)
    return parse(raw, fmt), body


def split_document(
    content: str, strict: Optional[bool] = None
) -> Tuple[Frontmatter, str]:
    """
    Split ``content`` for the compilation pipeline.

    A document without front matter yields empty ``Frontmatter`` and the whole
    content as body.  In strict mode an opening ``---``/``+++`` line without
    its closing delimiter raises ``ExtractionError`` instead of being treated
    as body text.

    Raises:
        ParseError: the detected block is malformed
        ExtractionError: strict mode and an unclosed delimiter
    """
    if strict is None:
        strict = get_setting("SITECRAFT_STRICT_FRONTMATTER")

    try:
        return extract(content)
    except InvalidFormat:
        unclosed = find_unclosed_delimiter(content)
        if unclosed is not None:
            if strict:
                raise ExtractionError(
                    f"{unclosed} front matter opened but never closed"
                ) from None
            logger.warning(
                "Unclosed %s front matter delimiter, treating document as body",
                unclosed,
            )
        return Frontmatter(), content
