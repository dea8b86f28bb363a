"""
Front matter detection.

Recognises a metadata block at the top of a document and splits it from the
body.  Three dialects are tried in a fixed order, first match wins:

1. YAML, delimited by ``---`` lines
2. TOML, delimited by ``+++`` lines
3. JSON, a balanced ``{...}`` object at the start of the (trimmed) content

The order lives in ``DIALECTS`` so it can be inspected and tested as data.
An opening delimiter without a matching closing delimiter does not fail:
detection falls through to the next dialect, and a document matching none of
them raises ``InvalidFormat``.
"""

import logging
from typing import Callable, NamedTuple, Optional, Tuple

from ..exceptions import InvalidFormat
from .types import Format

logger = logging.getLogger(__name__)

Split = Tuple[str, str]


def extract_delimited_frontmatter(
    content: str, start_delim: str, end_delim: str
) -> Optional[Split]:
    """
    Return ``(raw_block, body)`` for a block enclosed by the given delimiters.

    ``start_delim`` must open the document (e.g. ``"---\\n"``) and
    ``end_delim`` is the closing line including its surrounding newlines
    (e.g. ``"\\n---\\n"``).  Returns ``None`` when either delimiter is missing.
    """
    if not content.startswith(start_delim):
        return None

    rest = content[len(start_delim):]

    # Empty block: the closing delimiter immediately follows the opening one
    closing_line = end_delim.lstrip("\n")
    if rest.startswith(closing_line):
        return "", rest[len(closing_line):]
    if rest == closing_line.rstrip("\n"):
        return "", ""

    end = rest.find(end_delim)
    if end != -1:
        return rest[:end], rest[end + len(end_delim):]

    # Closing delimiter on the very last line, without a trailing newline
    closing_at_eof = end_delim.rstrip("\n")
    if rest.endswith(closing_at_eof):
        return rest[: -len(closing_at_eof)], ""

    return None


def extract_json_frontmatter(content: str) -> Optional[Split]:
    """
    Return ``(raw_object, body)`` for a leading balanced JSON object.

    Braces are counted character by character; the first position where the
    depth returns to zero ends the object.  Leading whitespace of the body is
    trimmed.
    """
    trimmed = content.lstrip()
    if not trimmed.startswith("{"):
        return None

    depth = 0
    for index, char in enumerate(trimmed):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return trimmed[: index + 1], trimmed[index + 1:].lstrip()

    return None


class Dialect(NamedTuple):
    format: Format
    opening: Optional[str]
    extract: Callable[[str], Optional[Split]]


def _delimited(start: str, end: str) -> Callable[[str], Optional[Split]]:
    def extract(content: str) -> Optional[Split]:
        return extract_delimited_frontmatter(content, start, end)

    return extract


# Detection order is part of the contract: YAML, then TOML, then JSON.
DIALECTS: Tuple[Dialect, ...] = (
    Dialect(Format.YAML, "---\n", _delimited("---\n", "\n---\n")),
    Dialect(Format.TOML, "+++\n", _delimited("+++\n", "\n+++\n")),
    Dialect(Format.JSON, None, extract_json_frontmatter),
)


def detect_dialect(content: str) -> Tuple[Format, str, str]:
    """
    Detect the front matter dialect of ``content``.

    Returns ``(format, raw_block, body)``.

    Raises:
        InvalidFormat: if no dialect matches.
    """
    for dialect in DIALECTS:
        result = dialect.extract(content)
        if result is not None:
            raw, body = result
            logger.debug(
                "Detected %s front matter (%s chars)", dialect.format, len(raw)
            )
            return dialect.format, raw, body
    raise InvalidFormat()


def extract_raw_frontmatter(content: str) -> Split:
    """
    Split ``content`` into ``(raw_block, body)``.

    >>> extract_raw_frontmatter("---\\ntitle: Example\\n---\\nContent here")
    ('title: Example', 'Content here')
    """
    _, raw, body = detect_dialect(content)
    return raw, body


def detect_format(raw_frontmatter: str) -> Format:
    """
    Classify an already extracted block.

    A leading ``{`` means JSON, any ``=`` means TOML, anything else is YAML.
    This is a heuristic: a YAML scalar containing ``=`` is classified as TOML.
    """
    trimmed = raw_frontmatter.lstrip()
    if trimmed.startswith("{"):
        return Format.JSON
    if "=" in trimmed:
        return Format.TOML
    return Format.YAML


def find_unclosed_delimiter(content: str) -> Optional[Format]:
    """
    Return the dialect whose opening delimiter starts ``content`` without a
    matching closing delimiter, or ``None``.
    """
    for dialect in DIALECTS:
        if dialect.opening is None:
            continue
        if content.startswith(dialect.opening) and dialect.extract(content) is None:
            return dialect.format
    return None
