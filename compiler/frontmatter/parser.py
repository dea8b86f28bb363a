"""
Front matter decoding.

Each dialect has a loader that turns the raw block into builtins; the result
is normalised into a ``Frontmatter``.  Only the top-level mapping is honoured:
a block that decodes to a scalar or a sequence yields empty front matter.
Loader failures are re-raised as ``ParseError`` with the line number when the
underlying library reports one.
"""

import json
import logging
import re
import tomllib
from typing import Any, Callable, Dict, Union

import yaml

from ..exceptions import ParseError, UnsupportedFormat
from .types import Format, Frontmatter

logger = logging.getLogger(__name__)

_TOML_LINE_RE = re.compile(r"at line (\d+)")


def _load_yaml(raw: str) -> Any:
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = mark.line + 1 if mark is not None else None
        raise ParseError(str(exc), format=Format.YAML.value, line=line) from exc


def _load_toml(raw: str) -> Any:
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        match = _TOML_LINE_RE.search(str(exc))
        line = int(match.group(1)) if match else None
        raise ParseError(str(exc), format=Format.TOML.value, line=line) from exc


def _load_json(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ParseError(exc.msg, format=Format.JSON.value, line=exc.lineno) from exc


PARSERS: Dict[Format, Callable[[str], Any]] = {
    Format.YAML: _load_yaml,
    Format.TOML: _load_toml,
    Format.JSON: _load_json,
}


def _coerce_format(fmt: Union[Format, str]) -> Format:
    if isinstance(fmt, Format):
        return fmt
    try:
        return Format(str(fmt).lower())
    except ValueError:
        logger.warning("Unsupported front matter format requested: %r", fmt)
        raise UnsupportedFormat(line=1) from None


def parse(raw_frontmatter: str, fmt: Union[Format, str]) -> Frontmatter:
    """
    Decode ``raw_frontmatter`` under ``fmt``.

    Args:
        raw_frontmatter: Block contents without delimiters
        fmt: ``Format`` member or its string value ("yaml", "toml", "json")

    Returns:
        Frontmatter built from the top-level mapping

    Raises:
        ParseError: the block is malformed for ``fmt``
        UnsupportedFormat: ``fmt`` is not a known dialect
    """
    fmt = _coerce_format(fmt)
    data = PARSERS[fmt](raw_frontmatter)

    if not isinstance(data, dict):
        if data is not None:
            logger.debug(
                "Ignoring %s front matter whose top level is %s",
                fmt,
                type(data).__name__,
            )
        return Frontmatter()

    return Frontmatter(data)


def parse_string_map(
    raw_frontmatter: str, fmt: Union[Format, str]
) -> Dict[str, str]:
    """Decode ``raw_frontmatter`` into a flat ``{key: string}`` map."""
    return parse(raw_frontmatter, fmt).as_string_map()


SERIALIZERS: Dict[Format, Callable[[Frontmatter], str]] = {
    Format.YAML: Frontmatter.to_yaml,
    Format.TOML: Frontmatter.to_toml,
    Format.JSON: Frontmatter.to_json,
}


def to_string(frontmatter: Frontmatter, fmt: Union[Format, str]) -> str:
    """
    Serialise ``frontmatter`` as a ``fmt`` block, without delimiters.

    ``parse(to_string(fm, fmt), fmt)`` gives back ``fm``, except that TOML
    drops null values.

    Raises:
        UnsupportedFormat: ``fmt`` is not a known dialect
    """
    fmt = _coerce_format(fmt)
    return SERIALIZERS[fmt](frontmatter)
