# compiler/frontmatter/__init__.py

from .extractor import (
    DIALECTS,
    detect_dialect,
    detect_format,
    extract_delimited_frontmatter,
    extract_json_frontmatter,
    extract_raw_frontmatter,
)
from .parser import parse, parse_string_map, to_string
from .splitter import extract, split_document
from .types import Format, Frontmatter, canonical_string

__all__ = (
    "DIALECTS",
    "Format",
    "Frontmatter",
    "canonical_string",
    "detect_dialect",
    "detect_format",
    "extract",
    "extract_delimited_frontmatter",
    "extract_json_frontmatter",
    "extract_raw_frontmatter",
    "parse",
    "parse_string_map",
    "split_document",
    "to_string",
)
