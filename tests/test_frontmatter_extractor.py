import pytest

from compiler.exceptions import InvalidFormat
from compiler.frontmatter import (
    DIALECTS,
    Format,
    detect_dialect,
    detect_format,
    extract_delimited_frontmatter,
    extract_json_frontmatter,
    extract_raw_frontmatter,
)
from compiler.frontmatter.extractor import find_unclosed_delimiter


def test_yaml_block_is_split_from_body():
    raw, body = extract_raw_frontmatter("---\ntitle: Example\n---\nContent here")
    assert raw == "title: Example"
    assert body == "Content here"


def test_toml_block_is_split_from_body():
    raw, body = extract_raw_frontmatter('+++\ntitle = "Example"\n+++\nBody')
    assert raw == 'title = "Example"'
    assert body == "Body"


def test_json_object_is_split_and_body_trimmed():
    raw, body = extract_raw_frontmatter('{"title": "Example"}\n\n  Body text')
    assert raw == '{"title": "Example"}'
    assert body == "Body text"


def test_json_nested_braces_are_balanced():
    raw, body = extract_json_frontmatter('{"a": {"b": {"c": 1}}} rest')
    assert raw == '{"a": {"b": {"c": 1}}}'
    assert body == "rest"


def test_json_with_leading_whitespace():
    raw, _ = extract_json_frontmatter('  \n{"a": 1}\nBody')
    assert raw == '{"a": 1}'


def test_json_unbalanced_returns_none():
    assert extract_json_frontmatter('{"a": {"b": 1}') is None


def test_no_front_matter_raises_invalid_format():
    with pytest.raises(InvalidFormat) as excinfo:
        extract_raw_frontmatter("Just a body")
    assert str(excinfo.value) == "Invalid frontmatter format"


def test_unclosed_yaml_raises_invalid_format():
    with pytest.raises(InvalidFormat):
        extract_raw_frontmatter("---\ntitle: Example\nno closing line")


def test_empty_delimited_block():
    assert extract_delimited_frontmatter("---\n---\nBody", "---\n", "\n---\n") == ("", "Body")


def test_closing_delimiter_at_end_of_file():
    raw, body = extract_raw_frontmatter("---\ntitle: Example\n---")
    assert raw == "title: Example"
    assert body == ""


def test_body_keeps_later_delimiters():
    raw, body = extract_raw_frontmatter("---\na: 1\n---\nText\n---\nMore")
    assert raw == "a: 1"
    assert body == "Text\n---\nMore"


def test_delimited_requires_opening_at_start():
    assert extract_delimited_frontmatter("\n---\na: 1\n---\n", "---\n", "\n---\n") is None


def test_dialect_order():
    assert [dialect.format for dialect in DIALECTS] == [Format.YAML, Format.TOML, Format.JSON]


def test_detect_dialect_reports_format():
    fmt, raw, body = detect_dialect('+++\ncount = 1\n+++\nBody')
    assert fmt is Format.TOML
    assert raw == "count = 1"
    assert body == "Body"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('{"title": "x"}', Format.JSON),
        ('  {"title": "x"}', Format.JSON),
        ('title = "x"', Format.TOML),
        ("title: x", Format.YAML),
        ("", Format.YAML),
        # Heuristic: any "=" wins over YAML
        ("title: a=b", Format.TOML),
    ],
)
def test_detect_format(raw, expected):
    assert detect_format(raw) is expected


def test_find_unclosed_delimiter():
    assert find_unclosed_delimiter("---\ntitle: x\nbody") is Format.YAML
    assert find_unclosed_delimiter("+++\ntitle = 1\nbody") is Format.TOML
    assert find_unclosed_delimiter("---\ntitle: x\n---\nbody") is None
    assert find_unclosed_delimiter("plain text") is None


def test_empty_block_closed_at_end_of_file():
    assert extract_delimited_frontmatter("---\n---", "---\n", "\n---\n") == ("", "")
    assert extract_raw_frontmatter("+++\n+++") == ("", "")
