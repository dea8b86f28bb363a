import logging

import pytest
from django.test import override_settings

from compiler.exceptions import AccessibilityError
from compiler.markdown.postprocessors.accessibility import (
    WCAG_RULES,
    add_aria_attributes,
    validate_wcag,
    wcag_audit,
)


def test_button_nav_form_get_default_attributes():
    html = '<nav class="menu"><form><button>Go</button></form></nav>'
    assert add_aria_attributes(html) == (
        '<nav aria-label="navigation" class="menu">'
        '<form aria-labelledby="form-label">'
        '<button aria-label="button">Go</button></form></nav>'
    )


def test_button_injection_is_repeated_on_second_pass():
    once = add_aria_attributes("<button>Go</button>")
    twice = add_aria_attributes(once)
    assert twice == '<button aria-label="button" aria-label="button">Go</button>'


def test_input_gets_label_only_when_missing():
    assert add_aria_attributes('<input type="text">') == '<input type="text" aria-label="input">'
    assert add_aria_attributes('<input type="text" />') == (
        '<input type="text" aria-label="input" />'
    )
    labelled = '<input type="search" aria-label="Search">'
    assert add_aria_attributes(labelled) == labelled


def test_input_injection_is_idempotent():
    once = add_aria_attributes('<input name="q">')
    assert add_aria_attributes(once) == once


def test_other_tags_are_untouched():
    html = "<p>buttons and navigation</p><buttonish></buttonish>"
    assert add_aria_attributes(html) == html


def test_rule_order():
    assert [name for name, _, _ in WCAG_RULES] == ["alt-text", "heading-structure", "input-labels"]


def test_valid_fragment_passes():
    validate_wcag('<img src="a.png" alt="A cat"><h1>Title</h1><h2>Part</h2><input id="q">')


def test_fragment_without_images_fails_alt_rule():
    with pytest.raises(AccessibilityError) as excinfo:
        validate_wcag("<h1>No pictures</h1>")
    assert excinfo.value.rule == "alt-text"
    assert str(excinfo.value) == "WCAG Validation Error: Missing or invalid alt text for images."


def test_one_described_image_is_enough():
    validate_wcag('<img src="a.png"><img src="b.png" alt="B">')


def test_skipped_heading_level_fails():
    with pytest.raises(AccessibilityError) as excinfo:
        validate_wcag('<img alt="x"><h1>A</h1><h3>B</h3>')
    assert excinfo.value.rule == "heading-structure"


def test_heading_levels_may_go_back_up():
    validate_wcag('<img alt="x"><h1>A</h1><h2>B</h2><h3>C</h3><h2>D</h2><h1>E</h1>')


def test_unlabelled_input_fails():
    with pytest.raises(AccessibilityError) as excinfo:
        validate_wcag('<img alt="x"><input type="text">')
    assert excinfo.value.rule == "input-labels"


def test_first_failing_rule_is_reported():
    with pytest.raises(AccessibilityError) as excinfo:
        validate_wcag('<h1>A</h1><h3>B</h3><input type="text">')
    assert excinfo.value.rule == "alt-text"


def test_injected_input_label_satisfies_validation():
    validate_wcag(add_aria_attributes('<img alt="x"><input type="text">'))


def test_audit_collects_errors(caplog):
    context = {}
    html = "<h1>No pictures</h1>"
    with caplog.at_level(logging.WARNING, logger="compiler.markdown.postprocessors.accessibility"):
        assert wcag_audit(html, context) == html
    assert context["accessibility_errors"] == [
        "WCAG Validation Error: Missing or invalid alt text for images."
    ]
    assert "alt-text" in caplog.text


def test_audit_leaves_context_alone_when_valid():
    context = {}
    wcag_audit('<img alt="x">', context)
    assert "accessibility_errors" not in context


def test_audit_raises_in_strict_mode():
    with override_settings(SITECRAFT_WCAG_STRICT=True):
        with pytest.raises(AccessibilityError):
            wcag_audit("<p>text</p>", {})
