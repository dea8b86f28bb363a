from compiler.markdown.postprocessors.image_titles import (
    MAX_TITLE_LENGTH,
    add_image_titles,
    derive_title,
)


def test_title_is_derived_from_alt():
    html = '<img src="cat.jpg" alt="A Sleeping Cat">'
    assert add_image_titles(html, {}) == (
        '<img src="cat.jpg" alt="A Sleeping Cat" title="Image of a sleeping cat">'
    )


def test_self_closing_tag():
    html = '<p><img src="dog.png" alt="Dog" /></p>'
    assert add_image_titles(html, {}) == (
        '<p><img src="dog.png" alt="Dog" title="Image of dog" /></p>'
    )


def test_long_alt_is_truncated():
    title = derive_title("X" * 100)
    assert title == "Image of " + "x" * 57
    assert len(title) == MAX_TITLE_LENGTH


def test_existing_title_is_kept():
    html = '<img src="a.png" alt="A" title="Mine">'
    assert add_image_titles(html, {}) == html


def test_data_title_is_not_a_title():
    html = '<img data-title="z" alt="Dog">'
    assert add_image_titles(html, {}) == '<img data-title="z" alt="Dog" title="Image of dog">'


def test_missing_or_empty_alt_is_skipped():
    html = '<img src="a.png"><img src="b.png" alt=""><img src="c.png" alt="  ">'
    assert add_image_titles(html, {}) == html


def test_every_image_is_processed():
    html = '<img alt="One"><img alt="Two">'
    assert add_image_titles(html, {}) == (
        '<img alt="One" title="Image of one"><img alt="Two" title="Image of two">'
    )


def test_idempotent():
    once = add_image_titles('<img src="a.png" alt="A">', {})
    assert add_image_titles(once, {}) == once


def test_entity_at_truncation_point_is_not_cut():
    alt = "x" * 53 + " &quot;hi&quot;"
    html = f'<img alt="{alt}">'
    assert add_image_titles(html, {}) == (
        f'<img alt="{alt}" title="Image of {"x" * 53} &quot;hi">'
    )


def test_entities_count_as_one_character():
    title = derive_title("a &amp; b")
    assert title == "Image of a &amp; b"
