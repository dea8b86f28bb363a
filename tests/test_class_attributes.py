from compiler.markdown.postprocessors.class_attributes import (
    rewrite_class_attributes,
    update_class_attributes,
)


def test_escaped_pseudo_attribute_moves_onto_image():
    line = '<p><img src="a.jpg" alt="A" />.class=&quot;img-fluid&quot;</p>'
    assert update_class_attributes(line) == (
        '<p><img src="a.jpg" alt="A" class="img-fluid" /></p>'
    )


def test_quoted_pseudo_attribute_and_open_img_tag():
    line = '<img src="a.jpg" alt="A">.class="wide"'
    assert update_class_attributes(line) == '<img src="a.jpg" alt="A" class="wide" />'


def test_line_without_image_is_unchanged():
    line = '<p>Write .class="x" after an image</p>'
    assert update_class_attributes(line) == line


def test_line_without_pseudo_attribute_is_unchanged():
    line = '<img src="a.jpg" alt="A" />'
    assert update_class_attributes(line) == line


def test_only_matching_lines_change():
    html = "\n".join(
        [
            "<h1>Title</h1>",
            '<p><img src="a.jpg" alt="A" />.class=&quot;left&quot;</p>',
            '<p><img src="b.jpg" alt="B" /></p>',
        ]
    )
    assert rewrite_class_attributes(html, {}) == "\n".join(
        [
            "<h1>Title</h1>",
            '<p><img src="a.jpg" alt="A" class="left" /></p>',
            '<p><img src="b.jpg" alt="B" /></p>',
        ]
    )


def test_rewrite_is_idempotent():
    html = '<p><img src="a.jpg" alt="A" />.class=&quot;left&quot;</p>'
    once = rewrite_class_attributes(html, {})
    assert rewrite_class_attributes(once, {}) == once


def test_curly_quoted_pseudo_attribute_from_pandoc_smart_output():
    line = '<p>Text <img src="cat.jpg" alt="A cat" />.class=“wide”</p>'
    assert update_class_attributes(line) == (
        '<p>Text <img src="cat.jpg" alt="A cat" class="wide" /></p>'
    )


def test_existing_image_class_is_extended():
    line = '<img src="a.jpg" class="photo" alt="A" />.class=“wide”'
    assert update_class_attributes(line) == '<img src="a.jpg" class="photo wide" alt="A" />'
