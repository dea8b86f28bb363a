# compiler/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from compiler.markdown.renderer import compile_document, render_markdown
from compiler.markdown.toc import generate_table_of_contents

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    """Render a Markdown body (no front matter) through the full pipeline"""
    return mark_safe(render_markdown(value))


@register.filter(name="compile_markdown")
def compile_markdown_filter(value):
    """Render a whole document, dropping its front matter from the output"""
    return mark_safe(compile_document(value).html)


@register.filter(name="table_of_contents")
def table_of_contents_filter(html):
    return mark_safe(generate_table_of_contents(html))


@register.filter(name="frontmatter_value")
def frontmatter_value_filter(frontmatter, key):
    """{{ document.frontmatter|frontmatter_value:"title" }}"""
    if frontmatter is None:
        return ""
    return frontmatter.get_str(key)
