# compiler/markdown/__init__.py

from .renderer import CompiledDocument, compile_document, render_markdown

__all__ = ("CompiledDocument", "compile_document", "render_markdown")
