"""
Error taxonomy for the content compiler.

Three families of failure cross the compiler boundary:
- format errors: no recognised front matter dialect (``InvalidFormat``)
- decode errors: a dialect was detected but its payload does not parse
  (``ParseError``, ``ExtractionError``, ``UnsupportedFormat``)
- validation errors: well-formed HTML fails an accessibility rule
  (``AccessibilityError``)

Format and decode errors are per document; callers decide whether to skip the
document, substitute empty metadata or abort the build.  Accessibility errors
are advisory.  ``RegexCompilationError`` only fires if the static pattern
registry itself is malformed.
"""

from typing import Optional


class SiteCraftError(Exception):
    """Base class for every error raised by the compiler."""


# ---------------------------------------------------------------------------
# Front matter
# ---------------------------------------------------------------------------


class FrontmatterError(SiteCraftError):
    """Base class for front matter detection and decoding errors."""


class InvalidFormat(FrontmatterError):
    """No YAML, TOML or JSON front matter block was found."""

    def __init__(self, message: str = "Invalid frontmatter format"):
        super().__init__(message)


class ParseError(FrontmatterError):
    """A front matter block was detected but could not be decoded."""

    def __init__(
        self,
        message: str,
        format: Optional[str] = None,
        line: Optional[int] = None,
    ):
        self.message = message
        self.format = format
        self.line = line

        parts = [f"Failed to parse frontmatter: {message}"]
        if format:
            parts.append(f"(format: {format})")
        if line:
            parts.append(f"at line {line}")
        super().__init__(" ".join(parts))


class ExtractionError(FrontmatterError):
    """The front matter block could not be separated from the body."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Failed to extract frontmatter: {message}")


class UnsupportedFormat(FrontmatterError):
    """A front matter format outside YAML/TOML/JSON was requested."""

    def __init__(self, line: int):
        self.line = line
        super().__init__(f"Unsupported frontmatter format detected at line {line}")


# ---------------------------------------------------------------------------
# HTML post-processing
# ---------------------------------------------------------------------------


class HtmlError(SiteCraftError):
    """Base class for HTML post-processing errors."""


class HeaderFormattingError(HtmlError):
    """The input given to the header enricher is not a heading element."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Failed to format header: {message}")


class AccessibilityError(HtmlError):
    """A fragment failed one of the WCAG checks."""

    def __init__(self, message: str, rule: Optional[str] = None):
        self.message = message
        self.rule = rule
        super().__init__(f"WCAG Validation Error: {message}")


class RegexCompilationError(HtmlError):
    """A pattern in the static registry failed to compile."""

    def __init__(self, name: str, pattern: str, error: Exception):
        self.name = name
        self.pattern = pattern
        self.error = error
        super().__init__(f"Failed to compile regex {name} ({pattern!r}): {error}")
