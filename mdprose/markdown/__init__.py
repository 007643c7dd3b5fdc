"""Markdown content-classification engine.

Splits a document into prose (for readability scoring), code blocks,
headings, admonitions and line counts. :func:`parse` is the entry point.
"""

from mdprose.markdown.admonition import parse_admonition
from mdprose.markdown.parser import parse
from mdprose.markdown.strip import clean, strip_admonitions, strip_frontmatter
from mdprose.markdown.types import Admonition, Heading, ParseResult

__all__ = [
    "Admonition",
    "Heading",
    "ParseResult",
    "clean",
    "parse",
    "parse_admonition",
    "strip_admonitions",
    "strip_frontmatter",
]
