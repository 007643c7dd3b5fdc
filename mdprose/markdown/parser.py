"""Top-level entry point: :func:`parse` one markdown document.

Two independent passes feed the result:

* the syntax-tree pass runs on the cleaned text (frontmatter and
  admonition blocks removed) and yields headings, code blocks and prose;
* the line pass runs on the original text and yields line counts and
  admonitions.
"""

from __future__ import annotations

import logging

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.tasklists import tasklists_plugin

from mdprose.markdown.extract import extract_structure
from mdprose.markdown.lines import classify_lines
from mdprose.markdown.strip import clean
from mdprose.markdown.types import Heading, ParseResult

log = logging.getLogger(__name__)

HEADING_LINES_CLEANED = "cleaned"
HEADING_LINES_ORIGINAL = "original"
HEADING_LINE_MODES = (HEADING_LINES_CLEANED, HEADING_LINES_ORIGINAL)


def build_markdown() -> MarkdownIt:
    """CommonMark plus the GFM table, strikethrough, linkify and task-list rules."""
    md = MarkdownIt("commonmark", {"linkify": True})
    md.enable(["table", "strikethrough", "linkify"])
    md.use(tasklists_plugin)
    return md


def decode(content: bytes | str) -> str:
    if isinstance(content, str):
        return content
    return content.decode("utf-8", errors="replace")


def parse(content: bytes | str, heading_lines: str = HEADING_LINES_CLEANED) -> ParseResult:
    """Classify a markdown document into prose, code, headings and counts.

    Parameters
    ----------
    content:
        Whole document. Bytes are decoded as UTF-8; invalid sequences
        become replacement characters.
    heading_lines:
        ``"cleaned"`` numbers headings within the text the tree was built
        from (frontmatter and admonition blocks removed). ``"original"``
        maps them back to the lines of *content*.

    Never raises for any document content. A bad *heading_lines* value
    is a caller error and raises ValueError.
    """
    if heading_lines not in HEADING_LINE_MODES:
        raise ValueError(
            f"heading_lines must be one of {HEADING_LINE_MODES}, got {heading_lines!r}"
        )

    text = decode(content)
    cleaned = clean(text)

    tree = SyntaxTreeNode(build_markdown().parse(cleaned.text))
    structure = extract_structure(tree)

    headings = structure.headings
    if heading_lines == HEADING_LINES_ORIGINAL:
        headings = [
            Heading(line=cleaned.original_line(h.line), level=h.level, text=h.text)
            for h in headings
        ]

    counts = classify_lines(text)
    result = ParseResult(
        prose=structure.prose,
        code_blocks=structure.code_blocks,
        headings=headings,
        admonitions=counts.admonitions,
        total_lines=counts.total_lines,
        code_lines=counts.code_lines,
        empty_lines=counts.empty_lines,
    )
    log.debug("Parsed document: %r", result)
    return result
