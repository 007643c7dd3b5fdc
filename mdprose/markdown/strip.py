"""Frontmatter and admonition-block removal ahead of AST parsing.

Both passes are line based. :func:`clean` runs them in order and keeps a
map from each surviving line back to its line number in the original
document, so callers can translate positions found in the cleaned text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from mdprose.markdown.admonition import is_admonition_marker

log = logging.getLogger(__name__)

FRONTMATTER_DELIMITERS = ("---", "+++")


@dataclass
class CleanedDocument:
    """Text handed to the markdown parser, plus its line origins."""

    text: str
    # origins[i] is the 1-based original line number of cleaned line i + 1
    origins: list[int] = field(default_factory=list)

    def original_line(self, line: int) -> int:
        """Translate a 1-based cleaned line number to the original document."""
        if 0 < line <= len(self.origins):
            return self.origins[line - 1]
        return line


# -- Frontmatter -----------------------------------------------------------

def _frontmatter_length(lines: list[str]) -> int:
    """Number of leading lines occupied by a closed frontmatter block.

    Zero when the document has no frontmatter or the block is never
    closed.
    """
    delimiter = lines[0].strip()
    if delimiter not in FRONTMATTER_DELIMITERS:
        return 0

    for i in range(1, len(lines)):
        if lines[i].strip() == delimiter:
            return i + 1

    log.debug("Unterminated %s frontmatter, keeping document as-is", delimiter)
    return 0


def strip_frontmatter(content: str) -> str:
    """Remove a leading YAML (``---``) or TOML (``+++``) frontmatter block.

    The closing delimiter must match the opening one. Unterminated
    frontmatter is not frontmatter: the input comes back unchanged.
    """
    lines = content.split("\n")
    skip = _frontmatter_length(lines)
    if skip == 0:
        return content
    return "\n".join(lines[skip:])


# -- Admonition blocks -----------------------------------------------------

def _admonition_mask(lines: list[str]) -> list[bool]:
    """Flag each line True if it belongs to an admonition block.

    A block is the ``!!!`` line plus every following line that is blank
    or indented. The first unindented, non-blank line ends it.
    """
    mask = [False] * len(lines)
    i = 0
    while i < len(lines):
        if not is_admonition_marker(lines[i].strip()):
            i += 1
            continue

        mask[i] = True
        i += 1
        while i < len(lines):
            line = lines[i]
            if line[:1] in (" ", "\t") or not line.strip():
                mask[i] = True
                i += 1
                continue
            break
    return mask


def strip_admonitions(content: str) -> str:
    """Drop MkDocs admonition blocks (marker line and indented body)."""
    lines = content.split("\n")
    mask = _admonition_mask(lines)
    return "\n".join(line for line, skipped in zip(lines, mask) if not skipped)


# -- Combined --------------------------------------------------------------

def clean(content: str) -> CleanedDocument:
    """Strip frontmatter, then admonition blocks, tracking line origins."""
    lines = content.split("\n")
    skip = _frontmatter_length(lines)
    if skip:
        lines = lines[skip:]

    mask = _admonition_mask(lines)
    kept: list[str] = []
    origins: list[int] = []
    for offset, (line, skipped) in enumerate(zip(lines, mask)):
        if skipped:
            continue
        kept.append(line)
        origins.append(skip + offset + 1)

    return CleanedDocument(text="\n".join(kept), origins=origins)
