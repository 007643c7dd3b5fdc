"""Result types produced by the markdown engine."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Heading:
    """A markdown heading (``#`` through ``######`` or setext)."""

    line: int
    level: int
    text: str


@dataclass(frozen=True)
class Admonition:
    """A MkDocs-style ``!!! type "title"`` call-out."""

    line: int
    type: str
    title: str = ""


@dataclass
class ParseResult:
    """Everything extracted from one document.

    ``prose`` is what readability formulas should score. Line counts are
    taken against the original document, before frontmatter or
    admonition blocks are stripped.
    """

    prose: str = ""
    code_blocks: list[str] = field(default_factory=list)
    headings: list[Heading] = field(default_factory=list)
    admonitions: list[Admonition] = field(default_factory=list)
    total_lines: int = 1
    code_lines: int = 0
    empty_lines: int = 0

    @property
    def prose_lines(self) -> int:
        return self.total_lines - self.code_lines - self.empty_lines

    def __repr__(self) -> str:
        return (
            f"ParseResult({len(self.headings)} headings, "
            f"{len(self.code_blocks)} code blocks, "
            f"{len(self.admonitions)} admonitions, "
            f"{self.total_lines} lines)"
        )
