"""Structural metrics derived from a :class:`ParseResult`.

These are the counts that sit next to readability scores in a report:
words, sentences, reading time, heading counts per level, line
composition and admonition usage. Readability formulas themselves are
computed elsewhere from ``ParseResult.prose``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mdprose.markdown.types import Admonition, Heading, ParseResult

DEFAULT_WORDS_PER_MINUTE = 200


@dataclass
class Structural:
    lines: int
    words: int
    sentences: int
    characters: int
    reading_time_minutes: int


@dataclass
class HeadingCounts:
    h1: int = 0
    h2: int = 0
    h3: int = 0
    h4: int = 0
    h5: int = 0
    h6: int = 0

    @property
    def total(self) -> int:
        return self.h1 + self.h2 + self.h3 + self.h4 + self.h5 + self.h6


@dataclass
class Composition:
    total_lines: int
    prose_lines: int
    code_lines: int
    empty_lines: int
    code_block_ratio: float


@dataclass
class AdmonitionSummary:
    count: int = 0
    types: list[str] = field(default_factory=list)


@dataclass
class DocumentStats:
    """Everything :func:`summarize` derives for one document."""

    file: str
    structural: Structural
    headings: HeadingCounts
    composition: Composition
    admonitions: AdmonitionSummary


def count_words(text: str) -> int:
    return len(text.split())


def count_sentences(text: str) -> int:
    """Estimate sentences by terminal punctuation.

    Non-empty text without any ``.``, ``!`` or ``?`` counts as one.
    """
    count = sum(1 for ch in text if ch in ".!?")
    if count == 0 and text:
        return 1
    return count


def reading_time(words: int, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """Minutes to read *words*, rounded up (201 words at 200 wpm is 2)."""
    if words <= 0:
        return 0
    return -(-words // words_per_minute)


def ratio(part: int, total: int) -> float:
    if total == 0:
        return 0.0
    return part / total


def count_headings(headings: list[Heading]) -> HeadingCounts:
    counts = HeadingCounts()
    for heading in headings:
        attr = f"h{heading.level}"
        if hasattr(counts, attr):
            setattr(counts, attr, getattr(counts, attr) + 1)
    return counts


def summarize_admonitions(admonitions: list[Admonition]) -> AdmonitionSummary:
    """Count admonitions and list their distinct types in first-seen order."""
    types: list[str] = []
    for adm in admonitions:
        if adm.type and adm.type not in types:
            types.append(adm.type)
    return AdmonitionSummary(count=len(admonitions), types=types)


def summarize(
    result: ParseResult,
    path: str = "",
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> DocumentStats:
    """Build :class:`DocumentStats` for a parsed document."""
    prose = result.prose
    words = count_words(prose)

    return DocumentStats(
        file=path,
        structural=Structural(
            lines=result.total_lines,
            words=words,
            sentences=count_sentences(prose),
            characters=len(prose.encode("utf-8")),
            reading_time_minutes=reading_time(words, words_per_minute),
        ),
        headings=count_headings(result.headings),
        composition=Composition(
            total_lines=result.total_lines,
            prose_lines=result.prose_lines,
            code_lines=result.code_lines,
            empty_lines=result.empty_lines,
            code_block_ratio=ratio(result.code_lines, result.total_lines),
        ),
        admonitions=summarize_admonitions(result.admonitions),
    )
