"""Line-oriented classification over the original document.

Counts code and empty lines and collects admonition markers. Runs on the
unmodified text, so frontmatter and admonition bodies are counted like
any other line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from mdprose.markdown.admonition import is_admonition_marker, parse_admonition
from mdprose.markdown.types import Admonition

log = logging.getLogger(__name__)

FENCE_MARKER = "```"


@dataclass
class LineCounts:
    """Output of :func:`classify_lines`."""

    total_lines: int = 0
    code_lines: int = 0
    empty_lines: int = 0
    admonitions: list[Admonition] = field(default_factory=list)


def classify_lines(content: str) -> LineCounts:
    """Count total, code and empty lines and detect admonitions.

    Each triple-backtick line toggles the in-fence state and is itself a
    code line. Fences are not matched up: an unclosed fence turns the
    rest of the document into code.
    """
    lines = content.split("\n")
    counts = LineCounts(total_lines=len(lines))

    in_fence = False
    for lineno, line in enumerate(lines, start=1):
        stripped = line.strip()

        if stripped.startswith(FENCE_MARKER):
            in_fence = not in_fence
            counts.code_lines += 1
            continue

        if in_fence:
            counts.code_lines += 1
            continue

        if not stripped:
            counts.empty_lines += 1
            continue

        if is_admonition_marker(stripped):
            parsed = parse_admonition(stripped)
            if parsed is not None:
                counts.admonitions.append(
                    Admonition(line=lineno, type=parsed.type, title=parsed.title)
                )

    if in_fence:
        log.debug("Code fence left open; remainder of document counted as code")

    return counts
