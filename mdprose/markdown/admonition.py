"""Parse a single MkDocs admonition marker line.

Recognised forms::

    !!! note
    !!! warning "Custom Title"
    !!! tip inline
    !!! note+
"""

from __future__ import annotations

from typing import NamedTuple

ADMONITION_MARKER = "!!!"


class AdmonitionLine(NamedTuple):
    """Type and title parsed from an admonition line (no position yet)."""
    type: str
    title: str


def is_admonition_marker(stripped: str) -> bool:
    """True if an already-stripped line opens an admonition block."""
    return stripped.startswith(ADMONITION_MARKER)


def parse_admonition(line: str) -> AdmonitionLine | None:
    """Parse ``!!! type "title"`` into an :class:`AdmonitionLine`.

    Returns None when nothing follows the marker. An unterminated quote
    leaves the title empty rather than failing.
    """
    rest = line.strip()
    if rest.startswith(ADMONITION_MARKER):
        rest = rest[len(ADMONITION_MARKER):]
    rest = rest.strip()

    if not rest:
        return None

    title = ""
    quote = rest.find('"')
    if quote != -1:
        adm_type = rest[:quote].strip()
        closing = rest.find('"', quote + 1)
        if closing != -1:
            title = rest[quote + 1:closing]
    else:
        # Modifiers after the type ("inline", "end") are dropped
        adm_type = rest.split()[0]

    # Collapsible marker: "note+" is a note
    if adm_type.endswith("+"):
        adm_type = adm_type[:-1]

    return AdmonitionLine(adm_type, title)
