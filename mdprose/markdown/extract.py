"""Walk a markdown-it syntax tree and pull out headings, code and prose.

Only ``text`` leaves contribute to prose, and only when no ancestor is a
code, table or list node. Table cells and list items are terse fragments
that would skew sentence-based readability scores.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from markdown_it.tree import SyntaxTreeNode

from mdprose.markdown.types import Heading

CODE_NODES = frozenset({"fence", "code_block", "code_inline"})
TABLE_NODES = frozenset({"table", "thead", "tbody", "tr", "th", "td"})
LIST_NODES = frozenset({"bullet_list", "ordered_list", "list_item"})

NON_PROSE_NODES = CODE_NODES | TABLE_NODES | LIST_NODES

# Link markup for `<https://...>` and bare URLs; the link text is the URL itself
AUTOLINK_MARKUPS = frozenset({"autolink", "linkify"})


@dataclass
class Structure:
    """Headings, code blocks and raw (un-normalized) prose from one tree."""

    headings: list[Heading] = field(default_factory=list)
    code_blocks: list[str] = field(default_factory=list)
    prose_parts: list[str] = field(default_factory=list)

    @property
    def prose(self) -> str:
        return normalize_whitespace("".join(self.prose_parts))


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space and trim the ends."""
    return " ".join(text.split())


def has_non_prose_ancestor(node: SyntaxTreeNode) -> bool:
    parent = node.parent
    while parent is not None:
        if parent.type in NON_PROSE_NODES:
            return True
        parent = parent.parent
    return False


def heading_text(node: SyntaxTreeNode) -> str:
    """Concatenate the text leaves sitting directly in a heading.

    Text wrapped in emphasis, links or code spans is skipped, so
    ``# **Bold** heading`` gives ``" heading"``.
    """
    parts: list[str] = []
    for child in node.children:
        if child.type != "inline":
            continue
        parts.extend(leaf.content for leaf in child.children if leaf.type == "text")
    return "".join(parts)


def heading_level(node: SyntaxTreeNode) -> int:
    # markdown-it only emits h1..h6
    return int(node.tag[1:])


def code_block_text(node: SyntaxTreeNode) -> str:
    """Literal code content, minus the last line's terminator."""
    content = node.content
    if content.endswith("\n"):
        content = content[:-1]
    return content


# -- Node handlers ---------------------------------------------------------

def _on_heading(node: SyntaxTreeNode, out: Structure) -> None:
    line = node.map[0] + 1 if node.map else 1
    out.headings.append(Heading(line=line, level=heading_level(node), text=heading_text(node)))


def _on_code(node: SyntaxTreeNode, out: Structure) -> None:
    out.code_blocks.append(code_block_text(node))


def is_autolink_text(node: SyntaxTreeNode) -> bool:
    parent = node.parent
    return parent is not None and parent.type == "link" and parent.markup in AUTOLINK_MARKUPS


def _on_text(node: SyntaxTreeNode, out: Structure) -> None:
    if has_non_prose_ancestor(node) or is_autolink_text(node):
        return
    out.prose_parts.append(node.content)
    out.prose_parts.append(" ")


HANDLERS: dict[str, Callable[[SyntaxTreeNode, Structure], None]] = {
    "heading": _on_heading,
    "fence": _on_code,
    "code_block": _on_code,
    "text": _on_text,
}


def extract_structure(tree: SyntaxTreeNode) -> Structure:
    """Single depth-first pass over *tree*, dispatching on node type."""
    out = Structure()
    for node in tree.walk():
        handler = HANDLERS.get(node.type)
        if handler is not None:
            handler(node, out)
    return out
