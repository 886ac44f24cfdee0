"""Indented, human-readable rendering of a fragment tree.

Formatting rules:
    - void tags (``img``, ``br`` ...) render as a lone open tag
    - an element with no children renders as ``<tag></tag>``
    - an element holding only text, trimmed to under 50 characters and
      without a newline, renders inline: ``<p>Short text</p>``
    - anything else renders as an open-tag line, one line per child at
      depth + 1 (text trimmed, blank text skipped), and a close-tag line
    - root siblings are separated by a blank line
"""

from __future__ import annotations

from parsing.markup import escape_text, open_tag
from parsing.tree import RAW_TEXT_TAGS, Element, Node, Text, text_content

INLINE_TEXT_LIMIT = 50


def _escape_for(el: Element, text: str) -> str:
    return text if el.tag in RAW_TEXT_TAGS else escape_text(text)


def _render_root(root: Element, indent: str, lines: list[str]) -> None:
    """Append the lines for *root* and its subtree to *lines*.

    The stack holds either an element still to be opened (with its depth)
    or a finished line, such as a close tag, waiting for its turn.
    """
    stack: list[tuple[Element, int] | str] = [(root, 0)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            lines.append(item)
            continue

        el, depth = item
        pad = indent * depth
        start = f"{pad}{open_tag(el)}"
        end = f"</{el.tag}>"

        if el.is_void:
            lines.append(start)
            continue
        if not el.children:
            lines.append(f"{start}{end}")
            continue
        if all(isinstance(c, Text) for c in el.children):
            text = text_content(el).strip()
            if len(text) < INLINE_TEXT_LIMIT and "\n" not in text:
                lines.append(f"{start}{_escape_for(el, text)}{end}")
                continue

        pending: list[tuple[Element, int] | str] = []
        for child in el.children:
            if isinstance(child, Element):
                pending.append((child, depth + 1))
            else:
                text = child.content.strip()
                if text:
                    pending.append(f"{pad}{indent}{_escape_for(el, text)}")

        if not pending:
            lines.append(f"{start}{end}")
            continue
        lines.append(start)
        stack.append(f"{pad}{end}")
        stack.extend(reversed(pending))


def beautify_nodes(nodes: list[Node], *, indent: str = "  ") -> str:
    """Render root *nodes* as indented markup.

    Lines are emitted in document order from an explicit stack, so the work
    is linear in the output size and nesting depth is bounded only by memory.
    """
    blocks: list[str] = []
    for node in nodes:
        if isinstance(node, Element):
            lines: list[str] = []
            _render_root(node, indent, lines)
            blocks.append("\n".join(lines))
        else:
            text = node.content.strip()
            if text:
                blocks.append(escape_text(text))
    return "\n\n".join(blocks)
