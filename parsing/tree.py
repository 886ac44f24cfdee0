"""In-memory fragment tree: ``Element`` and ``Text`` nodes.

A parsed fragment is a plain ``list`` of root nodes (no document wrapper).
Every helper here walks the tree with an explicit stack so that pasted
markup nested thousands of levels deep never hits the recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

# Elements that never have children or a closing tag.
VOID_TAGS = frozenset({
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
})

# Elements whose text content is serialized verbatim (no escaping).
RAW_TEXT_TAGS = frozenset({"script", "style"})


@dataclass
class Text:
    """A run of character data."""

    content: str


@dataclass
class Element:
    """An HTML element with ordered attributes and children."""

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_TAGS

    def element_children(self) -> list[Element]:
        return [c for c in self.children if isinstance(c, Element)]


Node = Union[Element, Text]


def iter_elements(nodes: list[Node]) -> Iterator[Element]:
    """Yield every element in pre-order (parent before children, document order)."""
    stack: list[Node] = list(reversed(nodes))
    while stack:
        node = stack.pop()
        if isinstance(node, Element):
            yield node
            stack.extend(reversed(node.children))


def iter_elements_postorder(nodes: list[Node]) -> Iterator[Element]:
    """Yield every element after all of its descendant elements."""
    stack: list[tuple[Element, bool]] = [
        (n, False) for n in reversed(nodes) if isinstance(n, Element)
    ]
    while stack:
        el, expanded = stack.pop()
        if expanded:
            yield el
            continue
        stack.append((el, True))
        stack.extend((c, False) for c in reversed(el.element_children()))


def text_content(node: Node) -> str:
    """Concatenate all descendant text, like the DOM ``textContent``."""
    if isinstance(node, Text):
        return node.content
    parts: list[str] = []
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, Text):
            parts.append(current.content)
        else:
            stack.extend(reversed(current.children))
    return "".join(parts)
