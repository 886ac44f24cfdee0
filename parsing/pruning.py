"""Empty-element pruning.

Removes elements that carry nothing: no text, no surviving children and
no functional attribute.  Pruning is bottom-up, so a wrapper whose only
content was an empty ``<span>`` disappears together with it::

    <div><div><span></span></div></div>  ->  (nothing)

Void elements that are meaningful on their own (``img``, ``input``,
``br`` ...) are never pruned, and neither is anything that contains one.
"""

from __future__ import annotations

from parsing.classify import is_preserved
from parsing.tree import Element, Node, Text, iter_elements_postorder

# Self-closing tags kept even with no attributes.
FUNCTIONAL_SELF_CLOSING_TAGS = frozenset({
    "img",
    "input",
    "br",
    "hr",
    "area",
    "base",
    "col",
    "embed",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
})


def is_removable(el: Element) -> bool:
    """Return True if *el* is empty once its own children were pruned.

    Checks all four keep conditions:
    1. non-blank text content
    2. any remaining child element
    3. an attribute that classifies as preserved
    4. a functional self-closing tag
    """
    if el.tag in FUNCTIONAL_SELF_CLOSING_TAGS:
        return False
    if any(is_preserved(name) for name in el.attrs):
        return False
    if el.element_children():
        return False
    # No child elements left, so text content is just the direct text.
    return not any(isinstance(c, Text) and c.content.strip() for c in el.children)


def prune_empty(nodes: list[Node]) -> list[Node]:
    """Remove removable elements bottom-up and return the new root list.

    Children are filtered before their parent is judged, so each element
    is evaluated against its already-pruned subtree.  Root elements follow
    the same rule; root text nodes are kept.  A pruned tree is a fixed
    point: pruning it again changes nothing.
    """
    removable: set[int] = set()
    for el in iter_elements_postorder(nodes):
        if any(id(c) in removable for c in el.children):
            el.children = [c for c in el.children if id(c) not in removable]
        if is_removable(el):
            removable.add(id(el))
    return [n for n in nodes if id(n) not in removable]
