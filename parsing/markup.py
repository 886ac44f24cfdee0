"""Lenient fragment parser and compact serializer.

Parsing is delegated to ``lxml.html`` (libxml2's HTML parser), which closes
tags implicitly the way a browser does: a new ``<li>`` closes the open
one, a block element closes an open ``<p>``.  The input is wrapped in
``<html><body>`` before parsing so libxml2 never invents a wrapper or a
``<p>`` of its own, and the body's content is copied into the plain
``Element``/``Text`` tree from ``parsing.tree``.

Tolerance rules:
    - tag and attribute names are lower-cased
    - optional end tags (``p``, ``li``, ``td`` ...) close implicitly;
      anything else closes with its parent or at end of input
    - stray end tags are ignored
    - void elements (``br``, ``img`` ...) never take children
    - attribute values may be double-quoted, single-quoted or unquoted;
      a bare attribute gets the value ``""``
    - a repeated attribute keeps its first value
    - comments, doctypes and processing instructions are dropped

``serialize()`` is the inverse: it emits the same string a browser's
``innerHTML`` would, so ``parse_fragment(serialize(nodes))`` reproduces
*nodes*.
"""

from __future__ import annotations

from lxml import etree
from lxml.html import HTMLParser, document_fromstring

from parsing.errors import ParseFailure
from parsing.tree import RAW_TEXT_TAGS, Element, Node, Text


def _html_parser() -> HTMLParser:
    # huge_tree lifts libxml2's default nesting-depth limit.
    return HTMLParser(remove_comments=True, remove_pis=True, huge_tree=True)


def _attr_value(value: object) -> str:
    return "" if value is None else str(value)


def _append_text(target: list[Node], content: str | None) -> None:
    if not content:
        return
    if target and isinstance(target[-1], Text):
        target[-1].content += content
    else:
        target.append(Text(content))


def parse_fragment(markup: str) -> list[Node]:
    """Parse *markup* into a list of root nodes.

    Raises:
        ParseFailure: If libxml2 rejects the input or yields no body.
    """
    try:
        doc = document_fromstring(f"<html><body>{markup}</body></html>", parser=_html_parser())
    except (etree.LxmlError, ValueError) as exc:
        raise ParseFailure(str(exc)) from exc
    body = doc.find("body")
    if body is None:
        raise ParseFailure("parser produced no body")

    roots: list[Node] = []
    _append_text(roots, body.text)
    # lxml keeps the text after an element on the element itself (``tail``),
    # so each source node is appended, then its tail, to the same list.
    stack: list[tuple[etree._Element, list[Node]]] = [(c, roots) for c in reversed(body)]
    while stack:
        source, target = stack.pop()
        if isinstance(source.tag, str):
            attrs: dict[str, str] = {}
            for name, value in source.attrib.items():
                attrs.setdefault(name.lower(), _attr_value(value))
            el = Element(tag=source.tag.lower(), attrs=attrs)
            target.append(el)
            if not el.is_void:
                _append_text(el.children, source.text)
                stack.extend((c, el.children) for c in reversed(source))
        # Comments, entities and PIs are skipped but their tail is text.
        _append_text(target, source.tail)
    return roots


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def escape_text(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("\xa0", "&nbsp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def escape_attr(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("\xa0", "&nbsp;")
        .replace('"', "&quot;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def open_tag(el: Element) -> str:
    """Render ``<tag a="b">`` with attributes in insertion order."""
    attrs = "".join(f' {name}="{escape_attr(value)}"' for name, value in el.attrs.items())
    return f"<{el.tag}{attrs}>"


def serialize(nodes: list[Node]) -> str:
    """Serialize root *nodes* to compact markup (no added whitespace)."""
    parts: list[str] = []
    # Items are (node, inside_raw_text_element) or a pending closing tag.
    stack: list[tuple[Node, bool] | str] = [(n, False) for n in reversed(nodes)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        node, raw = item
        if isinstance(node, Text):
            parts.append(node.content if raw else escape_text(node.content))
            continue
        parts.append(open_tag(node))
        if node.is_void:
            continue
        stack.append(f"</{node.tag}>")
        child_raw = node.tag in RAW_TEXT_TAGS
        stack.extend((c, child_raw) for c in reversed(node.children))
    return "".join(parts)
