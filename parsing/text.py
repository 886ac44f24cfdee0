"""Whitespace normalization of text nodes."""

from __future__ import annotations

import re

from parsing.tree import Node, Text, iter_elements

_WS_RE = re.compile(r"\s+")


def norm_ws(s: str) -> str:
    """Collapse whitespace runs into a single space and strip."""
    return _WS_RE.sub(" ", s or "").strip()


def _normalize_children(children: list[Node]) -> list[Node]:
    kept: list[Node] = []
    for child in children:
        if isinstance(child, Text):
            child.content = norm_ws(child.content)
            if not child.content:
                continue
        kept.append(child)
    return kept


def normalize_text(nodes: list[Node]) -> list[Node]:
    """Collapse whitespace in every text node and drop the ones left empty.

    Mutates the tree in place and returns the (possibly shorter) root list.
    Attributes and element structure are untouched.  Idempotent.
    """
    for el in iter_elements(nodes):
        el.children = _normalize_children(el.children)
    return _normalize_children(nodes)
