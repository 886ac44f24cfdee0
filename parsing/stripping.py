"""Attribute stripping.

Removes every attribute that does not classify as ``PRESERVED`` and
records which names were seen per category.
"""

from __future__ import annotations

from models.stats import AttributeStats
from parsing.classify import AttributeCategory, classify
from parsing.tree import Node, iter_elements


def strip_attributes(nodes: list[Node]) -> AttributeStats:
    """Strip non-functional attributes from every element in *nodes*.

    This function **mutates** the tree in place.  Elements are visited
    pre-order, parent before children; each attribute name is reported at
    most once per category no matter how many elements carried it.

    Returns:
        An ``AttributeStats`` with sorted, de-duplicated names.
    """
    seen: dict[AttributeCategory, set[str]] = {c: set() for c in AttributeCategory}

    for el in iter_elements(nodes):
        kept: dict[str, str] = {}
        for name, value in el.attrs.items():
            category = classify(name)
            seen[category].add(name)
            if category is AttributeCategory.PRESERVED:
                kept[name] = value
        el.attrs = kept

    return AttributeStats.from_sets(seen)
