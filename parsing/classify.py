"""Attribute classification.

Every attribute name falls into exactly one ``AttributeCategory``.  Only
``PRESERVED`` attributes survive stripping; the rest are presentation,
tracking, scripting or unrecognised noise picked up when copying markup
out of rich-text editors.

Rules, first match wins (names compared case-insensitively):

1. in ``FUNCTIONAL_ATTRIBUTES`` or starts with ``aria-`` -> PRESERVED
2. in ``STYLING_ATTRIBUTES``                            -> STYLING
3. starts with ``data-``                                -> DATA_ATTRIBUTE
4. starts with ``on``                                   -> EVENT_HANDLER
5. anything else                                        -> UNKNOWN

``size`` is listed in both sets.  Rule 1 wins, so it is always preserved.
"""

from __future__ import annotations

from enum import Enum


class AttributeCategory(str, Enum):
    """Mutually exclusive attribute categories."""

    PRESERVED = "preserved"
    STYLING = "styling"
    DATA_ATTRIBUTE = "data_attributes"
    EVENT_HANDLER = "event_handlers"
    UNKNOWN = "unknown"


FUNCTIONAL_ATTRIBUTES = frozenset({
    # Core
    "id",
    "title",
    "lang",
    "dir",
    "hidden",
    # Links
    "href",
    "target",
    "rel",
    "download",
    "hreflang",
    "type",
    # Forms
    "action",
    "method",
    "name",
    "value",
    "placeholder",
    "required",
    "disabled",
    "readonly",
    "checked",
    "selected",
    "multiple",
    "size",
    "maxlength",
    "minlength",
    "min",
    "max",
    "step",
    "pattern",
    "autocomplete",
    "autofocus",
    "form",
    "formaction",
    "formmethod",
    "formtarget",
    "for",
    # Media
    "src",
    "alt",
    "width",
    "height",
    "controls",
    "autoplay",
    "loop",
    "muted",
    "poster",
    "preload",
    "crossorigin",
    # Tables
    "colspan",
    "rowspan",
    "headers",
    "scope",
    # Interaction
    "tabindex",
    "accesskey",
    "contenteditable",
    "draggable",
    "dropzone",
    # ARIA
    "role",
    "aria-label",
    "aria-labelledby",
    "aria-describedby",
    "aria-hidden",
    "aria-expanded",
    "aria-selected",
    "aria-checked",
    "aria-disabled",
    "aria-required",
    "aria-invalid",
    "aria-live",
    "aria-atomic",
    "aria-relevant",
    "aria-busy",
    "aria-controls",
    "aria-owns",
    "aria-flowto",
    "aria-activedescendant",
    # Metadata
    "charset",
    "content",
    "http-equiv",
    "property",
    "itemprop",
    "itemscope",
    "itemtype",
    # Script/style hints
    "defer",
    "async",
    "integrity",
    "nonce",
    # Semantics
    "datetime",
    "cite",
    "open",
    "reversed",
    "start",
    "span",
})

STYLING_ATTRIBUTES = frozenset({
    "class",
    "style",
    "bgcolor",
    "color",
    "face",
    "size",
    "align",
    "valign",
    "background",
    "border",
    "cellpadding",
    "cellspacing",
    "frame",
    "rules",
    "summary",
    "bordercolor",
    "bordercolordark",
    "bordercolorlight",
})

CATEGORY_DESCRIPTIONS: dict[AttributeCategory, str] = {
    AttributeCategory.PRESERVED: "Functional attributes kept for proper HTML behavior",
    AttributeCategory.STYLING: "Styling attributes that affect visual appearance",
    AttributeCategory.DATA_ATTRIBUTE: "Data attributes used for JavaScript/tracking",
    AttributeCategory.EVENT_HANDLER: "Event handler attributes (onclick, onload, etc.)",
    AttributeCategory.UNKNOWN: "Non-standard or custom attributes",
}


def classify(name: str) -> AttributeCategory:
    """Return the category of attribute *name*."""
    lowered = name.lower()
    if lowered in FUNCTIONAL_ATTRIBUTES or lowered.startswith("aria-"):
        return AttributeCategory.PRESERVED
    if lowered in STYLING_ATTRIBUTES:
        return AttributeCategory.STYLING
    if lowered.startswith("data-"):
        return AttributeCategory.DATA_ATTRIBUTE
    if lowered.startswith("on"):
        return AttributeCategory.EVENT_HANDLER
    return AttributeCategory.UNKNOWN


def is_preserved(name: str) -> bool:
    return classify(name) is AttributeCategory.PRESERVED
