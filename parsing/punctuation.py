"""Punctuation spacing correction on serialized markup.

Works on the markup *string* rather than the tree so that a rule can see
across tag boundaries, e.g. ``</bdt> ,`` -> ``</bdt>,``.  The rules are a
text heuristic: they do not know about attribute values or ``<pre>``
blocks and may rewrite punctuation-like characters inside them.

Rules run in order; later rules assume the earlier ones already ran.
"""

from __future__ import annotations

import re

_PUNCT = r"[,.;:!?]"

# (name, pattern, replacement) in application order.
PUNCTUATION_RULES: list[tuple[str, re.Pattern[str], str]] = [
    # "</bdt> ," -> "</bdt>,"
    ("closing_tag_before_punct", re.compile(rf"(</[^>]+>)\s+({_PUNCT})"), r"\1\2"),
    # "word ," -> "word,"
    ("space_before_punct", re.compile(rf"\s+({_PUNCT})"), r"\1"),
    # "word.  next" -> "word. next"
    ("space_after_punct", re.compile(rf"({_PUNCT})\s+"), r"\1 "),
    # "end.Next" -> "end. Next"
    ("sentence_boundary", re.compile(r"\.\s*([A-Z])"), r". \1"),
    # "word )" -> "word)"
    ("space_before_close_bracket", re.compile(r"\s+([)\]}])"), r"\1"),
    # "( word" -> "(word"
    ("space_after_open_bracket", re.compile(r"([(\[{])\s+"), r"\1"),
    ("closing_tag_before_bracket", re.compile(r"(</[^>]+>)\s+([)\]}])"), r"\1\2"),
    ("space_before_quote", re.compile(r"\s+([\"'])"), r"\1"),
    ("space_after_quote", re.compile(r"([\"'])\s+"), r"\1"),
    # contractions: "we 're" -> "we're"
    ("space_before_apostrophe", re.compile(r"\s+'"), "'"),
    ("word_or_tag_before_punct", re.compile(rf"(\w|>)\s+({_PUNCT})", re.ASCII), r"\1\2"),
]


def fix_punctuation(markup: str) -> str:
    """Apply every rule in ``PUNCTUATION_RULES`` to *markup*, in order."""
    if not markup.strip():
        return ""
    for _name, pattern, replacement in PUNCTUATION_RULES:
        markup = pattern.sub(replacement, markup)
    return markup
