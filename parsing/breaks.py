"""Line-break (``<br>``) removal on serialized markup."""

from __future__ import annotations

import re

# <br>, <br/>, <br />, <BR>, <br   />, and <br id="x"> left over after stripping.
BR_RE = re.compile(r"<br(?:\s+[^>]*?)?\s*/?>", re.IGNORECASE)


def remove_line_breaks(markup: str) -> str:
    """Delete every ``<br>`` tag from *markup*.  Nothing else is touched."""
    if not markup.strip():
        return ""
    return BR_RE.sub("", markup)
