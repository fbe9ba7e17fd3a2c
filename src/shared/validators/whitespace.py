"""Whitespace as browsers define it for regex ``\\s`` and ``String.prototype.trim``.

Python's ``\\s`` and ``str.strip()`` differ at the edges: they treat the
information separators U+001C-U+001F and U+0085 as whitespace, and do not
treat the byte order mark U+FEFF as whitespace. Form values come from a
browser, so the validators use the browser's set.
"""

import re

_CODE_POINTS = [
    0x0009, 0x000A, 0x000B, 0x000C, 0x000D, 0x0020,
    0x00A0, 0x1680,
    *range(0x2000, 0x200B),
    0x2028, 0x2029, 0x202F, 0x205F, 0x3000,
    0xFEFF,
]  # fmt: skip

WHITESPACE = "".join(chr(code) for code in _CODE_POINTS)

# Character class body, for use inside [...]
WHITESPACE_CLASS = re.escape(WHITESPACE)


def strip_whitespace(value: str) -> str:
    """Trim leading and trailing whitespace the way a browser's trim() does."""
    return value.strip(WHITESPACE)
