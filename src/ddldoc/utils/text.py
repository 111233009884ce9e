"""Text processing utilities for ddldoc.

Example:
    >>> from ddldoc.utils.text import encode_entities
    >>> encode_entities("List<u8>")
    'List&#x3C;u8&#x3E;'
"""

from __future__ import annotations

import re

# Markup-significant ASCII, C0 controls other than whitespace, DEL and
# everything outside ASCII.
_UNSAFE = re.compile("[\"&'<>`\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\U0010ffff]")


def encode_entities(text: str) -> str:
    """Encode text for safe embedding in Markdown table cells.

    Every unsafe character becomes an uppercase hexadecimal character
    reference, which is what the ``he`` encoder emits by default:

    - ``&`` becomes ``&#x26;``
    - ``<`` becomes ``&#x3C;``
    - ``>`` becomes ``&#x3E;``
    - ``"``, ``'`` and backtick are encoded as well
    - non-ASCII code points, e.g. ``é`` becomes ``&#xE9;``

    Markdown link syntax (brackets, parentheses) is left intact so encoded
    cells still render their links.

    Examples:
        >>> encode_entities("[List](#list)<Gathering>")
        '[List](#list)&#x3C;Gathering&#x3E;'
        >>> encode_entities("u32")
        'u32'
    """
    if not text:
        return ""
    return _UNSAFE.sub(lambda m: f"&#x{ord(m.group()):X};", text)


def heading_anchor(*parts: str | int) -> str:
    """Anchor GitHub generates for a heading made of simple words.

    Parts are lowercased and joined with ``-``:

        >>> heading_anchor(1, "Hello")
        '1-hello'
        >>> heading_anchor("Gathering")
        'gathering'
    """
    return "-".join(str(part).lower() for part in parts)
