"""StringBuilder for Markdown fragment accumulation.

Appends to a list, joins once at the end. Renderers create one builder per
fragment; nothing is shared between render calls.

"""

from __future__ import annotations

from collections.abc import Iterable


class StringBuilder:
    """Efficient string accumulator with Markdown table helpers.

    Usage:
        >>> StringBuilder().append("## Request").line("| Type | Name |").build()
        '## Request\\n| Type | Name |'

    ``line`` starts a new line before its text, which matches how fragments
    are stitched together: no leading or trailing newline on the result.

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def line(self, s: str = "") -> StringBuilder:
        """Append a newline followed by ``s``."""
        self._parts.append("\n")
        if s:
            self._parts.append(s)
        return self

    def row(self, cells: Iterable[str]) -> StringBuilder:
        """Append a Markdown table row on a new line.

        Cells are joined verbatim; an empty cell renders as ``|  |``.
        """
        return self.line("| " + " | ".join(cells) + " |")

    def table_header(self, *titles: str) -> StringBuilder:
        """Append a header row and its ``---`` separator."""
        self.row(titles)
        return self.row(["---"] * len(titles))

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
