"""Fixed-width text tables driven by printf-style column templates.

Each column is described by a template holding exactly one ``%s``
placeholder plus literal decoration, e.g. ``"| %-32s"``.  The width of a
column is the length of its template applied to an empty string and never
changes afterwards.

    >>> tf = TableFormatter("| %4s ", "| %-6s |")
    >>> print(tf.line().row("ID", "Name").line().get(), end="")
    +------+--------+
    |   ID | Name   |
    +------+--------+
"""

from __future__ import annotations

import io
import re

from orderdesk.domain.exceptions import InvalidArgumentError

BORDER = "|"
JUNCTION = "+"
DEFAULT_FILLER = "-"

_PLACEHOLDER = re.compile(r"%[-#0 +]*\d*(?:\.\d+)?s")


class TableFormatter:
    """Collects formatted rows and rules into a text buffer.

    The buffer is either created here or handed in by the caller, who then
    owns it; ``row`` and ``line`` only append to it.
    """

    def __init__(self, *templates: str, buffer: io.StringIO | None = None) -> None:
        self._buffer = buffer if buffer is not None else io.StringIO()
        self._templates = list(templates)
        self._widths: list[int] = []
        self._offsets: list[int] = []

        for template in self._templates:
            placeholders = _PLACEHOLDER.findall(template)
            if len(placeholders) != 1:
                raise InvalidArgumentError(
                    f"column template must contain exactly one placeholder: {template!r}"
                )
            # offset = decoration around the placeholder (borders, padding)
            self._offsets.append(len(template) - len(placeholders[0]))
            self._widths.append(len(template % ""))

    @property
    def widths(self) -> list[int]:
        return list(self._widths)

    def row(self, *cells: str | None) -> TableFormatter:
        """Append one row; a ``None`` cell leaves its column blank.

        Cell text longer than the column is cut to fit.  Columns past the
        last supplied cell are not rendered.
        """
        for i, cell in enumerate(cells[: len(self._templates)]):
            if cell is None:
                self._buffer.write(" " * self._widths[i])
                continue
            text = str(cell)[: max(0, self._widths[i] - self._offsets[i])]
            self._buffer.write(self._templates[i] % text)
        return self._end_row()

    def line(self, *segments: str | None) -> TableFormatter:
        """Append a horizontal rule.

        segment: None  - blank column
                 ""    - column filled with "-"
                 "="   - column filled with the first character given
        Without segments every column is filled with "-".
        """
        if not segments:
            segments = ("",) * len(self._templates)

        for i, segment in enumerate(segments[: len(self._templates)]):
            if segment is None:
                self._buffer.write(" " * self._widths[i])
                continue
            filler = segment[0] if segment else DEFAULT_FILLER
            decoration = self._templates[i] % ""
            self._buffer.write(
                "".join(JUNCTION if ch == BORDER else filler for ch in decoration)
            )
        return self._end_row()

    def get(self) -> str:
        """Return the table text collected so far."""
        return self._buffer.getvalue()

    def _end_row(self) -> TableFormatter:
        self._buffer.write("\n")
        return self
