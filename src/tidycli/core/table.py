"""Aligned-column text table.

:class:`Table` is a sparse, 1-based grid of strings that grows on
demand.  Alongside the cells it tracks, per column, the longest value
ever written so that :meth:`Table.render` can left-justify every cell
to a common width.

Invariants
----------
* Writing cell ``(row, col)`` guarantees rows ``1..row`` exist and that
  row ``row`` has at least ``col`` cells; gaps hold ``""``.
* A column width is the historical maximum and never shrinks, even
  when a longer value is later overwritten by a shorter one.
* Nothing is ever removed.
"""

from __future__ import annotations

import sys
from typing import TextIO

from tidycli.exceptions import InvalidIndexError

CELL_DELIMITER: str = "\t"
"""Appended after every rendered cell, the last one included."""


class Table:
    """Growable grid of strings rendered as tab-delimited aligned text.

    A table is meant for a single writer followed by a single render;
    it does no locking, so embedders sharing one across threads must
    guard it with their own lock.
    """

    def __init__(self) -> None:
        self._rows: list[list[str]] = []
        self._widths: dict[int, int] = {}

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def data(self) -> list[list[str]]:
        """Copy of the rows in storage order."""
        return [list(row) for row in self._rows]

    @property
    def column_widths(self) -> dict[int, int]:
        """Copy of the width map, keyed by zero-based column index."""
        return dict(self._widths)

    def __len__(self) -> int:
        return len(self._rows)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_data(self, row: int, col: int, value: str) -> None:
        """Write *value* at the 1-based position ``(row, col)``.

        Raises
        ------
        InvalidIndexError
            If *row* or *col* is lower than 1.  The table is left
            untouched.
        """
        if row < 1 or col < 1:
            raise InvalidIndexError(
                f"invalid row or column index: ({row}, {col})",
                hint="Rows and columns are numbered from 1.",
            )

        if row > len(self._rows):
            self._rows.extend([] for _ in range(row - len(self._rows)))

        cells = self._rows[row - 1]
        if col > len(cells):
            cells.extend("" for _ in range(col - len(cells)))

        cells[col - 1] = value

        if len(value) > self._widths.get(col - 1, 0):
            self._widths[col - 1] = len(value)

    def add_row(self, row: int, *values: str) -> None:
        """Write *values* into *row*, starting at column 1.

        Stops at the first failing write and propagates its
        :class:`InvalidIndexError`.
        """
        for index, value in enumerate(values):
            self.set_data(row, index + 1, value)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Return the aligned text block, rows separated by newlines."""
        lines = []
        for cells in self._rows:
            lines.append(
                "".join(
                    cell.ljust(self._widths.get(index, 0)) + CELL_DELIMITER
                    for index, cell in enumerate(cells)
                )
            )
        return "\n".join(lines)

    def print_data(self, file: TextIO | None = None) -> None:
        """Print the rendered table; an empty table prints nothing."""
        if not self._rows:
            return
        print(self.render(), file=file or sys.stdout)
