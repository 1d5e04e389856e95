"""A toroidal cellular automaton following the Game of Life rules."""

from __future__ import annotations

import time
from collections.abc import Iterable
from typing import TextIO

from prglab.matrix import Matrix

DEFAULT_SIZE = 30


class CellularAutomaton:
    """A grid of living (``True``) and dead (``False``) cells on a torus.

    ``timer`` is the pause in milliseconds taken after every step.
    """

    def __init__(
        self, rows: int = DEFAULT_SIZE, cols: int | None = None, timer: int = 1
    ) -> None:
        if cols is None:
            cols = rows
        self._current = Matrix(rows, cols)
        self._next = Matrix(rows, cols)
        self.timer = timer

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[object]]) -> CellularAutomaton:
        """Build an automaton whose cells are taken from ``rows``."""
        automaton = cls(0, 0)
        automaton._current = Matrix.from_rows(rows)
        automaton._next = Matrix(automaton.rows, automaton.cols)
        return automaton

    def __getitem__(self, index: int) -> list[bool]:
        return self._current[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellularAutomaton):
            return NotImplemented
        return self._current == other._current

    def __repr__(self) -> str:
        return f"CellularAutomaton.from_rows({[list(row) for row in self._current]!r})"

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._current.row_size

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._current.col_size

    @property
    def matrix(self) -> Matrix:
        """A copy of the current cell values."""
        return self._current.copy()

    def update_cell(self, row: int, col: int) -> None:
        """Compute the next state of one cell from its eight wrapped neighbours."""
        rows, cols = self.rows, self.cols
        living = sum(
            self._current[(row + dr) % rows][(col + dc) % cols]
            for dr in (-1, 0, 1)
            for dc in (-1, 0, 1)
            if dr or dc
        )
        if living == 2:
            value = self._current[row][col]
        else:
            value = living == 3
        self._next[row][col] = value

    def step(self) -> CellularAutomaton:
        """Advance one generation, then pause for ``timer`` milliseconds."""
        for row in range(self.rows):
            for col in range(self.cols):
                self.update_cell(row, col)
        self._current = self._next
        self._next = Matrix(self.rows, self.cols)
        time.sleep(max(self.timer, 0) / 1000)
        return self

    def advance(self, phases: int) -> CellularAutomaton:
        """Advance ``phases`` generations; non-positive counts do nothing."""
        for _ in range(max(phases, 0)):
            self.step()
        return self

    def read_cells(self, text: str) -> None:
        """Fill the grid, keeping its shape, from ``*``/other characters in ``text``."""
        symbols = (ch for ch in text if not ch.isspace())
        for row in self._current:
            for col in range(len(row)):
                symbol = next(symbols, None)
                if symbol is None:
                    raise ValueError("not enough cells in input")
                row[col] = symbol == "*"

    def __str__(self) -> str:
        return "".join(
            "".join("*" if cell else "o" for cell in row) + "\n"
            for row in self._current
        )

    def dump(self, stream: TextIO) -> None:
        """Write the dimensions on two lines, followed by the grid."""
        stream.write(f"{self.rows}\n{self.cols}\n")
        stream.write(str(self))

    @classmethod
    def load(cls, stream: TextIO) -> CellularAutomaton:
        """Read an automaton in the format written by :meth:`dump`."""
        parts = stream.read().split(maxsplit=2)
        if len(parts) < 2:
            raise ValueError("missing dimensions")
        try:
            rows, cols = int(parts[0]), int(parts[1])
        except ValueError:
            raise ValueError("invalid dimensions") from None
        if rows < 0 or cols < 0:
            raise ValueError("invalid dimensions")
        automaton = cls(rows, cols)
        automaton.read_cells(parts[2] if len(parts) > 2 else "")
        return automaton