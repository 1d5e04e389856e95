"""A two-dimensional matrix of boolean cells."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Matrix:
    """A rows x cols grid of booleans, indexed as ``matrix[row][col]``."""

    __slots__ = ("_rows",)

    def __init__(self, rows: int = 0, cols: int | None = None) -> None:
        if cols is None:
            cols = rows
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self._rows: list[list[bool]] = [[False] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[object]]) -> Matrix:
        """Build a matrix from an iterable of rows; every row must have the same length."""
        data = [[bool(value) for value in row] for row in rows]
        if any(len(row) != len(data[0]) for row in data):
            raise ValueError("all rows must have the same length")
        matrix = cls()
        matrix._rows = data
        return matrix

    def __getitem__(self, index: int) -> list[bool]:
        if not 0 <= index < len(self._rows):
            raise IndexError("Out of range")
        return self._rows[index]

    def __iter__(self) -> Iterator[list[bool]]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._rows!r})"

    @property
    def row_size(self) -> int:
        """Number of rows."""
        return len(self._rows)

    @property
    def col_size(self) -> int:
        """Number of columns (0 for a matrix without rows)."""
        return len(self._rows[0]) if self._rows else 0

    def transpose(self) -> Matrix:
        """Return a new matrix with rows and columns swapped."""
        transposed = Matrix(self.col_size, self.row_size)
        transposed._rows = [list(column) for column in zip(*self._rows)]
        return transposed

    def is_square(self) -> bool:
        """True when the matrix has as many rows as columns."""
        return self.row_size == self.col_size

    def copy(self) -> Matrix:
        """Return an independent copy."""
        return Matrix.from_rows(self._rows)

    def load_values(self, tokens: Iterable[object]) -> None:
        """Fill the matrix row by row from ``0``/``1`` tokens, keeping its shape."""
        iterator = iter(tokens)
        for row in self._rows:
            for col in range(len(row)):
                try:
                    token = next(iterator)
                except StopIteration:
                    raise ValueError("not enough values to fill the matrix") from None
                row[col] = _parse_bool(token)

    def __str__(self) -> str:
        return "".join(
            "".join("1" if cell else "0" for cell in row) + "\n" for row in self._rows
        )


def _parse_bool(token: object) -> bool:
    text = str(token).strip()
    if text == "1" or token is True:
        return True
    if text == "0" or token is False:
        return False
    raise ValueError(f"invalid boolean value: {token!r}")