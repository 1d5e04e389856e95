"""Console front end for the Game of Life."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from typing import TextIO

from prglab.cellular_automaton import CellularAutomaton

MENU = (
    "Game Of Life!\n\n"
    "Menu:\n"
    "\t1 -> \tImport from file\n"
    "\t2 -> \tExport to file\n"
    "\t3 -> \tPrint Cellular Automaton\n"
    "\t4 -> \tNext Life\n"
    "\t5 -> \tRead cell\n"
    "\t6 -> \tChange cell\n"
    "\t7 -> \tRandom start\n"
    "\t0 -> \tExit Game\n"
)


def import_file(path: str) -> CellularAutomaton:
    """Load an automaton from a file written by :func:`export_file`."""
    with open(path, encoding="utf-8") as stream:
        return CellularAutomaton.load(stream)


def export_file(automaton: CellularAutomaton, path: str) -> None:
    """Write the automaton with its dimensions to ``path``."""
    with open(path, "w", encoding="utf-8") as stream:
        automaton.dump(stream)


def _check_position(automaton: CellularAutomaton, row: int, col: int) -> None:
    if not (0 <= row < automaton.rows and 0 <= col < automaton.cols):
        raise IndexError("cell position out of range")


def read_cell(automaton: CellularAutomaton, row: int, col: int) -> bool:
    """Return the cell addressed by ``row`` and ``col`` (stored at ``[col][row]``)."""
    _check_position(automaton, row, col)
    return automaton[col][row]


def toggle_cell(automaton: CellularAutomaton, row: int, col: int) -> bool:
    """Flip the cell addressed by ``row`` and ``col`` and return its new value."""
    _check_position(automaton, row, col)
    automaton[col][row] = not automaton[col][row]
    return automaton[col][row]


def random_start(automaton: CellularAutomaton, rng: random.Random | None = None) -> None:
    """Give every cell a random value."""
    rng = rng or random.Random()
    for row in range(automaton.rows):
        for col in range(automaton.cols):
            automaton[row][col] = rng.randrange(2) == 1


class _Console:
    """Reads single characters and whitespace-separated words from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> bool:
        while not self._buffer.strip():
            line = self._stream.readline()
            if not line:
                return False
            self._buffer += line
        self._buffer = self._buffer.lstrip()
        return True

    def char(self) -> str | None:
        if not self._fill():
            return None
        ch, self._buffer = self._buffer[0], self._buffer[1:]
        return ch

    def word(self) -> str | None:
        if not self._fill():
            return None
        parts = self._buffer.split(maxsplit=1)
        self._buffer = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def integer(self) -> int | None:
        word = self.word()
        return None if word is None else int(word)


def _ask_position(
    console: _Console, out: TextIO, automaton: CellularAutomaton
) -> tuple[int, int] | None:
    while True:
        out.write("Give a row and column value:\n")
        row = console.integer()
        col = console.integer()
        if row is None or col is None:
            return None
        if 0 <= row < automaton.rows and 0 <= col < automaton.cols:
            return row, col


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive Game of Life menu on standard input and output."""
    out = sys.stdout
    console = _Console(sys.stdin)
    automaton = CellularAutomaton()
    try:
        while True:
            out.write(MENU + "\n")
            key = console.char()
            if key is None or key == "0":
                return 0
            if key in "12":
                out.write(f"Enter {'input' if key == '1' else 'output'} file name:\n")
                name = console.word()
                if name is None:
                    return 0
                if key == "1":
                    automaton = import_file(name)
                    out.write(f'Successfully read file "{name}"\n')
                else:
                    export_file(automaton, name)
                    out.write(f'Successfully wrote to file "{name}"\n')
            elif key == "3":
                out.write(f"{automaton}\n")
            elif key == "4":
                automaton.step()
                out.write(f"{automaton}\n")
            elif key in "56":
                position = _ask_position(console, out, automaton)
                if position is None:
                    return 0
                row, col = position
                if key == "5":
                    value = read_cell(automaton, row, col)
                    out.write(f"The value in {row} {col} is:\n{int(value)}\n")
                else:
                    value = toggle_cell(automaton, row, col)
                    out.write(
                        f"Value successfully updated to {int(value)} in {row} {col}\n"
                    )
            elif key == "7":
                random_start(automaton)
                out.write(f"{automaton}\n")
    except Exception as exc:  # noqa: BLE001 - report and signal failure
        out.write(f"{exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())