"""Random digit matrix and its copy into a one-dimensional array, with a console menu."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterator, Sequence

SIZE = 30

MENU = (
    "Menu:\n\n"
    "\t1 -> Create random two dimensional Array\n"
    "\t2 -> Create long one dimensional Array\n"
    "\t3 -> Save to long one dimensional Array\n"
    "\t4 -> Print result\n"
    "\t0 -> Exit\n"
)


def random_matrix(size: int = SIZE, rng: random.Random | None = None) -> list[list[int]]:
    """Return a size x size matrix of random digits 0..9."""
    rng = rng or random.Random()
    return [[rng.randrange(10) for _ in range(size)] for _ in range(size)]


def flatten(data: Sequence[Sequence[int]], size: int = SIZE) -> list[int]:
    """Copy ``data`` into a flat array of ``size * size`` entries.

    Entry ``row + col`` receives ``data[col][row]``; later writes overwrite
    earlier ones, so only the first ``2 * size - 1`` entries are filled.
    """
    flat = [0] * (size * size)
    for row in range(size):
        for col in range(size):
            flat[row + col] = data[col][row]
    return flat


def format_flat(data: Sequence[int], size: int = SIZE) -> str:
    """Render the flat array as ``size`` lines, line ``row`` holding entries ``row .. row + size - 1``."""
    return "".join(
        "".join(str(data[row + col]) for col in range(size)) + "\n"
        for row in range(size)
    )


def _menu_choices(stream) -> Iterator[str]:
    for line in stream:
        yield from (ch for ch in line if not ch.isspace())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    matrix = [[0] * SIZE for _ in range(SIZE)]
    flat = [0] * (SIZE * SIZE)
    out = sys.stdout
    choices = _menu_choices(sys.stdin)
    try:
        while True:
            out.write(MENU + "\n")
            choice = next(choices, None)
            if choice is None or choice == "0":
                return 0
            if choice == "1":
                matrix = random_matrix(SIZE)
            elif choice == "3":
                flat = flatten(matrix, SIZE)
            elif choice == "4":
                out.write(format_flat(flat, SIZE))
    except Exception as exc:  # noqa: BLE001 - report and signal failure
        out.write(f"{exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())