"""Visual cryptography on black-and-white pictures stored as text files."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable, Sequence

DEFAULT_SIZE = 360

MENU = (
    "Menu\n\n"
    "\tvisualencrypt encode <source> <result> <key>\n"
    "\tvisualencrypt decode <image_a> <image_b> <result>\n"
    "\tvisualencrypt overlay <image_a> <image_b> <result>\n"
)

_COMMANDS = ("encode", "decode", "overlay")


class Picture:
    """A grid of pixels, indexed as ``picture[row][col]``.

    Pixels are written to files with ``TRUE_SYMBOL`` and ``FALSE_SYMBOL``;
    on reading, ``1`` and ``A`` count as set pixels, anything else as unset.
    """

    TRUE_SYMBOL = "1"
    FALSE_SYMBOL = "0"

    def __init__(self, width: int = DEFAULT_SIZE, height: int = DEFAULT_SIZE) -> None:
        if width < 0 or height < 0:
            raise ValueError("picture dimensions must not be negative")
        self._width = width
        self._height = height
        self._rows: list[list[bool]] = [[False] * width for _ in range(height)]

    def __getitem__(self, row: int) -> list[bool]:
        if not 0 <= row < len(self._rows):
            raise IndexError("Out of range")
        return self._rows[row]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Picture):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._width}, {self._height})"

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    def _set_rows(self, rows: list[list[bool]]) -> None:
        self._rows = rows
        self._height = len(rows)
        self._width = len(rows[0]) if rows else 0

    def import_file(self, path: str) -> None:
        """Replace the picture with the one stored in ``path``.

        Every line is split at single spaces; each piece becomes one row.
        """
        with open(path, encoding="utf-8") as stream:
            rows = list(_parse_rows(stream))
        if not rows:
            raise ValueError("error: image is empty.")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("error: image is broken.")
        self._set_rows(rows)

    def to_text(self) -> str:
        """Return the picture as text, one line per row."""
        return "".join(
            "".join(self.TRUE_SYMBOL if cell else self.FALSE_SYMBOL for cell in row)
            + "\n"
            for row in self._rows
        )

    def export_file(self, path: str) -> None:
        """Write the picture to ``path`` in the format of :meth:`to_text`."""
        with open(path, "w", encoding="utf-8") as stream:
            stream.write(self.to_text())

    def random_image(
        self, width: int, height: int, rng: random.Random | None = None
    ) -> None:
        """Replace the picture with ``height`` rows of ``width`` random pixels."""
        if width < 0 or height < 0:
            raise ValueError("picture dimensions must not be negative")
        rng = rng or random.Random()
        self._rows = [[rng.randrange(2) == 1 for _ in range(width)] for _ in range(height)]
        self._width = width
        self._height = height

    def _combine(self, image: Picture, key: Picture, action: str) -> None:
        if image.width != key.width or image.height != key.height:
            raise ValueError(
                f"Dimensions error: The dimensions of the matrices to {action} don't match."
            )
        self._rows = [
            [a != b for a, b in zip(image_row, key_row)]
            for image_row, key_row in zip(image._rows, key._rows)
        ]
        self._width = image.width
        self._height = image.height

    def encode(self, image: Picture, key: Picture) -> None:
        """Set every pixel to the exclusive or of ``image`` and ``key``."""
        self._combine(image, key, "encode")

    def decode(self, image: Picture, key: Picture) -> None:
        """Recover a picture from an encoded ``image`` and its ``key``."""
        self._combine(image, key, "decode")


class PlainPicture(Picture):
    """A plain picture, stored with ``1`` and ``0``."""


class CipherPicture(Picture):
    """An encrypted picture or key, stored with ``A`` and ``B``."""

    TRUE_SYMBOL = "A"
    FALSE_SYMBOL = "B"


def _parse_rows(lines: Iterable[str]) -> Iterable[list[bool]]:
    for line in lines:
        pieces = line.rstrip("\n").split(" ")
        if pieces[-1] == "":
            pieces.pop()
        for piece in pieces:
            yield [ch in "1A" for ch in piece if not ch.isspace()]


def encode_files(source: str, result: str, key: str) -> None:
    """Encrypt the plain picture ``source`` with ``key`` and write it to ``result``."""
    plain = PlainPicture()
    plain.import_file(source)
    key_picture = CipherPicture()
    key_picture.import_file(key)
    encoded = CipherPicture(plain.width, plain.height)
    encoded.encode(plain, key_picture)
    encoded.export_file(result)


def decode_files(image: str, key: str, result: str) -> None:
    """Decrypt the picture ``image`` with ``key`` and write the plain picture to ``result``."""
    encoded = CipherPicture()
    encoded.import_file(image)
    key_picture = CipherPicture()
    key_picture.import_file(key)
    decoded = PlainPicture()
    decoded.decode(encoded, key_picture)
    decoded.export_file(result)


def overlay_files(image: str, key: str, result: str) -> None:
    """Overlay the pictures ``image`` and ``key`` and write the result to ``result``."""
    plain = PlainPicture()
    plain.import_file(image)
    other = CipherPicture()
    other.import_file(key)
    merged = CipherPicture(plain.width, plain.height)
    merged.encode(plain, other)
    merged.export_file(result)


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``encode``, ``decode`` or ``overlay`` on three file names."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4 or args[1] in _COMMANDS:
        print(MENU)
        return 0
    command, first, second, third = args
    actions = {"e": encode_files, "d": decode_files, "o": overlay_files}
    action = actions.get(command[:1])
    if action is None:
        return 0
    try:
        action(first, second, third)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())