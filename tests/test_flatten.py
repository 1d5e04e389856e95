import io
import random

import pytest

from prglab.flatten import MENU, flatten, format_flat, main, random_matrix


def test_random_matrix_shape_and_range():
    m = random_matrix(5, random.Random(1))
    assert len(m) == 5
    assert all(len(row) == 5 for row in m)
    assert all(0 <= v <= 9 for row in m for v in row)


def test_random_matrix_reproducible_with_seed():
    first = random_matrix(4, random.Random(7))
    second = random_matrix(4, random.Random(7))
    assert len(first) == 4
    assert all(len(row) == 4 for row in first)
    assert all(0 <= v <= 9 for row in first for v in row)
    assert first == second


def test_flatten_small_example():
    assert flatten([[1, 2], [3, 4]], 2) == [1, 2, 4, 0]


def test_flatten_length_and_unfilled_tail():
    size = 4
    data = random_matrix(size, random.Random(3))
    flat = flatten(data, size)
    assert len(flat) == size * size
    assert flat[2 * size - 1:] == [0] * (size * size - 2 * size + 1)
    assert flat[0] == data[0][0]
    assert flat[2 * size - 2] == data[size - 1][size - 1]


def test_format_flat_layout():
    text = format_flat([1, 2, 4, 0], 2)
    assert text == "12\n24\n"


def test_format_flat_lines_are_sliding_windows():
    size = 3
    flat = flatten(random_matrix(size, random.Random(11)), size)
    lines = format_flat(flat, size).splitlines()
    assert len(lines) == size
    for row, line in enumerate(lines):
        assert line == "".join(str(v) for v in flat[row:row + size])


def test_main_generates_and_prints(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n3\n4\n0\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert out.count(MENU) == 4
    digit_lines = [line for line in out.splitlines() if line.isdigit()]
    assert len(digit_lines) == 30
    assert all(len(line) == 30 for line in digit_lines)


def test_main_exits_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 9"))
    assert main() == 0
    assert capsys.readouterr().out.count(MENU) == 3


@pytest.mark.parametrize("size", [1, 2, 5])
def test_flatten_first_entry_is_corner(size):
    data = random_matrix(size, random.Random(size))
    assert flatten(data, size)[0] == data[0][0]