import pytest

from prglab.matrix import Matrix


def test_matrices_can_be_set_and_resized():
    m1, m2, m3 = Matrix(), Matrix(40), Matrix(20, 40)

    assert m1.row_size == 0
    assert m1.col_size == 0

    assert m2.row_size == 40
    assert m2.col_size == 40

    assert m3.row_size == 20
    assert m3.col_size == 40


def test_new_matrix_is_all_false():
    m = Matrix(3, 4)
    assert all(not cell for row in m for cell in row)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_from_rows_and_indexing():
    m = Matrix.from_rows([[1, 0, 1], [0, 0, 1]])
    assert m.row_size == 2
    assert m.col_size == 3
    assert m[0] == [True, False, True]
    assert m[1][2] is True


def test_from_rows_ragged_rejected():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 0], [1]])


def test_row_is_writable():
    m = Matrix(2)
    m[1][0] = True
    assert m[1] == [True, False]
    assert m[0] == [False, False]


@pytest.mark.parametrize("index", [2, 5, -1])
def test_index_out_of_range(index):
    m = Matrix(2, 3)
    assert m[1] == [False, False, False]
    with pytest.raises(IndexError):
        m[index]


def test_transpose_swaps_shape_and_cells():
    m = Matrix.from_rows([[1, 0, 1], [0, 1, 1]])
    t = m.transpose()
    assert t.row_size == 3
    assert t.col_size == 2
    for r in range(m.row_size):
        for c in range(m.col_size):
            assert t[c][r] == m[r][c]


def test_transpose_twice_is_identity():
    m = Matrix.from_rows([[1, 0], [1, 1], [0, 0]])
    assert m.transpose().transpose() == m


def test_is_square():
    assert Matrix(5).is_square()
    assert not Matrix(2, 3).is_square()


def test_copy_is_independent():
    m = Matrix.from_rows([[0, 1], [1, 0]])
    c = m.copy()
    assert c == m
    c[0][0] = True
    assert m[0][0] is False
    assert c != m


def test_load_values_fills_row_major():
    m = Matrix(2, 2)
    m.load_values(["1", "0", "0", "1"])
    assert m == Matrix.from_rows([[1, 0], [0, 1]])


def test_load_values_too_few():
    m = Matrix(2, 2)
    with pytest.raises(ValueError):
        m.load_values(["1", "0"])


def test_load_values_invalid_token():
    m = Matrix(1, 2)
    with pytest.raises(ValueError):
        m.load_values(["1", "x"])


def test_str_round_trip_through_load_values():
    m = Matrix.from_rows([[1, 0, 1], [0, 1, 0]])
    text = str(m)
    assert text.splitlines() == ["101", "010"]
    other = Matrix(2, 3)
    other.load_values(ch for ch in text if not ch.isspace())
    assert other == m