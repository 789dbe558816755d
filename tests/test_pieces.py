import numpy as np
import pytest

from blockfall.game import BOARD_WIDTH, Piece, TetrominoType, rotate_clockwise, shape_for


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_four_rotations_restore_grid(kind):
    piece = Piece.spawn(kind)
    grid = piece.grid
    for _ in range(4):
        grid = rotate_clockwise(grid)
    assert np.array_equal(grid, piece.grid)


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_rotation_cell_mapping(kind):
    src = shape_for(kind)
    out = rotate_clockwise(src)
    n = src.shape[0]
    for i in range(n):
        for j in range(n):
            assert out[j, n - 1 - i] == src[i, j]


def test_rotate_clockwise_does_not_mutate_piece():
    piece = Piece.spawn(TetrominoType.T)
    before = piece.grid.copy()
    rotated = piece.rotate_clockwise()
    assert np.array_equal(piece.grid, before)
    assert np.array_equal(rotated, np.array([[0, 1, 0], [0, 1, 1], [0, 1, 0]], dtype=bool))


@pytest.mark.parametrize(
    "kind,x",
    [(TetrominoType.I, 3), (TetrominoType.O, 4), (TetrominoType.T, 3), (TetrominoType.Z, 3)],
)
def test_spawn_origin(kind, x):
    piece = Piece.spawn(kind)
    assert piece.x == x == (BOARD_WIDTH - piece.grid.shape[1]) // 2
    assert piece.y == 0


def test_cells_and_moved():
    piece = Piece.spawn(TetrominoType.O)
    assert piece.cells() == [(4, 0), (5, 0), (4, 1), (5, 1)]
    lower = piece.moved(-1, 2)
    assert (lower.x, lower.y) == (3, 2)
    assert (piece.x, piece.y) == (4, 0)


@pytest.mark.parametrize("shape", [(2, 3), (4,), (1, 4)])
def test_rotate_rejects_non_square_grids(shape):
    with pytest.raises(ValueError):
        rotate_clockwise(np.ones(shape, dtype=bool))
