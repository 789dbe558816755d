from blockfall.game import BlockfallGame, Color, TetrominoType
from blockfall.visualization.human_play import KEY_TO_ACTION
from blockfall.visualization.renderer import PALETTE, Renderer
from blockfall.game import Action


def test_window_size_fits_board_and_panel():
    game = BlockfallGame()
    renderer = Renderer(cell_size=30, margin=20, panel_width=180)
    assert renderer.window_size(game.snapshot()) == (10 * 30 + 60 + 180, 20 * 30 + 40)


def test_grid_surface_colors_cells():
    game = BlockfallGame()
    game.spawn_piece(TetrominoType.O)
    game.grid.grid[19, 0] = int(Color.RED)
    renderer = Renderer(cell_size=10)
    surf = renderer._grid_surface(game.snapshot())
    assert surf.get_size() == (100, 200)
    assert tuple(surf.get_at((1, 1)))[:3] == PALETTE[0]
    assert tuple(surf.get_at((41, 1)))[:3] == PALETTE[int(Color.YELLOW)]
    assert tuple(surf.get_at((1, 191)))[:3] == PALETTE[int(Color.RED)]


def test_window_key_map():
    assert set(KEY_TO_ACTION.values()) == set(Action)
