"""Pure rendering helpers (no display needed)."""

from order_chaos.Board import BLUE, RED, Board
from order_chaos.GameState import GameState
from order_chaos.Player import CHAOS, ORDER
from order_chaos.gui import pygame_view, text_view


def test_cell_from_point():
    origin = (100, 90)
    assert pygame_view.cell_from_point((100, 90), origin, 100, 6) == (0, 0)
    assert pygame_view.cell_from_point((699, 689), origin, 100, 6) == (5, 5)
    assert pygame_view.cell_from_point((250, 390), origin, 100, 6) == (3, 1)
    assert pygame_view.cell_from_point((99, 90), origin, 100, 6) is None
    assert pygame_view.cell_from_point((700, 90), origin, 100, 6) is None


def test_selector_from_point():
    origin = (100, 710)
    assert pygame_view.selector_from_point((110, 720), origin, 60, 20) == BLUE
    assert pygame_view.selector_from_point((190, 720), origin, 60, 20) == RED
    # gap between the two boxes
    assert pygame_view.selector_from_point((170, 720), origin, 60, 20) is None
    assert pygame_view.selector_from_point((110, 700), origin, 60, 20) is None


def test_end_message():
    assert pygame_view.end_message(ORDER) == "ORDER Won!"
    assert pygame_view.end_message(CHAOS) == "CHAOS Won!"
    assert "DRAW" in pygame_view.end_message(None)


def test_board_to_text():
    b = Board(size=3)
    b.place(0, 1, BLUE)
    b.place(2, 2, RED)
    assert text_view.board_to_text(b.rows()) == "\n".join(
        [
            "   0 1 2",
            " 0 . O .",
            " 1 . . .",
            " 2 . . X",
        ]
    )


def test_text_render_shows_turn(capsys):
    state = GameState.new_game()
    state.play((0, 0), RED)
    text_view.render(state)
    out = capsys.readouterr().out
    assert out.splitlines()[1].startswith(" 0 X")
    assert "Chaos to move" in out


def test_last_move_cell_follows_history():
    b = Board()
    assert pygame_view.last_move_cell(b) is None
    b.place(4, 1, BLUE)
    assert pygame_view.last_move_cell(b) == (4, 1)
    b.place(0, 5, RED)
    assert pygame_view.last_move_cell(b) == (0, 5)
