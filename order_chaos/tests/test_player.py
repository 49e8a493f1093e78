"""Human input parsing and the random mover."""

import pytest

from order_chaos.Board import BLUE, EMPTY, RED
from order_chaos.GameState import GameState
from order_chaos.Player import CHAOS, ORDER, HumanPlayer, RandomPlayer, other_role, parse_move


def test_roles_alternate_by_negation():
    assert other_role(ORDER) == CHAOS
    assert other_role(CHAOS) == ORDER


@pytest.mark.parametrize(
    "raw, expected",
    [("1 2 r", (1, 2, RED)), ("0 5 Blue", (0, 5, BLUE)), ("3 3 b", (3, 3, BLUE))],
)
def test_parse_move(raw, expected):
    assert parse_move(raw) == expected


@pytest.mark.parametrize("raw", ["", "1 2", "a b r", "1 2 green", "1 2 r extra"])
def test_parse_move_rejects_bad_input(raw):
    with pytest.raises(ValueError):
        parse_move(raw)


def test_human_player_reads_input():
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return " 4 1 red \n"

    player = HumanPlayer(CHAOS, input_fn=fake_input)
    assert player.next_move(GameState.new_game()) == (4, 1, RED)
    assert prompts[0].startswith("Chaos")


def test_random_player_only_picks_empty_cells():
    state = GameState.new_game()
    player = RandomPlayer(ORDER, seed=7)
    for _ in range(36):
        row, col, piece = player.next_move(state)
        assert state.board.get(row, col) == EMPTY
        assert piece in (BLUE, RED)
        state.play((row, col), piece)
    assert state.board.is_full()
    with pytest.raises(ValueError):
        player.next_move(state)


def test_random_player_is_reproducible_with_seed():
    state = GameState.new_game()
    first, second = RandomPlayer(ORDER, seed=3), RandomPlayer(ORDER, seed=3)
    a = [first.next_move(state) for _ in range(5)]
    b = [second.next_move(state) for _ in range(5)]
    assert a == b


def test_human_player_propagates_closed_input():
    def closed(prompt):
        raise EOFError

    with pytest.raises(EOFError):
        HumanPlayer(ORDER, input_fn=closed).next_move(GameState.new_game())
