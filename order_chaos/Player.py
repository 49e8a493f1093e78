"""Roles and player controllers (human, GUI, uniform-random)."""

import random

from order_chaos.Board import BLUE, RED

# Order moves first; the other role is obtained by negation
ORDER = -1
CHAOS = 1

ROLE_NAMES = {ORDER: "Order", CHAOS: "Chaos"}

PIECE_ALIASES = {"b": BLUE, "blue": BLUE, "r": RED, "red": RED}


def other_role(role):
    return -role


def parse_move(raw):
    """Parse 'row col color' into (row, col, piece)."""
    try:
        row_str, col_str, color_str = raw.split()
        return int(row_str), int(col_str), PIECE_ALIASES[color_str.lower()]
    except (ValueError, KeyError) as exc:
        raise ValueError("Invalid input format; expected 'row col color' (color: b/blue or r/red)") from exc


class Player:
    def __init__(self, role):
        self.role = role

    def next_move(self, state):
        """Return (row, col, piece) for the next move."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, role, input_fn=None):
        super().__init__(role)
        self.input_fn = input_fn or input

    def next_move(self, state):
        raw = self.input_fn(f"{ROLE_NAMES[self.role]}, enter move as 'row col color' (0-indexed, b/r): ")
        return parse_move(raw.strip())


class GuiHumanPlayer(Player):
    def __init__(self, role, view):
        super().__init__(role)
        self.view = view

    def next_move(self, state):
        return self.view.wait_for_move(state)


class RandomPlayer(Player):
    """Picks a uniformly random empty cell and color."""

    def __init__(self, role, seed=None):
        super().__init__(role)
        self.rng = random.Random(seed)

    def next_move(self, state):
        empty = state.board.empty_cells()
        if not empty:
            raise ValueError("No empty cells left")
        row, col = self.rng.choice(empty)
        return row, col, self.rng.choice((BLUE, RED))
