"""Terminal board rendering for non-GUI play."""

from order_chaos.Board import BLUE, EMPTY, RED
from order_chaos.Player import ROLE_NAMES

PIECE_SYMBOLS = {EMPTY: ".", BLUE: "O", RED: "X"}


def board_to_text(rows):
    size = len(rows)
    header = "   " + " ".join(str(c) for c in range(size))
    lines = [header]
    for r, row in enumerate(rows):
        lines.append(f"{r:>2} " + " ".join(PIECE_SYMBOLS[piece] for piece in row))
    return "\n".join(lines)


def render(state):
    print(board_to_text(state.rows()))
    winner = state.winner
    if winner is not None:
        print(f"{ROLE_NAMES[winner].upper()} Won!")
    else:
        print(f"{ROLE_NAMES[state.turn_player]} to move (O = blue, X = red)")
