"""Match event logging for the game loop."""

import datetime
import sys

from order_chaos.Board import PIECE_NAMES
from order_chaos.Player import ROLE_NAMES


def log_event(message, stream=None):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}", file=stream or sys.stdout)


def format_move(move_index, role, row, col, piece):
    return f"Move {move_index}: {ROLE_NAMES[role]} {PIECE_NAMES[piece]} ({row}, {col})"
