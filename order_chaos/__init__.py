"""order_chaos package exports."""

from .Board import Board, BOARD_SIZE, EMPTY, BLUE, RED, MoveError, OutOfBounds, CellOccupied
from .Player import ORDER, CHAOS, Player, HumanPlayer, GuiHumanPlayer, RandomPlayer
from .GameState import GameState
from .OrderChaosGame import OrderChaosGame

# Subpackages for rule engine, GUI, and helpers
from . import engine, gui, utils

__all__ = [
    "Board",
    "BOARD_SIZE",
    "EMPTY",
    "BLUE",
    "RED",
    "MoveError",
    "OutOfBounds",
    "CellOccupied",
    "ORDER",
    "CHAOS",
    "Player",
    "HumanPlayer",
    "GuiHumanPlayer",
    "RandomPlayer",
    "GameState",
    "OrderChaosGame",
    "engine",
    "gui",
    "utils",
]
