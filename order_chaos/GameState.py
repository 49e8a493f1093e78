"""Game state: board ownership, move application and turn alternation."""

from order_chaos.Board import Board, BOARD_SIZE
from order_chaos.Player import ORDER, other_role
from order_chaos.engine import win_rules


class GameState:
    def __init__(self, board, turn_player=ORDER, early_detection=False):
        self.board = board
        self.turn_player = turn_player
        self.early_detection = early_detection

    @classmethod
    def new_game(cls, size=BOARD_SIZE, early_detection=False):
        """Empty board, Order to move, no winner."""
        return cls(Board(size), ORDER, early_detection=early_detection)

    def play(self, coordinates, piece):
        """
        Place piece at coordinates and pass the turn.
        Raises OutOfBounds/CellOccupied with board and turn left unchanged.
        """
        row, col = coordinates
        self.board.place(row, col, piece)
        self.turn_player = other_role(self.turn_player)

    @property
    def winner(self):
        # derived from the board on every read so it can never go stale
        return win_rules.winner(self.board, early_detection=self.early_detection)

    @property
    def is_over(self):
        return self.winner is not None

    def rows(self):
        return self.board.rows()
