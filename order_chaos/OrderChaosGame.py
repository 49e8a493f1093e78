"""Game loop and turn management for Order & Chaos."""

import time

from order_chaos.Board import MoveError
from order_chaos.GameState import GameState
from order_chaos.Player import CHAOS, ORDER, ROLE_NAMES
from order_chaos.engine import win_rules
from order_chaos.utils.logger import format_move, log_event


class OrderChaosGame:
    def __init__(self, order_player, chaos_player, logger=log_event, renderer=None, closer=None,
                 early_detection=False, move_delay=0.0, max_rejections=100):
        self.state = GameState.new_game(early_detection=early_detection)
        self.players = {ORDER: order_player, CHAOS: chaos_player}
        self.logger = logger
        self.renderer = renderer
        self.closer = closer
        self.move_delay = move_delay
        self.max_rejections = max_rejections
        self.move_index = 0

    def _next_legal_move(self, player):
        """Ask player until a move is accepted; illegal moves are re-asked, not penalised."""
        rejections = 0
        while True:
            try:
                row, col, piece = player.next_move(self.state)
                self.state.play((row, col), piece)
                return row, col, piece
            except MoveError as exc:
                self.logger(f"Rejected move by {ROLE_NAMES[player.role]}: {exc}")
            except ValueError as exc:
                self.logger(f"Invalid input from {ROLE_NAMES[player.role]}: {exc}")
            rejections += 1
            if rejections >= self.max_rejections:
                raise RuntimeError(
                    f"{ROLE_NAMES[player.role]} made {rejections} rejected moves in a row"
                )

    def play(self):
        """Run a single game. Returns ORDER or CHAOS."""
        game_result = None
        try:
            while game_result is None:
                if self.renderer:
                    self.renderer(self.state)

                role = self.state.turn_player
                row, col, piece = self._next_legal_move(self.players[role])
                self.move_index += 1
                self.logger(format_move(self.move_index, role, row, col, piece))

                game_result = self.state.winner
                if game_result == ORDER:
                    # a new exact five always runs through the piece just placed
                    run = win_rules.exact_five_through(self.state.board, row, col)
                    self.logger(f"Winner: Order (five in a row {run[0]} -> {run[-1]}, completed at ({row}, {col}))")
                elif game_result == CHAOS:
                    if self.state.board.is_full():
                        self.logger("Winner: Chaos (board full)")
                    else:
                        self.logger("Winner: Chaos (no five can be completed)")

                if self.move_delay:
                    time.sleep(self.move_delay)

            if self.renderer:
                self.renderer(self.state)

            return game_result
        finally:
            if self.closer:
                self.closer()
