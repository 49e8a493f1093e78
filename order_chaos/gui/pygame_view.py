"""Pygame-based board renderer and input helper."""

import time

from order_chaos.Board import BLUE, EMPTY, RED
from order_chaos.Player import CHAOS, ORDER, ROLE_NAMES

RULES_TEXT = [
    "Welcome to the ORDER & CHAOS electronic simulator.",
    "",
    "RULES:",
    "- Order plays first, then turns alternate.",
    "- Both players control both sets of pieces (blue and red).",
    "  The game starts with the board empty.",
    "- On each turn, a player places a blue or a red piece on any",
    "  open square. Once played, pieces cannot be moved.",
    "- ORDER aims to get exactly five like pieces in a row",
    "  vertically, horizontally, or diagonally.",
    "- CHAOS aims to fill the board without a line of five.",
    "- Six-in-a-row does not qualify as a win.",
    "",
    "Click anywhere to continue.",
]


def cell_from_point(point, origin, tile_size, board_size):
    """Map a pixel position to (row, col) on the grid, or None."""
    px, py = point
    ox, oy = origin
    if px < ox or py < oy:
        return None
    col = int((px - ox) // tile_size)
    row = int((py - oy) // tile_size)
    if 0 <= row < board_size and 0 <= col < board_size:
        return row, col
    return None


def selector_from_point(point, origin, box_size, gap):
    """Map a pixel position to BLUE/RED in the pawn selector, or None."""
    px, py = point
    ox, oy = origin
    if not (oy <= py < oy + box_size):
        return None
    for i, piece in enumerate((BLUE, RED)):
        left = ox + i * (box_size + gap)
        if left <= px < left + box_size:
            return piece
    return None


def last_move_cell(board):
    """(row, col) of the most recent placement, or None on an empty board."""
    if not board.history:
        return None
    row, col, _ = board.history[-1]
    return row, col


def end_message(winner):
    if winner == ORDER:
        return "ORDER Won!"
    if winner == CHAOS:
        return "CHAOS Won!"
    return "I don't know what happened, but it's a DRAW!"


class WindowClosed(Exception):
    """The player closed the pygame window."""


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 40, 40)
    COLOR_TEXT = (230, 230, 230)
    COLOR_GRID = (20, 20, 20)
    COLOR_BLUE = (30, 60, 220)
    COLOR_RED = (210, 20, 20)
    COLOR_EMPTY = (250, 250, 250)
    COLOR_HIGHLIGHT = (255, 25, 217)
    ROLE_COLORS = {ORDER: (204, 170, 0), CHAOS: (51, 153, 0)}

    PANEL_HEIGHT = 80
    SELECTOR_BOX = 60
    SELECTOR_GAP = 20

    def __init__(self, board_size, tile_size=100, window_size=(800, 820)):
        import pygame

        self.board_size = board_size
        self.tile_size = tile_size
        self.window_size = window_size
        self.chosen_piece = BLUE
        self._pygame = pygame

        pygame.init()
        self.screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption("Order & Chaos")

        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 32)

        grid_px = tile_size * board_size
        self.grid_origin = ((window_size[0] - grid_px) // 2, self.PANEL_HEIGHT + 10)
        self.selector_origin = (
            self.grid_origin[0],
            self.grid_origin[1] + grid_px + 20,
        )

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_piece(self, piece, rect):
        pygame = self._pygame
        inset = rect.width * 0.2
        if piece == BLUE:
            pygame.draw.circle(self.screen, self.COLOR_BLUE, rect.center, rect.width / 2 - inset)
        elif piece == RED:
            width = max(3, int(rect.width * 0.08))
            pygame.draw.line(self.screen, self.COLOR_RED, (rect.left + inset, rect.top + inset),
                             (rect.right - inset, rect.bottom - inset), width)
            pygame.draw.line(self.screen, self.COLOR_RED, (rect.left + inset, rect.bottom - inset),
                             (rect.right - inset, rect.top + inset), width)

    def _draw_grid(self, state, highlight=()):
        pygame = self._pygame
        winner = state.winner
        # tiles take the winner's color once the game is decided
        tile_color = self.ROLE_COLORS[winner if winner is not None else state.turn_player]
        gx, gy = self.grid_origin
        for r, row in enumerate(state.rows()):
            for c, piece in enumerate(row):
                rect = pygame.Rect(gx + c * self.tile_size, gy + r * self.tile_size,
                                   self.tile_size, self.tile_size)
                fill = self.COLOR_HIGHLIGHT if (r, c) in highlight else tile_color
                pygame.draw.rect(self.screen, fill, rect)
                inner = rect.inflate(-8, -8)
                if piece == EMPTY:
                    pygame.draw.rect(self.screen, self.COLOR_EMPTY, inner)
                self._draw_piece(piece, inner)
                pygame.draw.rect(self.screen, self.COLOR_GRID, rect, 1)
        self._draw_last_move_marker(last_move_cell(state.board))

    def _draw_last_move_marker(self, cell):
        if cell is None:
            return
        gx, gy = self.grid_origin
        r, c = cell
        # small dot in the corner of the tile
        center = (gx + c * self.tile_size + self.tile_size * 0.15, gy + r * self.tile_size + self.tile_size * 0.15)
        self._pygame.draw.circle(self.screen, self.COLOR_GRID, center, self.tile_size * 0.07)

    def _draw_selector(self):
        pygame = self._pygame
        ox, oy = self.selector_origin
        for i, piece in enumerate((BLUE, RED)):
            rect = pygame.Rect(ox + i * (self.SELECTOR_BOX + self.SELECTOR_GAP), oy,
                               self.SELECTOR_BOX, self.SELECTOR_BOX)
            pygame.draw.rect(self.screen, self.COLOR_EMPTY, rect)
            if piece == self.chosen_piece:
                pygame.draw.rect(self.screen, self.COLOR_HIGHLIGHT, rect, 4)
            self._draw_piece(piece, rect)
        label_x = ox + 2 * (self.SELECTOR_BOX + self.SELECTOR_GAP) + 80
        self._draw_text("Select Pawn", self.font_medium, self.COLOR_TEXT,
                        (label_x, oy + self.SELECTOR_BOX / 2))

    def _draw_info_panel(self, state):
        center = (self.window_size[0] / 2, self.PANEL_HEIGHT / 2)
        winner = state.winner
        if winner is not None:
            self._draw_text(end_message(winner), self.font_large, self.ROLE_COLORS[winner], center)
        else:
            role = state.turn_player
            self._draw_text(f"Current Active Player: {ROLE_NAMES[role]}", self.font_large,
                            self.ROLE_COLORS[role], center)

    def _pump_quit(self):
        if self._pygame.event.get(self._pygame.QUIT):
            raise WindowClosed("Window closed")
        self._pygame.event.pump()

    def render(self, state):
        self._pump_quit()
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_info_panel(state)
        self._draw_grid(state)
        if state.winner is None:
            self._draw_selector()
        self._pygame.display.flip()

    def show_welcome(self):
        """Rules screen; returns on the first click or key press."""
        pygame = self._pygame
        self.screen.fill(self.COLOR_BACKGROUND)
        for i, line in enumerate(RULES_TEXT):
            text_surface = self.font_medium.render(line, True, self.COLOR_TEXT)
            self.screen.blit(text_surface, (40, 40 + i * 36))
        pygame.display.flip()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise WindowClosed("Window closed")
                if event.type in (pygame.MOUSEBUTTONDOWN, pygame.KEYDOWN):
                    return
            pygame.time.delay(10)

    def wait_for_move(self, state):
        """Block until a grid cell is clicked; selector clicks change the chosen color."""
        pygame = self._pygame
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise WindowClosed("Window closed")
                if event.type != pygame.MOUSEBUTTONDOWN:
                    continue
                cell = cell_from_point(event.pos, self.grid_origin, self.tile_size, self.board_size)
                if cell:
                    return cell[0], cell[1], self.chosen_piece
                piece = selector_from_point(event.pos, self.selector_origin,
                                            self.SELECTOR_BOX, self.SELECTOR_GAP)
                if piece is not None:
                    self.chosen_piece = piece
            self.render(state)
            pygame.time.delay(10)

    def show_end(self, state, highlight=(), timeout=None):
        """End screen; returns on click, key press, window close, or after timeout seconds."""
        pygame = self._pygame
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_info_panel(state)
        self._draw_grid(state, highlight=highlight)
        self._draw_text("Click to exit", self.font_medium, self.COLOR_TEXT,
                        (self.window_size[0] / 2, self.selector_origin[1] + self.SELECTOR_BOX / 2))
        pygame.display.flip()
        deadline = time.time() + timeout if timeout is not None else None
        while deadline is None or time.time() < deadline:
            for event in pygame.event.get():
                if event.type in (pygame.QUIT, pygame.MOUSEBUTTONDOWN, pygame.KEYDOWN):
                    return
            pygame.time.delay(10)

    def close(self):
        self._pygame.quit()
