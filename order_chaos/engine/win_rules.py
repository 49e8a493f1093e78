"""Win detection for Order & Chaos: exact-five runs and Chaos end conditions."""

import logging

from order_chaos.Board import Board, BLUE, EMPTY, RED
from order_chaos.Player import CHAOS, ORDER

LOGGER = logging.getLogger(__name__)

RUN_LENGTH = 5

# (d_row, d_col): horizontal, vertical, diagonal down-right, diagonal down-left
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


def lines(board: Board) -> list[list[tuple[int, int]]]:
    """Return every line of the board in the four directions as coordinate lists."""
    result = []
    size = board.size
    for dr, dc in DIRECTIONS:
        for r in range(size):
            for c in range(size):
                # a line starts where the previous cell falls off the board
                if board.in_bounds(r - dr, c - dc):
                    continue
                line = []
                cr, cc = r, c
                while board.in_bounds(cr, cc):
                    line.append((cr, cc))
                    cr += dr
                    cc += dc
                result.append(line)
    return result


def find_qualifying_run(board: Board) -> list[tuple[int, int]] | None:
    """
    Return the cells of the first maximal run of exactly five, or None.
    A run of six or more is tested once as a whole and rejected.
    """
    cells = board.cells
    for line in lines(board):
        if len(line) < RUN_LENGTH:
            continue
        run_color = EMPTY
        run_start = 0
        for i, (r, c) in enumerate(line):
            v = cells[r][c]
            if v == run_color:
                continue
            if run_color != EMPTY and i - run_start == RUN_LENGTH:
                return line[run_start:i]
            run_color = v
            run_start = i
        # run closed by the edge of the board
        if run_color != EMPTY and len(line) - run_start == RUN_LENGTH:
            return line[run_start:]
    return None


def has_qualifying_run(board: Board) -> bool:
    return find_qualifying_run(board) is not None


def _extent(board: Board, row: int, col: int, dr: int, dc: int, color: int) -> int:
    """Number of color pieces stepping from (row, col) (exclusive) along (dr, dc)."""
    steps = 0
    r, c = row + dr, col + dc
    while board.in_bounds(r, c) and board.cells[r][c] == color:
        steps += 1
        r, c = r + dr, c + dc
    return steps


def exact_five_through(board: Board, row: int, col: int) -> list[tuple[int, int]] | None:
    """
    Cells of the exact-five run passing through (row, col), or None.
    Raises OutOfBounds for coordinates off the board.
    """
    color = board.get(row, col)
    if color == EMPTY:
        return None
    for dr, dc in DIRECTIONS:
        back = _extent(board, row, col, -dr, -dc, color)
        ahead = _extent(board, row, col, dr, dc, color)
        if back + 1 + ahead == RUN_LENGTH:
            start_r, start_c = row - back * dr, col - back * dc
            return [(start_r + i * dr, start_c + i * dc) for i in range(RUN_LENGTH)]
    return None


def _window_completable(board: Board, line: list[tuple[int, int]], start: int, color: int) -> bool:
    """Can line[start:start+5] still become an exact five of color?"""
    cells = board.cells
    for r, c in line[start:start + RUN_LENGTH]:
        if cells[r][c] not in (color, EMPTY):
            return False
    # flanking cells must not extend the run; an empty flank can take the other color
    for i in (start - 1, start + RUN_LENGTH):
        if 0 <= i < len(line):
            r, c = line[i]
            if cells[r][c] == color:
                return False
    return True


def can_complete_five(board: Board) -> bool:
    """True if some assignment of the empty cells yields an exact-five run."""
    for line in lines(board):
        for start in range(len(line) - RUN_LENGTH + 1):
            for color in (BLUE, RED):
                if _window_completable(board, line, start, color):
                    return True
    return False


def order_can_still_win(board: Board, early_detection: bool = False) -> bool:
    """
    False once the board is full without an exact five. With early_detection,
    also False as soon as no window of five can still be completed.
    """
    if has_qualifying_run(board):
        return True
    if board.is_full():
        return False
    if early_detection and not can_complete_five(board):
        LOGGER.debug("No completable five left after %d moves", board.move_count)
        return False
    return True


def winner(board: Board, early_detection: bool = False) -> int | None:
    """ORDER, CHAOS, or None while the game is still open."""
    if has_qualifying_run(board):
        return ORDER
    if not order_can_still_win(board, early_detection=early_detection):
        return CHAOS
    return None
