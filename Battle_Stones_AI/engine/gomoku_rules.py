"""Freestyle Gomoku win detection: five or more in a row through the last move."""

from ..Board import Board, EMPTY


def is_win_after_move(board: Board, x: int, y: int, color: int) -> bool:
    """Assumes stone is already placed."""
    if board.get(x, y) != color:
        return False
    return board.has_five_or_more(x, y)


def check_gomoku_win(board: Board, last_move) -> bool:
    if last_move is None:
        return False
    x, y = last_move
    color = board.get(x, y)
    if color == EMPTY:
        return False
    return is_win_after_move(board, x, y, color)


def find_winner(board: Board):
    """Scan the whole board for a finished line; return its color or None."""
    size = board.size
    for index, value in enumerate(board.cells):
        if value != EMPTY and board.has_five_or_more(index % size, index // size):
            return value
    return None
