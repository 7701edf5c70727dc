"""
Move generation and execution for Reversi.

A move is legal when it brackets at least one contiguous run of
opponent discs between the new disc and an existing disc of the
mover's color, in any of the 8 compass directions.
"""
import operator
from typing import FrozenSet, NamedTuple

from .board import Color, Point


DIRECTIONS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


class Move(NamedTuple):
    """A target point plus the discs placing there would flip."""
    point: Point
    captures: FrozenSet[Point]


def _captures_in_direction(board, x, y, color, dx, dy):
    """
    Walk outward from (x, y) collecting opponent discs.
    
    Args:
        board: Board instance
        x, y: Empty cell the disc would be placed on
        color (Color): Mover
        dx, dy: Direction to walk
        
    Returns:
        list: Points flipped in this direction (empty if the run is not
        closed by a disc of the mover's color)
    """
    opponent = -color
    run = []
    cx, cy = x + dx, y + dy
    while board.in_bounds(cx, cy) and board.state[cy, cx] == opponent:
        run.append(Point(cx, cy))
        cx, cy = cx + dx, cy + dy

    # Run must be closed by our own disc, not by an edge or an empty cell
    if run and board.in_bounds(cx, cy) and board.state[cy, cx] == color:
        return run
    return []


def captures_at(board, color, point):
    """
    Compute every disc a placement at point would capture.
    
    Args:
        board: Board instance
        color (Color): Mover
        point: Point or (x, y) tuple
        
    Returns:
        frozenset: Captured points, empty if the placement is not legal
    """
    x, y = point
    if not board.in_bounds(x, y) or board.state[y, x] != Color.EMPTY:
        return frozenset()

    captured = set()
    for dx, dy in DIRECTIONS:
        captured.update(_captures_in_direction(board, x, y, color, dx, dy))
    return frozenset(captured)


def legal_moves(board, color):
    """
    Get all legal moves for a color.
    
    Args:
        board: Board instance
        color (Color): Player to move (BLACK or WHITE)
        
    Returns:
        list: Move tuples in row-major scan order (y outer, x inner)
    """
    color = Color(color)
    if color is Color.EMPTY:
        return []

    moves = []
    for y in range(board.size):
        for x in range(board.size):
            captured = captures_at(board, color, (x, y))
            if captured:
                moves.append(Move(Point(x, y), captured))
    return moves


def can_put(board, color, point):
    """
    Check whether color may place a disc at point.

    Off-board points are simply not legal.
    """
    try:
        x, y = (operator.index(value) for value in point)
        color = Color(color)
    except (TypeError, ValueError):
        return False
    if color is Color.EMPTY or not board.in_bounds(x, y):
        return False
    return bool(captures_at(board, color, (x, y)))


def apply_move(board, color, move):
    """
    Place the mover's disc and flip every captured disc.
    
    Legality is not checked: move must come from legal_moves() for the
    same board and color.
    
    Args:
        board: Board instance (mutated in place)
        color (Color): Mover
        move (Move): Move to apply
        
    Returns:
        Board: The same board, for chaining
    """
    color = Color(color)
    if color is Color.EMPTY:
        raise ValueError("EMPTY cannot make a move")

    board.set(move.point, color)
    for point in move.captures:
        board.set(point, color)
    return board
