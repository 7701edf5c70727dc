"""
Board implementation for Reversi.
"""
from enum import IntEnum
from typing import NamedTuple

import numpy as np


BOARD_SIZE = 8


class Color(IntEnum):
    """
    Cell occupancy / player color.

    Values match the board state encoding so the opponent of a player
    is simply its negation.
    """
    EMPTY = 0
    BLACK = 1
    WHITE = -1

    @property
    def opponent(self):
        """The other player. EMPTY has no opponent."""
        if self is Color.EMPTY:
            raise ValueError("EMPTY is not a player")
        return Color(-self.value)

    def __str__(self):
        return self.name.capitalize()

    def __format__(self, spec):
        return format(str(self), spec)


class Point(NamedTuple):
    """A board coordinate: x grows rightward, y grows downward."""
    x: int
    y: int


class OutOfRangeError(IndexError):
    """Raised when a coordinate lies outside the board."""

    def __init__(self, x, y):
        super().__init__(f"({x}, {y}) is outside the {BOARD_SIZE}x{BOARD_SIZE} board")
        self.x = x
        self.y = y


class Board:
    """
    Represents an 8x8 Reversi board.
    
    Board state representation (indexed as state[y, x]):
    - 0: empty cell
    - 1: black disc
    - -1: white disc
    """
    
    def __init__(self):
        """Initialize an empty 8x8 board."""
        self.size = BOARD_SIZE
        self.state = np.zeros((self.size, self.size), dtype=np.int8)

    @classmethod
    def initial(cls):
        """
        Create a board holding the standard opening position.

        The two center-left cells and the two center-right cells hold
        opposite colors, diagonally opposed pairs sharing a color.

        Returns:
            Board: New board with 4 discs placed
        """
        board = cls()
        mid = board.size // 2
        board.state[mid - 1, mid - 1] = Color.WHITE
        board.state[mid, mid] = Color.WHITE
        board.state[mid - 1, mid] = Color.BLACK
        board.state[mid, mid - 1] = Color.BLACK
        return board

    def in_bounds(self, x, y):
        """Check whether (x, y) lies on the board."""
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, point):
        """
        Read the color at a point.
        
        Args:
            point: Point or (x, y) tuple
            
        Returns:
            Color: Occupancy of the cell
            
        Raises:
            OutOfRangeError: If the point is off the board
        """
        x, y = point
        if not self.in_bounds(x, y):
            raise OutOfRangeError(x, y)
        return Color(int(self.state[y, x]))

    def set(self, point, color):
        """
        Write a color at a point. No game rules are checked here.
        
        Args:
            point: Point or (x, y) tuple
            color (Color): New occupancy of the cell
            
        Raises:
            OutOfRangeError: If the point is off the board
            ValueError: If color is not a Color value
        """
        x, y = point
        if not self.in_bounds(x, y):
            raise OutOfRangeError(x, y)
        self.state[y, x] = Color(color)

    def count(self, color):
        """Number of cells holding the given color."""
        return int(np.count_nonzero(self.state == Color(color)))

    def snapshot(self):
        """
        Export the board for read-only use.
        
        Returns:
            list: Rows of Color values, snapshot()[y][x]
        """
        return [[Color(int(cell)) for cell in row] for row in self.state]

    def copy(self):
        """Return an independent copy of this board."""
        board = Board()
        board.state = self.state.copy()
        return board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.state, other.state)

    def __repr__(self):
        symbols = {Color.EMPTY: '.', Color.BLACK: 'X', Color.WHITE: 'O'}
        rows = [''.join(symbols[cell] for cell in row) for row in self.snapshot()]
        return 'Board(\n  ' + '\n  '.join(rows) + '\n)'
