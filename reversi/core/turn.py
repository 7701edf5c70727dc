"""
Turn management for Reversi.
"""
from enum import Enum

from .board import Board, Color
from .moves import apply_move, legal_moves


class GameStatus(Enum):
    """Result of a placement request, reported to the host."""
    OK = 'ok'
    INVALID_MOVE = 'invalid_move'
    BLACK_WIN = 'black_win'
    WHITE_WIN = 'white_win'
    DRAW = 'draw'
    BLACK_CANT_PUT_STONE = 'black_cant_put_stone'
    WHITE_CANT_PUT_STONE = 'white_cant_put_stone'

    @classmethod
    def cant_put_stone(cls, color):
        """Pass notification for the color that has to pass."""
        if color is Color.BLACK:
            return cls.BLACK_CANT_PUT_STONE
        return cls.WHITE_CANT_PUT_STONE

    @property
    def is_terminal(self):
        return self in (GameStatus.BLACK_WIN, GameStatus.WHITE_WIN, GameStatus.DRAW)


class TurnController:
    """
    Owns the game state and drives the turn state machine.
    
    States are Turn(BLACK), Turn(WHITE) and Terminal. After every
    placement the opponent's moves are checked first; if the opponent
    must pass, the mover's moves are checked in the same transition so
    a position where nobody can move is never left open.
    """
    
    def __init__(self, board=None, turn=Color.BLACK):
        """
        Initialize a new game state.
        
        Args:
            board (Board, optional): Starting position (default: standard opening)
            turn (Color): Side to move (default: BLACK)
        """
        self.board = board if board is not None else Board.initial()
        self.turn = Color(turn)
        if self.turn is Color.EMPTY:
            raise ValueError("turn must be BLACK or WHITE")
        self.terminal = False
        self._result = None

    @property
    def result(self):
        """
        Final status of the game.
        
        Returns:
            GameStatus or None: BLACK_WIN, WHITE_WIN or DRAW once terminal
        """
        return self._result

    @property
    def winner(self):
        """
        Get the winner of the game.
        
        Returns:
            Color or None: Winning color, None while ongoing or on a draw
        """
        if self._result is GameStatus.BLACK_WIN:
            return Color.BLACK
        if self._result is GameStatus.WHITE_WIN:
            return Color.WHITE
        return None

    def legal_moves(self):
        """Legal moves for the side to move (none once terminal)."""
        if self.terminal:
            return []
        return legal_moves(self.board, self.turn)

    def find_move(self, point):
        """Return the legal Move targeting point, or None."""
        for move in self.legal_moves():
            if move.point == point:
                return move
        return None

    def play(self, point):
        """
        Make a move for the side to move.
        
        Args:
            point: Point or (x, y) tuple, already range-checked
            
        Returns:
            GameStatus: Outcome of the placement; INVALID_MOVE leaves the
            state untouched
        """
        # Can't make moves once the game is over
        if self.terminal:
            return GameStatus.INVALID_MOVE

        move = self.find_move(point)
        if move is None:
            return GameStatus.INVALID_MOVE

        mover = self.turn
        opponent = mover.opponent
        apply_move(self.board, mover, move)
        self.turn = opponent

        if legal_moves(self.board, opponent):
            return GameStatus.OK

        # Opponent must pass; the turn reverts to the mover if they can still play
        if legal_moves(self.board, mover):
            self.turn = mover
            return GameStatus.cant_put_stone(opponent)

        # Terminal: the last mover stays the reported turn
        self.turn = mover
        return self._finish()

    def _finish(self):
        """Neither side can move: decide the game by disc count."""
        self.terminal = True
        black = self.board.count(Color.BLACK)
        white = self.board.count(Color.WHITE)
        if black > white:
            self._result = GameStatus.BLACK_WIN
        elif white > black:
            self._result = GameStatus.WHITE_WIN
        else:
            self._result = GameStatus.DRAW
        return self._result
