"""
Game implementation for Reversi.

Game is the only object a host (GUI, terminal front end, match runner)
talks to. Every call returns a value; nothing raises across this API.
"""
import operator

from .board import BOARD_SIZE, Color, Point
from .moves import can_put
from .turn import GameStatus, TurnController
from ..ai.strategy import DEFAULT_STRENGTH, create_agent, parse_strength


class Game:
    """
    Manages a Reversi game session.
    
    Handles placement requests, turn/pass reporting, and move selection
    for the computer side. The computer plays White when the opponent
    is not human; that only matters to the host's turn-taking, the rules
    are the same either way.
    """
    
    def __init__(self, is_human_opponent=True, strength=DEFAULT_STRENGTH, seed=None):
        """
        Initialize a new Reversi game.
        
        Args:
            is_human_opponent (bool): Whether White is played by a human
            strength: ComputerStrength or label used by decide()
            seed (int, optional): Random seed for the RANDOM strength
        """
        self.is_human_opponent = is_human_opponent
        self.strength = parse_strength(strength)
        self.agent = create_agent(self.strength, seed=seed)
        self.state = TurnController()

    @property
    def board(self):
        return self.state.board

    @property
    def computer_color(self):
        """Color played by the computer, or None in a human-only game."""
        return None if self.is_human_opponent else Color.WHITE

    @property
    def winner(self):
        """
        Get the winner of the game.
        
        Returns:
            Color or None: Winner, None while ongoing or on a draw
        """
        return self.state.winner

    @property
    def result(self):
        """Terminal GameStatus, or None while the game is ongoing."""
        return self.state.result

    @staticmethod
    def _to_point(x, y):
        """Range-check host coordinates. Returns None for anything off-board."""
        try:
            x, y = operator.index(x), operator.index(y)
        except TypeError:
            return None
        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            return None
        return Point(x, y)

    def put(self, x, y):
        """
        Place a disc for the side to move.
        
        Args:
            x (int): Column (0-7, left to right)
            y (int): Row (0-7, top to bottom)
            
        Returns:
            GameStatus: OK, a pass notification, a terminal result, or
            INVALID_MOVE (state unchanged)
        """
        point = self._to_point(x, y)
        if point is None:
            return GameStatus.INVALID_MOVE
        return self.state.play(point)

    def can_put_stone(self, x, y):
        """Check whether the side to move may place at (x, y)."""
        point = self._to_point(x, y)
        if point is None or self.state.terminal:
            return False
        return can_put(self.board, self.state.turn, point)

    def get_can_put_stones(self):
        """
        Get every legal target for the side to move.
        
        Returns:
            list: Points in row-major scan order, empty if none
        """
        return [move.point for move in self.state.legal_moves()]

    def get_board(self):
        """Row-major snapshot of the board: get_board()[y][x]."""
        return self.board.snapshot()

    def get_turn(self):
        """Side to move (the last mover once the game is over)."""
        return self.state.turn

    def is_game_over(self):
        return self.state.terminal

    def is_computer_turn(self):
        """Whether the host should ask decide() for the next move."""
        return not self.state.terminal and self.state.turn == self.computer_color

    def count(self, color):
        """Number of discs of a color on the board."""
        return self.board.count(color)

    def score(self):
        """
        Current disc counts.
        
        Returns:
            dict: {Color.BLACK: n, Color.WHITE: m}
        """
        return {color: self.count(color) for color in (Color.BLACK, Color.WHITE)}

    def decide(self):
        """
        Pick a move for the side to move using the configured strength.
        
        The state is not modified; feed the result back into put().
        
        Returns:
            Point or None: Chosen target, None if the side to move has no
            legal move
        """
        if self.state.terminal:
            return None
        return self.agent.select_action(self.board, self.state.turn)
