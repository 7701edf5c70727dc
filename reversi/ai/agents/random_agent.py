"""
Random agent for Reversi.
"""
import random

from ...core.moves import legal_moves


class RandomAgent:
    """
    An agent that plays random legal moves.
    
    This is the simplest possible agent - it just selects uniformly
    at random from all available legal moves.
    """
    
    def __init__(self, seed=None):
        """
        Initialize the random agent.
        
        Args:
            seed (int, optional): Random seed for reproducible behavior
        """
        self.rng = random.Random(seed)
        
    def select_action(self, board, color):
        """
        Select a random legal move for color.
        
        Args:
            board: Board instance
            color (Color): Side to move
            
        Returns:
            Point: Target of the selected move, or None if no legal moves
        """
        moves = legal_moves(board, color)
        
        if not moves:
            return None
            
        return self.rng.choice(moves).point
