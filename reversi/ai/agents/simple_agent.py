"""
Greedy agent for Reversi.
"""
from ...core.moves import legal_moves


class SimpleAgent:
    """
    An agent that maximises the number of discs flipped this turn.
    
    Ties go to the first move in row-major scan order, so the same
    position always produces the same choice.
    """

    def score_move(self, move):
        """Score a move by the number of discs it captures."""
        return len(move.captures)

    def select_action(self, board, color):
        """
        Select the highest scoring legal move for color.
        
        Args:
            board: Board instance
            color (Color): Side to move
            
        Returns:
            Point: Target of the selected move, or None if no legal moves
        """
        best_move = None
        best_score = float('-inf')

        # legal_moves is already in scan order; strict > keeps the first tie
        for move in legal_moves(board, color):
            score = self.score_move(move)
            if score > best_score:
                best_score = score
                best_move = move

        return best_move.point if best_move is not None else None
