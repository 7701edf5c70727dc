"""
Position-weighted agent for Reversi.
"""
import numpy as np

from .simple_agent import SimpleAgent


# Classic Othello table: corners favoured, cells touching a corner penalised.
POSITION_WEIGHTS = np.array([
    [120, -20,  20,   5,   5,  20, -20, 120],
    [-20, -40,  -5,  -5,  -5,  -5, -40, -20],
    [ 20,  -5,  15,   3,   3,  15,  -5,  20],
    [  5,  -5,   3,   3,   3,   3,  -5,   5],
    [  5,  -5,   3,   3,   3,   3,  -5,   5],
    [ 20,  -5,  15,   3,   3,  15,  -5,  20],
    [-20, -40,  -5,  -5,  -5,  -5, -40, -20],
    [120, -20,  20,   5,   5,  20, -20, 120],
], dtype=np.int16)


def position_weight(point):
    """Weight of a board cell, indexed like the board state."""
    x, y = point
    return int(POSITION_WEIGHTS[y, x])


class WeightedAgent(SimpleAgent):
    """
    Greedy agent that also values where the disc lands.
    
    Score = discs captured + position_weight(target). Tie-breaking is
    inherited from SimpleAgent (first in scan order).
    """

    def score_move(self, move):
        return len(move.captures) + position_weight(move.point)
