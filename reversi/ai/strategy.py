"""
Computer strength selection.

Maps a ComputerStrength to the agent implementing it and normalises
free-form labels (e.g. a UI selector value) into a strength.
"""
from enum import Enum

from .agents.random_agent import RandomAgent
from .agents.simple_agent import SimpleAgent
from .agents.weighted_agent import WeightedAgent


class ComputerStrength(Enum):
    RANDOM = 'random'
    SIMPLE = 'simple'
    WEIGHTED = 'weighted'


DEFAULT_STRENGTH = ComputerStrength.WEIGHTED

# Fallback for labels that name no known strength
FALLBACK_STRENGTH = ComputerStrength.RANDOM


def parse_strength(label):
    """
    Convert a free-form label into a ComputerStrength.
    
    Matching is case-insensitive and ignores surrounding whitespace.
    Unrecognised or missing labels map to RANDOM instead of failing.
    
    Args:
        label: String such as "weighted", or a ComputerStrength
        
    Returns:
        ComputerStrength: Parsed strength
    """
    if isinstance(label, ComputerStrength):
        return label
    if not isinstance(label, str):
        return FALLBACK_STRENGTH
    try:
        return ComputerStrength(label.strip().lower())
    except ValueError:
        return FALLBACK_STRENGTH


def create_agent(strength, seed=None):
    """
    Build the agent for a strength.
    
    Args:
        strength (ComputerStrength): Strength to build
        seed (int, optional): Random seed, used by RANDOM only
        
    Returns:
        Agent instance exposing select_action(board, color)
    """
    if strength is ComputerStrength.RANDOM:
        return RandomAgent(seed=seed)
    elif strength is ComputerStrength.SIMPLE:
        return SimpleAgent()
    elif strength is ComputerStrength.WEIGHTED:
        return WeightedAgent()
    raise ValueError(f"Unknown computer strength: {strength!r}")
