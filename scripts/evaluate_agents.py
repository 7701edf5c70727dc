#!/usr/bin/env python3
"""
Simple evaluation script for testing computer strengths against each other.
"""
import argparse
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from reversi.ai.match import evaluate_agents
from reversi.ai.strategy import ComputerStrength, create_agent, parse_strength


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Evaluate Reversi computer strengths')
    choices = [strength.value for strength in ComputerStrength]
    parser.add_argument('agent1', type=str, choices=choices,
                        help='First strength')
    parser.add_argument('agent2', type=str, choices=choices,
                        help='Second strength')
    parser.add_argument('--games', type=int, default=100,
                        help='Number of games to play (default: 100)')
    parser.add_argument('--no-swap', action='store_true',
                        help='Keep agent1 as Black in every game')
    parser.add_argument('--seed', type=int, default=42,
                        help='Random seed for random strengths (default: 42)')
    return parser.parse_args()


def main():
    """Main evaluation function."""
    args = parse_args()
    
    print("Reversi Strength Evaluation")
    print("===========================")
    print()
    
    agent1 = create_agent(parse_strength(args.agent1), seed=args.seed)
    agent2 = create_agent(parse_strength(args.agent2), seed=args.seed + 1)
    
    return evaluate_agents(agent1, agent2,
                           num_games=args.games,
                           swap_colors=not args.no_swap,
                           verbose=True)


if __name__ == "__main__":
    main()
