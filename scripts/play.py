#!/usr/bin/env python3
"""
CLI interface for playing Reversi against humans or the computer.
"""
import argparse
import sys
import os
import time

# Add the parent directory to Python path so we can import reversi
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from reversi.core.board import Color
from reversi.core.game import Game
from reversi.core.turn import GameStatus
from reversi.ai.strategy import create_agent, parse_strength


SYMBOLS = {Color.BLACK: 'X', Color.WHITE: 'O', Color.EMPTY: '.'}

STATUS_MESSAGES = {
    GameStatus.BLACK_WIN: "GAME OVER - Black (X) wins!",
    GameStatus.WHITE_WIN: "GAME OVER - White (O) wins!",
    GameStatus.DRAW: "GAME OVER - It's a draw!",
    GameStatus.BLACK_CANT_PUT_STONE: "Black (X) has no legal move. Pass.",
    GameStatus.WHITE_CANT_PUT_STONE: "White (O) has no legal move. Pass.",
    GameStatus.INVALID_MOVE: "Can't put stone here.",
}


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Play Reversi in the terminal')
    parser.add_argument('--mode', type=str, default='pvc',
                        choices=['pvp', 'pvc', 'cvc'],
                        help='pvp: two humans, pvc: human (Black) vs computer, '
                             'cvc: computer vs computer (default: pvc)')
    parser.add_argument('--strength', type=str, default='weighted',
                        help='Computer strength: random, simple or weighted (default: weighted)')
    parser.add_argument('--black-strength', type=str, default='simple',
                        help='Strength of the Black computer in cvc mode (default: simple)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for the random strength')
    parser.add_argument('--hints', action='store_true',
                        help='Mark legal moves on the board')
    parser.add_argument('--delay', type=float, default=0.5,
                        help='Seconds the computer "thinks" before moving (default: 0.5)')
    return parser.parse_args()


def display_board(game, hints=False):
    """Display the current board state in ASCII format."""
    legal = set(game.get_can_put_stones()) if hints else set()
    print("\n   " + " ".join(str(x) for x in range(8)))
    for y, row in enumerate(game.get_board()):
        cells = []
        for x, cell in enumerate(row):
            cells.append('*' if (x, y) in legal else SYMBOLS[cell])
        print(f"{y:2d} " + " ".join(cells))
    score = game.score()
    print(f"Black (X): {score[Color.BLACK]}  White (O): {score[Color.WHITE]}")


def parse_move(move_input):
    """
    Parse move input from user.
    
    Args:
        move_input (str): User input like "2 3" or "2,3" (x y)
        
    Returns:
        tuple: (x, y) or None if the input is malformed
    """
    parts = move_input.replace(',', ' ').split()
    if len(parts) != 2:
        return None
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def get_human_move(game):
    """
    Get move input from the human player.
    
    Returns:
        tuple: (x, y) or None if quit
    """
    while True:
        try:
            move_input = input(f"{game.get_turn()}, enter your move (x y) or 'quit': ").strip()
        except (KeyboardInterrupt, EOFError):
            return None
            
        if move_input.lower() in ['quit', 'exit', 'q']:
            return None
            
        move = parse_move(move_input)
        if move is None:
            print("Invalid input! Please enter: x y (e.g., '2 3')")
            continue
        return move


def get_computer_move(agent, game, delay):
    """Get move from a computer agent."""
    print(f"{game.get_turn()} (computer) is thinking...")
    time.sleep(delay)
    move = agent.select_action(game.board, game.get_turn())
    if move is not None:
        print(f"{game.get_turn()} (computer) plays: {move.x} {move.y}")
    return move


def main():
    """Main game loop."""
    args = parse_args()
    
    print("=" * 40)
    print("              REVERSI")
    print("=" * 40)
    print("Black (X) moves first. Enter moves as: x y")
    print("x grows rightward, y grows downward.")
    print("=" * 40)
    
    game = Game(is_human_opponent=(args.mode == 'pvp'),
                strength=args.strength, seed=args.seed)
    agents = {Color.BLACK: None, Color.WHITE: None}
    if args.mode in ('pvc', 'cvc'):
        agents[Color.WHITE] = game.agent
    if args.mode == 'cvc':
        agents[Color.BLACK] = create_agent(parse_strength(args.black_strength), seed=args.seed)
    
    while not game.is_game_over():
        display_board(game, hints=args.hints)
        agent = agents[game.get_turn()]
        
        if agent is None:
            move = get_human_move(game)
            if move is None:
                print("\nThanks for playing!")
                return
        else:
            move = get_computer_move(agent, game, args.delay)
            if move is None:
                print("Computer could not find a move! Game ending.")
                break
        
        status = game.put(*move)
        if status is not GameStatus.OK:
            print(STATUS_MESSAGES[status])
    
    display_board(game)
    print("=" * 40)


if __name__ == "__main__":
    main()
