"""
Computer-vs-computer matches.

Plays complete games between two agents through the public Game API
and aggregates results for comparing strengths.
"""
import time
from typing import Any, Dict, Optional

import numpy as np

from ..core.board import Color
from ..core.game import Game
from ..core.turn import GameStatus


class MatchRunner:
    """
    Manages a single game between two agents.
    
    Any object with select_action(board, color) can play, so the
    built-in agents and host-supplied ones mix freely.
    """
    
    def __init__(self, 
                 black_agent,
                 white_agent,
                 verbose: bool = False):
        """
        Initialize the match.
        
        Args:
            black_agent: Agent playing Black (moves first)
            white_agent: Agent playing White
            verbose: Whether to print game progress
        """
        self.black_agent = black_agent
        self.white_agent = white_agent
        self.verbose = verbose
        self.move_times = []
        self.passes = []

    def agent_for(self, color: Color):
        return self.black_agent if color is Color.BLACK else self.white_agent
        
    def play_game(self) -> Dict[str, Any]:
        """
        Play a complete game and return results.
        
        Returns:
            dict: Game results including outcome, winner, moves, score, etc.
        """
        game = Game()
        move_count = 0
        start_time = time.time()
        
        if self.verbose:
            print("Starting match...")
            print(f"Black: {type(self.black_agent).__name__}")
            print(f"White: {type(self.white_agent).__name__}")
        
        while not game.is_game_over():
            color = game.get_turn()
            agent = self.agent_for(color)
            
            move_start = time.time()
            move = agent.select_action(game.board, color)
            self.move_times.append(time.time() - move_start)
            
            if move is None:
                if self.verbose:
                    print(f"No valid moves available for {color}")
                break
            
            status = game.put(*move)
            if status is GameStatus.INVALID_MOVE:
                if self.verbose:
                    print(f"Invalid move attempted by {color}: {tuple(move)}")
                break
            
            move_count += 1
            if self.verbose:
                print(f"Move {move_count}: {color} plays {tuple(move)}")
            
            if status in (GameStatus.BLACK_CANT_PUT_STONE, GameStatus.WHITE_CANT_PUT_STONE):
                passed = color.opponent
                self.passes.append(passed)
                if self.verbose:
                    print(f"{passed} has no legal move and passes")
        
        duration = time.time() - start_time
        result: Optional[GameStatus] = game.result
        
        results = {
            'outcome': result.value if result is not None else 'aborted',
            'winner': game.winner,
            'moves': move_count,
            'passes': len(self.passes),
            'duration': duration,
            'avg_move_time': float(np.mean(self.move_times)) if self.move_times else 0.0,
            'score': game.score(),
            'final_board': game.board.state.copy(),
            'black_agent': type(self.black_agent).__name__,
            'white_agent': type(self.white_agent).__name__,
        }
        
        if self.verbose:
            print(f"Game finished: {results['outcome']}")
            score = results['score']
            print(f"Score: Black {score[Color.BLACK]} - White {score[Color.WHITE]}")
            print(f"Moves: {move_count}, Passes: {len(self.passes)}, Duration: {duration:.2f}s")
        
        return results


def evaluate_agents(agent1, agent2, num_games=100, swap_colors=True, verbose=False):
    """
    Evaluate two agents by playing multiple games.
    
    Args:
        agent1: First agent (Black in even-numbered games)
        agent2: Second agent
        num_games: Number of games to play
        swap_colors: Whether to swap colors every other game
        verbose: Whether to print progress and a summary
        
    Returns:
        dict: Results summary with win counts and rates
    """
    results = {
        'agent1_wins': 0,
        'agent2_wins': 0,
        'draws': 0,
        'aborted': 0,
        'agent1_as_black_wins': 0,
        'agent1_as_white_wins': 0,
        'games_agent1_black': 0,
        'games_agent1_white': 0,
    }
    
    start_time = time.time()
    
    for i in range(num_games):
        agent1_is_black = not (swap_colors and i % 2 == 1)
        if agent1_is_black:
            match = MatchRunner(agent1, agent2)
            results['games_agent1_black'] += 1
        else:
            match = MatchRunner(agent2, agent1)
            results['games_agent1_white'] += 1
        
        outcome = match.play_game()
        winner = outcome['winner']
        agent1_color = Color.BLACK if agent1_is_black else Color.WHITE
        
        if outcome['outcome'] == 'aborted':
            results['aborted'] += 1
        elif winner is None:
            results['draws'] += 1
        elif winner is agent1_color:
            results['agent1_wins'] += 1
            if agent1_is_black:
                results['agent1_as_black_wins'] += 1
            else:
                results['agent1_as_white_wins'] += 1
        else:
            results['agent2_wins'] += 1
        
        if verbose and (i + 1) % max(1, num_games // 10) == 0:
            print(f"Completed {i + 1}/{num_games} games")
    
    elapsed = time.time() - start_time
    total_games = num_games
    results.update({
        'total_games': total_games,
        'agent1_win_rate': results['agent1_wins'] / total_games * 100 if total_games > 0 else 0,
        'agent2_win_rate': results['agent2_wins'] / total_games * 100 if total_games > 0 else 0,
        'draw_rate': results['draws'] / total_games * 100 if total_games > 0 else 0,
        'elapsed_time': elapsed,
    })
    
    if verbose:
        print(f"\n=== Results after {total_games} games ({elapsed:.1f}s) ===")
        print(f"{type(agent1).__name__}: {results['agent1_wins']} wins ({results['agent1_win_rate']:.1f}%)")
        print(f"{type(agent2).__name__}: {results['agent2_wins']} wins ({results['agent2_win_rate']:.1f}%)")
        print(f"Draws: {results['draws']} ({results['draw_rate']:.1f}%)")
    
    return results
