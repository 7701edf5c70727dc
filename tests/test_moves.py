"""
Tests for move generation and execution.
"""
import random

import pytest
from reversi.core.board import Board, Color, Point
from reversi.core.moves import (
    DIRECTIONS, Move, apply_move, can_put, captures_at, legal_moves
)


def make_board(black=(), white=()):
    """Build a board from lists of (x, y) points."""
    board = Board()
    for point in black:
        board.set(point, Color.BLACK)
    for point in white:
        board.set(point, Color.WHITE)
    return board


def test_directions_cover_all_neighbours():
    """Test that the 8 compass directions are distinct and non-zero."""
    assert len(DIRECTIONS) == 8
    assert len(set(DIRECTIONS)) == 8
    assert (0, 0) not in DIRECTIONS


def test_opening_moves_for_black():
    """Test the four legal opening moves in row-major scan order."""
    board = Board.initial()
    moves = legal_moves(board, Color.BLACK)
    
    assert [move.point for move in moves] == [(3, 2), (2, 3), (5, 4), (4, 5)]
    assert moves[0].captures == frozenset({Point(3, 3)})
    assert moves[1].captures == frozenset({Point(3, 3)})
    assert moves[2].captures == frozenset({Point(4, 4)})
    assert moves[3].captures == frozenset({Point(4, 4)})


def test_opening_moves_for_white():
    """Test that White also has four opening moves."""
    board = Board.initial()
    points = [move.point for move in legal_moves(board, Color.WHITE)]
    
    assert points == [(4, 2), (5, 3), (2, 4), (3, 5)]


def test_every_legal_move_captures():
    """Test that legal moves always carry a non-empty capture set."""
    board = Board.initial()
    for color in (Color.BLACK, Color.WHITE):
        for move in legal_moves(board, color):
            assert isinstance(move, Move)
            assert len(move.captures) > 0


def test_captures_union_across_directions():
    """Test that captures from several directions are aggregated."""
    board = make_board(
        black=[(0, 2), (2, 0), (4, 4)],
        white=[(1, 2), (2, 1), (3, 3)],
    )
    
    captured = captures_at(board, Color.BLACK, (2, 2))
    assert captured == frozenset({Point(1, 2), Point(2, 1), Point(3, 3)})


def test_long_run_is_captured():
    """Test that a run of several opponent discs is captured entirely."""
    board = make_board(black=[(0, 0)], white=[(1, 0), (2, 0), (3, 0), (4, 0)])
    
    captured = captures_at(board, Color.BLACK, (5, 0))
    assert captured == frozenset({Point(1, 0), Point(2, 0), Point(3, 0), Point(4, 0)})


def test_run_ending_in_empty_is_not_captured():
    """Test that an opponent run not closed by our disc captures nothing."""
    board = make_board(black=[(0, 0)], white=[(1, 0), (2, 0)])
    
    # (4, 0) leaves an empty gap at (3, 0)
    assert captures_at(board, Color.BLACK, (4, 0)) == frozenset()
    assert not can_put(board, Color.BLACK, (4, 0))


def test_adjacent_own_disc_captures_nothing():
    """Test that an immediate same-color neighbour does not make a move legal."""
    board = make_board(black=[(3, 3)])
    
    assert captures_at(board, Color.BLACK, (4, 3)) == frozenset()
    assert legal_moves(board, Color.BLACK) == []


def test_isolated_cell_is_not_legal():
    """Test that a cell surrounded only by empty cells is not legal."""
    board = Board.initial()
    
    assert not can_put(board, Color.BLACK, (0, 0))
    assert not can_put(board, Color.BLACK, (7, 7))


def test_occupied_cell_is_not_legal():
    """Test that a cell already holding a disc is never legal."""
    board = Board.initial()
    
    assert captures_at(board, Color.BLACK, (3, 3)) == frozenset()
    assert not can_put(board, Color.BLACK, (3, 3))
    assert not can_put(board, Color.BLACK, (4, 3))


def test_scan_does_not_wrap_around_edges():
    """Test that runs stop at the board edge instead of wrapping."""
    # Walking left from (1, 0) passes (0, 0) and would wrap to (7, 0)
    board = make_board(black=[(7, 0)], white=[(0, 0)])
    
    assert not can_put(board, Color.BLACK, (1, 0))
    assert legal_moves(board, Color.BLACK) == []
    
    # Walking up from (0, 1) passes (0, 0) and would wrap to (0, 7)
    board = make_board(black=[(0, 7)], white=[(0, 0)])
    assert legal_moves(board, Color.BLACK) == []


def test_can_put_off_board_is_false():
    """Test that off-board or malformed points are simply not legal."""
    board = Board.initial()
    
    assert not can_put(board, Color.BLACK, (-1, 0))
    assert not can_put(board, Color.BLACK, (8, 3))
    assert not can_put(board, Color.BLACK, (3, 100))
    assert not can_put(board, Color.BLACK, (3.0, 2))
    assert not can_put(board, Color.BLACK, ("3", 2))
    assert not can_put(board, Color.BLACK, (3,))


def test_can_put_matches_legal_moves():
    """Test that can_put agrees with legal_moves on every cell."""
    board = Board.initial()
    for color in (Color.BLACK, Color.WHITE):
        legal = {move.point for move in legal_moves(board, color)}
        for y in range(8):
            for x in range(8):
                assert can_put(board, color, (x, y)) == ((x, y) in legal)


def test_empty_has_no_moves():
    """Test that EMPTY is never a mover."""
    board = Board.initial()
    
    assert legal_moves(board, Color.EMPTY) == []
    assert not can_put(board, Color.EMPTY, (3, 2))


def test_apply_move_places_and_flips():
    """Test that apply_move places the disc and flips every capture."""
    board = Board.initial()
    move = legal_moves(board, Color.BLACK)[0]
    
    result = apply_move(board, Color.BLACK, move)
    
    assert result is board
    assert board.get((3, 2)) == Color.BLACK
    assert board.get((3, 3)) == Color.BLACK
    assert board.count(Color.BLACK) == 4
    assert board.count(Color.WHITE) == 1


def test_apply_move_rejects_empty_mover():
    """Test that EMPTY cannot be applied as a mover."""
    board = Board.initial()
    move = legal_moves(board, Color.BLACK)[0]
    
    with pytest.raises(ValueError):
        apply_move(board, Color.EMPTY, move)
    assert board == Board.initial()


def test_disc_count_changes_on_random_positions():
    """Test disc count deltas for every legal move along random games."""
    rng = random.Random(7)
    
    for _ in range(5):
        board = Board.initial()
        color = Color.BLACK
        for _ in range(60):
            moves = legal_moves(board, color)
            if not moves:
                color = color.opponent
                moves = legal_moves(board, color)
                if not moves:
                    break
                    
            for move in moves:
                trial = apply_move(board.copy(), color, move)
                captured = len(move.captures)
                assert trial.count(color) == board.count(color) + 1 + captured
                assert trial.count(color.opponent) == board.count(color.opponent) - captured
                assert trial.count(Color.EMPTY) == board.count(Color.EMPTY) - 1
                
            apply_move(board, color, rng.choice(moves))
            color = color.opponent
