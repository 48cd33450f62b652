"""Alpha-beta minimax search for the Ataxx AI.

Red is always the maximizing side and Blue the minimizing side: scores are
red pieces minus blue pieces, with +/-WINNING_VALUE for decided games.
"""
import logging
from typing import List, Optional, Tuple

import numpy as np

from .board import MOVE_DELTAS, Board
from .constants import DEFAULT_MINIMAX_DEPTH, INFTY, WINNING_VALUE
from .move import LOSS_MOVE, PASS_MOVE, WIN_MOVE, Move
from .piece import PieceColor

logger = logging.getLogger(__name__)

SearchResult = Tuple[float, Optional[Move]]


def potential_moves(board: Board) -> List[Move]:
    """Return all legal moves for the player to move on BOARD.

    Sources are scanned from row 7 down to row 1, column a to g; for each
    source the 24 squares within two steps are tried in a fixed order.
    """
    owned = board.squares_of(board.whose_move())
    if owned.size == 0:
        return []
    targets = owned[:, None] + MOVE_DELTAS
    empty = board.contents(targets) == PieceColor.EMPTY

    result = []
    for i, j in np.argwhere(empty):
        candidate = Move.from_indices(int(owned[i]), int(targets[i, j]))
        if board.legal_move(candidate):
            result.append(candidate)
    return result


def static_score(board: Board, move: Optional[Move] = None) -> int:
    """Evaluates BOARD: E(p) = Nred - Nblue, or +/-WINNING_VALUE when MOVE is
    the win/loss sentinel."""
    if move is not None and move.is_infty_move():
        return WINNING_VALUE
    if move is not None and move.is_neg_infty_move():
        return -WINNING_VALUE
    return board.red_pieces() - board.blue_pieces()


def terminal_outcome(board: Board) -> Move:
    """Return the sentinel describing a finished game on BOARD."""
    if board.red_pieces() > board.blue_pieces():
        return WIN_MOVE
    return LOSS_MOVE


def max_value(board: Board, depth: int, alpha: float, beta: float) -> SearchResult:
    """Maximizing player (Red) function for minimax algorithm.

    Arguments:
        board: Board to search; moves are made and undone in place
        depth: Remaining search depth in plies
        alpha: Best score Red is already assured of
        beta: Best score Blue is already assured of

    Returns:
        (score, move): the value of the position and the first move that
        reaches it (None at the search horizon).
    """
    if board.game_over():
        outcome = terminal_outcome(board)
        return static_score(board, outcome), outcome
    if depth == 0:
        return static_score(board), None

    moves = potential_moves(board)
    if not moves:
        board.pass_move()
        score, _ = min_value(board, depth - 1, alpha, beta)
        board.undo()
        return score, PASS_MOVE

    best_score = -INFTY
    best_move = None
    for move in moves:
        board.make_move(move)
        score, _ = min_value(board, depth - 1, alpha, beta)
        board.undo()

        if best_move is None or score > best_score:
            best_score = score
            best_move = move

        alpha = max(alpha, best_score)
        if beta <= alpha:
            break  # Beta cutoff

    return best_score, best_move


def min_value(board: Board, depth: int, alpha: float, beta: float) -> SearchResult:
    """Minimizing player (Blue) function for minimax algorithm."""
    if board.game_over():
        outcome = terminal_outcome(board)
        return static_score(board, outcome), outcome
    if depth == 0:
        return static_score(board), None

    moves = potential_moves(board)
    if not moves:
        board.pass_move()
        score, _ = max_value(board, depth - 1, alpha, beta)
        board.undo()
        return score, PASS_MOVE

    best_score = INFTY
    best_move = None
    for move in moves:
        board.make_move(move)
        score, _ = max_value(board, depth - 1, alpha, beta)
        board.undo()

        if best_move is None or score < best_score:
            best_score = score
            best_move = move

        beta = min(beta, best_score)
        if beta <= alpha:
            break  # Alpha cutoff

    return best_score, best_move


def minimax_value(board: Board, depth: int) -> float:
    """Plain minimax value of BOARD to DEPTH plies, without pruning."""
    if board.game_over():
        return static_score(board, terminal_outcome(board))
    if depth == 0:
        return static_score(board)

    maximizing = board.whose_move() == PieceColor.RED
    moves = potential_moves(board)
    if not moves:
        board.pass_move()
        value = minimax_value(board, depth - 1)
        board.undo()
        return value

    values = []
    for move in moves:
        board.make_move(move)
        values.append(minimax_value(board, depth - 1))
        board.undo()
    return max(values) if maximizing else min(values)


def minimax(board: Board, color: PieceColor, depth_minimax: int = DEFAULT_MINIMAX_DEPTH) -> Move:
    """Alpha-Beta Minimax for the player COLOR on BOARD.

    Arguments:
        board: Game board; it is copied, never modified
        color: RED searches as the maximizer, BLUE as the minimizer
        depth_minimax: Maximum search depth (default: 4 ply)

    Returns:
        The first move reaching the best score, or a pass if there is no move.
    """
    b = board.copy()
    if color == PieceColor.RED:
        score, move = max_value(b, depth_minimax, -INFTY, INFTY)
    else:
        score, move = min_value(b, depth_minimax, -INFTY, INFTY)

    if move is None or move.is_sentinel():
        # Finished position or zero depth: no search tree below the root
        moves = potential_moves(b)
        move = moves[0] if moves else PASS_MOVE
    logger.debug("Minimax depth %d for %s: %s (score %s)", depth_minimax, color, move, score)
    return move
