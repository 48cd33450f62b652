"""Ataxx board engine and Minimax opponent."""

from .board import Board
from .exceptions import EmptyHistory, GameException, IllegalBlockPlacement, IllegalMove
from .game import Game, GameResult, Reporter
from .minimax import minimax, potential_moves, static_score
from .minimax_player import AI, Player, ScriptedPlayer
from .move import LOSS_MOVE, PASS_MOVE, WIN_MOVE, Move, MoveKind
from .piece import PieceColor

__all__ = [
    "AI",
    "Board",
    "EmptyHistory",
    "Game",
    "GameException",
    "GameResult",
    "IllegalBlockPlacement",
    "IllegalMove",
    "LOSS_MOVE",
    "Move",
    "MoveKind",
    "PASS_MOVE",
    "PieceColor",
    "Player",
    "Reporter",
    "ScriptedPlayer",
    "WIN_MOVE",
    "minimax",
    "potential_moves",
    "static_score",
]
