"""Ataxx game engine with an Alpha-Beta Minimax opponent."""

from . import ai
from .ai import AI, Board, Game, Move, PieceColor

__all__ = ["ai", "AI", "Board", "Game", "Move", "PieceColor"]
