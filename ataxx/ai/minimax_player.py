#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Players for Ataxx.

This module provides the player interface used by the game driver and the
AI player that picks its moves with Alpha-Beta Minimax.
"""
import logging
import time

from .constants import DEFAULT_MINIMAX_DEPTH
from .exceptions import GameException
from .minimax import minimax
from .move import PASS_MOVE, Move

logger = logging.getLogger(__name__)


class Player:
    """A player of one color in a game."""

    def __init__(self, game, my_color):
        """
        Args:
            game: Game whose board this player moves on
            my_color: PieceColor this player plays
        """
        self._game = game
        self._my_color = my_color

    def board(self):
        """Return the game's board. Callers must not modify it."""
        return self._game.board()

    def my_color(self):
        return self._my_color

    def my_move(self):
        """Return the move this player wants to make next."""
        raise NotImplementedError


class AI(Player):
    """
    Minimax player with Alpha-Beta pruning.

    The search runs on a copy of the game's board, so asking for a move never
    changes the game.
    """
    def __init__(self, game, my_color, depth=DEFAULT_MINIMAX_DEPTH):
        """
        Initialize the Minimax player.

        Args:
            game: Game to play in
            my_color: PieceColor.RED or PieceColor.BLUE
            depth: Maximum search depth (default: 4)

        Raises:
            ValueError: If depth is smaller than one ply.
        """
        super().__init__(game, my_color)
        if depth < 1:
            raise ValueError("Depth must be at least 1")
        self.depth = depth

    def my_move(self):
        """
        Get the best move for this player.

        Returns:
            A pass when no move is available, otherwise the move found by
            the search.
        """
        board = self.board()
        if not board.can_move(self.my_color()):
            return PASS_MOVE

        begin = time.time()
        move = minimax(board, self.my_color(), self.depth)
        logger.debug("%s chose %s in %.2fs", self.my_color(), move, time.time() - begin)
        return move


class ScriptedPlayer(Player):
    """A player that makes a fixed sequence of moves, given as text such as
    'a7-b6' or '-' for a pass."""

    def __init__(self, game, my_color, moves):
        super().__init__(game, my_color)
        self._moves = iter(moves)

    def my_move(self):
        try:
            text = next(self._moves)
        except StopIteration:
            raise GameException(f"{self.my_color()} has no moves left to play.") from None
        return Move.parse(text)
