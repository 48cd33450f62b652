#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Board module for Ataxx.

This module provides the game state container: the grid, piece counts, move
counters, move history and the undo stacks used by the search.

The 7x7 playing area is stored in a flat 11x11 numpy array whose two outer
rows and columns are permanently BLOCKED. Looking at every square within two
steps of a playable square therefore never leaves the array, and the usual
"destination must be EMPTY" test keeps pieces off the border.
"""
import logging
from typing import Callable, List, Optional, Tuple

import numpy as np

from .constants import (
    ADJACENT_POSITIONS,
    BLUE_CORNERS,
    BOARD_CELLS,
    COLUMNS,
    CORNERS,
    EXTENDED_SIDE,
    JUMP_LIMIT,
    MOVE_POSITIONS,
    PASS_COLUMN,
    RED_CORNERS,
    REFLECTIONS,
    ROWS,
)
from .exceptions import EmptyHistory, IllegalBlockPlacement, IllegalMove
from .move import PASS_MOVE, Move, index, neighbor
from .piece import PieceColor

logger = logging.getLogger(__name__)

# Playable squares in display order: row 7 down to row 1, column a to g
SCAN_ORDER = np.array([index(c, r) for r in reversed(ROWS) for c in COLUMNS], dtype=np.intp)
ADJACENT_DELTAS = np.array([dc + dr * EXTENDED_SIDE for dc, dr in ADJACENT_POSITIONS], dtype=np.intp)
MOVE_DELTAS = np.array([dc + dr * EXTENDED_SIDE for dc, dr in MOVE_POSITIONS], dtype=np.intp)

SYMBOLS = {
    PieceColor.EMPTY: "-",
    PieceColor.BLOCKED: "X",
    PieceColor.RED: "r",
    PieceColor.BLUE: "b",
}

Observer = Callable[["Board"], None]


class Board:
    """An Ataxx board.

    Squares are named by column ('a'..'g') and row ('1'..'7') or by their
    linearized index (see ``move.index``). The board keeps the red and blue
    piece counts in step with the grid on every change, and records enough
    about each move to undo it exactly: the four counters as they were before
    the move, and the indices of the opponent pieces it captured.
    """

    index = staticmethod(index)
    neighbor = staticmethod(neighbor)

    def __init__(self):
        """Initialize a new board in the starting position."""
        self._board = np.full(BOARD_CELLS, PieceColor.BLOCKED, dtype=np.int8)
        self._observers: List[Observer] = []
        self.clear()

    @classmethod
    def from_layout(cls, layout: List[str], to_move: PieceColor = PieceColor.RED) -> "Board":
        """Create a board from a picture of the playing area.

        Args:
            layout: 7 rows, row 7 first, of 7 symbols each ('r', 'b', '-' or
                'X'); spaces are ignored, so rows in the style of
                ``to_string()`` are accepted
            to_move: Player to move

        Returns:
            Board: a board with that position and an empty history
        """
        rows = [line.replace(" ", "") for line in layout]
        if len(rows) != len(ROWS) or any(len(row) != len(COLUMNS) for row in rows):
            raise ValueError("Layout must have 7 rows of 7 squares")
        symbols = {symbol: color for color, symbol in SYMBOLS.items()}

        board = cls()
        board._board[SCAN_ORDER] = PieceColor.EMPTY
        board._num_red = 0
        board._num_blue = 0
        for r, row in zip(reversed(ROWS), rows):
            for c, symbol in zip(COLUMNS, row):
                if symbol not in symbols:
                    raise ValueError(f"Unknown square symbol {symbol!r}")
                board._set(index(c, r), symbols[symbol])
        board._whose_move = to_move
        return board

    def copy(self) -> "Board":
        """Return an independent copy of this board, without observers."""
        other = Board.__new__(Board)
        other._board = self._board.copy()
        other._observers = []
        other._whose_move = self._whose_move
        other._num_red = self._num_red
        other._num_blue = self._num_blue
        other._num_moves = self._num_moves
        other._num_jumps = self._num_jumps
        other._all_moves = list(self._all_moves)
        other._changes_stack = list(self._changes_stack)
        other._pieces_stack = list(self._pieces_stack)
        return other

    def clear(self) -> None:
        """Reset to the starting position: pieces in the four corners, no
        blocks, red to move and an empty history."""
        self._whose_move = PieceColor.RED
        self._num_red = 0
        self._num_blue = 0
        self._num_moves = 0
        self._num_jumps = 0
        self._all_moves: List[Move] = []
        self._changes_stack: List[Tuple[int, int, int, int]] = []
        self._pieces_stack: List[List[int]] = []

        self._board[:] = PieceColor.BLOCKED
        self._board[SCAN_ORDER] = PieceColor.EMPTY
        for c, r in RED_CORNERS:
            self._set(index(c, r), PieceColor.RED)
        for c, r in BLUE_CORNERS:
            self._set(index(c, r), PieceColor.BLUE)
        self._notify()

    # Observers

    def add_observer(self, observer: Observer) -> None:
        """Register OBSERVER to be called with this board after every change."""
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        self._observers.remove(observer)

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)

    # Queries

    def get(self, c: str, r: str) -> PieceColor:
        """Return the contents of square C R."""
        return PieceColor(int(self._board[index(c, r)]))

    def get_square(self, sq: int) -> PieceColor:
        """Return the contents of the square with linearized index SQ."""
        return PieceColor(int(self._board[sq]))

    def whose_move(self) -> PieceColor:
        """Return the color of the player to move. Arbitrary once the game is over."""
        return self._whose_move

    def red_pieces(self) -> int:
        return self._num_red

    def blue_pieces(self) -> int:
        return self._num_blue

    def num_pieces(self, color: PieceColor) -> int:
        if color == PieceColor.RED:
            return self._num_red
        if color == PieceColor.BLUE:
            return self._num_blue
        return int(np.count_nonzero(self._board[SCAN_ORDER] == color))

    def num_moves(self) -> int:
        """Return the number of moves and passes since the last clear."""
        return self._num_moves

    def num_jumps(self) -> int:
        """Return the number of consecutive jumps since the last extend (or
        the start of the game)."""
        return self._num_jumps

    def all_moves(self) -> List[Move]:
        """Return the moves and passes made since the last clear, oldest first."""
        return list(self._all_moves)

    def contents(self, squares: np.ndarray) -> np.ndarray:
        """Return the raw color values at the index array SQUARES."""
        return self._board[squares]

    def squares_of(self, color: PieceColor) -> np.ndarray:
        """Return the indices of COLOR's squares in scan order."""
        return SCAN_ORDER[self._board[SCAN_ORDER] == color]

    def can_move(self, who: PieceColor) -> bool:
        """Return True iff WHO has an extend or jump available, ignoring whose
        turn it is and whether the game is over."""
        owned = self.squares_of(who)
        if owned.size == 0:
            return False
        targets = owned[:, None] + MOVE_DELTAS
        return bool(np.any(self._board[targets] == PieceColor.EMPTY))

    def legal_move(self, move: Move) -> bool:
        """Return True iff MOVE is an extend or jump the player to move can make."""
        if not (move.is_extend() or move.is_jump()):
            return False
        return bool(self._board[move.from_index] == self._whose_move
                    and self._board[move.to_index] == PieceColor.EMPTY)

    def game_over(self) -> bool:
        """Return True iff neither side can move, one side has no pieces, or
        JUMP_LIMIT consecutive jumps have been made."""
        if self._num_red == 0 or self._num_blue == 0 or self._num_jumps >= JUMP_LIMIT:
            return True
        return not self.can_move(PieceColor.RED) and not self.can_move(PieceColor.BLUE)

    def winner(self) -> PieceColor:
        """Return the color with more pieces, or EMPTY for a draw."""
        if self._num_red > self._num_blue:
            return PieceColor.RED
        if self._num_blue > self._num_red:
            return PieceColor.BLUE
        return PieceColor.EMPTY

    # Mutation

    def _incr_pieces(self, color: PieceColor, k: int) -> None:
        if color == PieceColor.RED:
            self._num_red += k
        elif color == PieceColor.BLUE:
            self._num_blue += k

    def _set(self, sq: int, v: PieceColor) -> None:
        """Set square SQ to V, keeping the piece counts in step."""
        old = self._board[sq]
        if old != v:
            self._board[sq] = v
            self._incr_pieces(old, -1)
            self._incr_pieces(v, 1)

    def _place(self, move: Move) -> List[int]:
        """Move or copy the mover's piece for MOVE and capture the adjacent
        opponent pieces. Return the captured indices."""
        mover = self._whose_move
        if move.is_jump():
            self._set(move.from_index, PieceColor.EMPTY)
        dest = move.to_index
        self._set(dest, mover)

        opponent = mover.opposite()
        captured = []
        for sq in dest + ADJACENT_DELTAS:
            if self._board[sq] == opponent:
                self._set(sq, mover)
                captured.append(int(sq))
        return captured

    def make_move_at(self, c0: str, r0: str, c1: str, r1: str) -> None:
        """Perform the move C0R0-C1R1, or pass if C0 is '-'."""
        if c0 == PASS_COLUMN:
            self.make_move(PASS_MOVE)
        else:
            self.make_move(Move.move(c0, r0, c1, r1))

    def make_move(self, move: Move) -> None:
        """Make MOVE on this board.

        Raises:
            IllegalMove: if MOVE is not legal for the player to move.
        """
        if move.is_pass():
            self.pass_move()
            return
        if not self.legal_move(move):
            logger.debug("Rejected %s for %s", move, self._whose_move)
            raise IllegalMove()

        self._changes_stack.append(
            (self._num_red, self._num_blue, self._num_jumps, self._num_moves))
        self._all_moves.append(move)
        if move.is_jump():
            self._num_jumps += 1
        else:
            self._num_jumps = 0
        self._pieces_stack.append(self._place(move))
        self._num_moves += 1
        self._whose_move = self._whose_move.opposite()
        self._notify()

    def make_unrecorded_move(self, move: Move) -> None:
        """Make MOVE without recording it for undo. Only used for setup.

        Raises:
            IllegalMove: if MOVE is a pass or is not legal.
        """
        if not self.legal_move(move):
            raise IllegalMove()
        self._place(move)
        self._whose_move = self._whose_move.opposite()
        self._notify()

    def pass_move(self) -> None:
        """Pass the turn of the player to move.

        Raises:
            IllegalMove: if that player has a move available.
        """
        if self.can_move(self._whose_move):
            raise IllegalMove()
        self._changes_stack.append(
            (self._num_red, self._num_blue, self._num_jumps, self._num_moves))
        self._pieces_stack.append([])
        self._all_moves.append(PASS_MOVE)
        self._num_moves += 1
        self._whose_move = self._whose_move.opposite()
        self._notify()

    def undo(self) -> None:
        """Undo the last move or pass.

        Raises:
            EmptyHistory: if there is nothing to undo.
        """
        if not self._all_moves:
            raise EmptyHistory()
        last_move = self._all_moves.pop()
        mover = self._whose_move.opposite()

        for sq in self._pieces_stack.pop():
            self._board[sq] = self._whose_move
        if last_move.is_jump():
            self._board[last_move.from_index] = mover
            self._board[last_move.to_index] = PieceColor.EMPTY
        elif last_move.is_extend():
            self._board[last_move.to_index] = PieceColor.EMPTY

        (self._num_red, self._num_blue,
         self._num_jumps, self._num_moves) = self._changes_stack.pop()
        self._whose_move = mover
        logger.debug("Undid %s", last_move)
        self._notify()

    # Blocks

    def legal_block(self, c: str, r: Optional[str] = None) -> bool:
        """Return True iff a block may be placed at C R (or at square name C)."""
        if r is None:
            c, r = c[:1], c[1:]
        if len(c) != 1 or len(r) != 1 or c not in COLUMNS or r not in ROWS:
            return False
        if (c, r) in CORNERS:
            return False
        return self.get(c, r) == PieceColor.EMPTY

    def set_block(self, c: str, r: Optional[str] = None) -> None:
        """Block square C R and its reflections across the middle row and
        column. Accepts a square name such as 'b2' as C alone.

        Raises:
            IllegalBlockPlacement: if the square is occupied or a corner, or
                if a move has already been made.
        """
        if r is None:
            c, r = c[:1], c[1:]
        if self._all_moves:
            raise IllegalBlockPlacement("Can only add blocks to initial configuration.")
        if not self.legal_block(c, r):
            raise IllegalBlockPlacement()
        reflected_c = REFLECTIONS[c]
        reflected_r = REFLECTIONS[r]
        for col, row in ((c, r), (reflected_c, reflected_r), (c, reflected_r), (reflected_c, r)):
            self._set(index(col, row), PieceColor.BLOCKED)
        self._notify()

    # Display

    def to_string(self, legend: bool = False) -> str:
        """Return a text depiction of the board, row 7 first. If LEGEND, label
        each row with its own row number (7 at the top) and add a line of
        column letters."""
        lines = []
        for r in reversed(ROWS):
            cells = "".join(" " + SYMBOLS[self.get(c, r)] for c in COLUMNS)
            lines.append((" " + r if legend else " ") + cells)
        if legend:
            lines.append("    " + " ".join(COLUMNS))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string(False)

    def __repr__(self) -> str:
        return f"Board(to_move={self._whose_move}, red={self._num_red}, blue={self._num_blue}, moves={self._num_moves})"

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (np.array_equal(self._board, other._board)
                and self._all_moves == other._all_moves
                and self._whose_move == other._whose_move
                and self._num_red == other._num_red
                and self._num_blue == other._num_blue
                and self._num_moves == other._num_moves
                and self._num_jumps == other._num_jumps)

    __hash__ = None
