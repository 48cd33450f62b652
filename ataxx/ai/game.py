"""Controls the play of one Ataxx game between two players."""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .board import Board
from .exceptions import GameException
from .piece import PieceColor

logger = logging.getLogger(__name__)

# Times a player is asked for a move before an illegal answer ends the game
MAX_ATTEMPTS = 2


class Reporter:
    """Sends move, error and outcome messages to the log."""

    def move_msg(self, msg: str) -> None:
        logger.info(msg)

    def err_msg(self, msg: str) -> None:
        logger.warning(msg)

    def outcome_msg(self, msg: str) -> None:
        logger.info(msg)


@dataclass
class GameResult:
    winner: PieceColor
    plies: int
    red_pieces: int
    blue_pieces: int
    # Red minus blue pieces, before the first move and after every ply
    material: List[int] = field(default_factory=list)

    @property
    def outcome(self) -> str:
        if self.winner == PieceColor.RED:
            return "Red wins."
        if self.winner == PieceColor.BLUE:
            return "Blue wins."
        return "Draw."


class Game:
    def __init__(self, board: Optional[Board] = None, reporter: Optional[Reporter] = None):
        self._board = board if board is not None else Board()
        self._reporter = reporter if reporter is not None else Reporter()

    def board(self) -> Board:
        """Return the board being played on."""
        return self._board

    def add_blocks(self, squares: Iterable[str]) -> None:
        """Place a symmetric block at each square name in SQUARES. Only
        allowed before the first move."""
        for sq in squares:
            self._board.set_block(sq)

    def play(self, red, blue, max_moves: Optional[int] = None) -> GameResult:
        """Alternate RED and BLUE players until the game is over, or until
        MAX_MOVES plies have been made.

        Raises:
            GameException: if a player keeps answering with illegal moves.
        """
        board = self._board
        material = [board.red_pieces() - board.blue_pieces()]
        while not board.game_over():
            if max_moves is not None and board.num_moves() >= max_moves:
                logger.info("Stopping after %d moves", board.num_moves())
                break
            player = red if board.whose_move() == PieceColor.RED else blue
            self.execute_move(player)
            material.append(board.red_pieces() - board.blue_pieces())

        result = GameResult(
            winner=board.winner(),
            plies=board.num_moves(),
            red_pieces=board.red_pieces(),
            blue_pieces=board.blue_pieces(),
            material=material,
        )
        self._reporter.outcome_msg(result.outcome)
        return result

    def execute_move(self, player) -> None:
        """Ask PLAYER for a move and make it, reporting illegal answers."""
        for attempt in range(1, MAX_ATTEMPTS + 1):
            try:
                move = player.my_move()
                self._board.make_move(move)
            except GameException as excp:
                self._reporter.err_msg(str(excp))
                if attempt == MAX_ATTEMPTS:
                    raise
                continue
            if move.is_pass():
                self._reporter.move_msg(f"{player.my_color()} passes.")
            else:
                self._reporter.move_msg(f"{player.my_color()} moves {move}.")
            return
