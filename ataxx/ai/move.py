"""
Move representation for Ataxx.

Squares are named by a column character ('a'..'g') and a row character
('1'..'7'). Inside the board they are addressed by a linearized index into a
grid that carries a 2-deep blocked border, so every square within two steps
of a playable square is still a valid index.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .constants import COLUMNS, EXTENDED_SIDE, ROWS
from .exceptions import IllegalMove


def index(col: str, row: str) -> int:
    """Return the linearized index of square COL ROW."""
    return (ord(row) - ord('1') + 2) * EXTENDED_SIDE + (ord(col) - ord('a') + 2)


def neighbor(sq: int, dc: int, dr: int) -> int:
    """Return the index of the square DC columns and DR rows away from SQ."""
    return sq + dc + dr * EXTENDED_SIDE


def square(sq: int) -> Tuple[str, str]:
    """Return the (column, row) characters of the playable square SQ."""
    row, col = divmod(sq, EXTENDED_SIDE)
    return chr(ord('a') + col - 2), chr(ord('1') + row - 2)


class MoveKind(Enum):
    PASS = "pass"
    EXTEND = "extend"
    JUMP = "jump"
    WIN = "win"
    LOSS = "loss"


def _kind_of(col0, row0, col1, row1) -> MoveKind:
    """Classify col0row0-col1row1 by its distance.

    Raises:
        IllegalMove: if a square is off the board or the two squares are
            not one or two steps apart.
    """
    for col, row in ((col0, row0), (col1, row1)):
        if (not isinstance(col, str) or not isinstance(row, str)
                or len(col) != 1 or len(row) != 1 or col not in COLUMNS or row not in ROWS):
            raise IllegalMove()
    distance = max(abs(ord(col1) - ord(col0)), abs(ord(row1) - ord(row0)))
    if distance == 1:
        return MoveKind.EXTEND
    if distance == 2:
        return MoveKind.JUMP
    raise IllegalMove()


@dataclass(frozen=True)
class Move:
    kind: MoveKind
    col0: Optional[str] = None
    row0: Optional[str] = None
    col1: Optional[str] = None
    row1: Optional[str] = None

    def __post_init__(self):
        # Extends and jumps are exactly the moves of distance one and two
        if self.kind in (MoveKind.EXTEND, MoveKind.JUMP):
            if _kind_of(self.col0, self.row0, self.col1, self.row1) is not self.kind:
                raise IllegalMove()

    @classmethod
    def move(cls, col0: str, row0: str, col1: str, row1: str) -> "Move":
        """Build the extend or jump col0row0-col1row1.

        Raises:
            IllegalMove: if a square is off the board or the two squares are
                not one or two steps apart.
        """
        return cls(_kind_of(col0, row0, col1, row1), col0, row0, col1, row1)

    @classmethod
    def from_indices(cls, from_sq: int, to_sq: int) -> "Move":
        col0, row0 = square(from_sq)
        col1, row1 = square(to_sq)
        return cls.move(col0, row0, col1, row1)

    @classmethod
    def parse(cls, text: str) -> "Move":
        """Parse 'c0r0-c1r1' or '-' (pass)."""
        text = text.strip()
        if text == "-":
            return PASS_MOVE
        if len(text) != 5 or text[2] != "-":
            raise IllegalMove()
        return cls.move(text[0], text[1], text[3], text[4])

    def is_pass(self) -> bool:
        return self.kind is MoveKind.PASS

    def is_extend(self) -> bool:
        return self.kind is MoveKind.EXTEND

    def is_jump(self) -> bool:
        return self.kind is MoveKind.JUMP

    def is_infty_move(self) -> bool:
        return self.kind is MoveKind.WIN

    def is_neg_infty_move(self) -> bool:
        return self.kind is MoveKind.LOSS

    def is_sentinel(self) -> bool:
        return self.kind in (MoveKind.WIN, MoveKind.LOSS)

    @property
    def from_index(self) -> int:
        return index(self.col0, self.row0)

    @property
    def to_index(self) -> int:
        return index(self.col1, self.row1)

    def __str__(self) -> str:
        if self.is_pass():
            return "-"
        if self.is_sentinel():
            return f"<{self.kind.value}>"
        return f"{self.col0}{self.row0}-{self.col1}{self.row1}"


PASS_MOVE = Move(MoveKind.PASS)
WIN_MOVE = Move(MoveKind.WIN)
LOSS_MOVE = Move(MoveKind.LOSS)
