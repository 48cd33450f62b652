from enum import IntEnum


class PieceColor(IntEnum):
    """Contents of a single board square."""

    EMPTY = 0
    RED = 1
    BLUE = 2
    BLOCKED = 3

    def opposite(self) -> "PieceColor":
        """Return the opposing player color. EMPTY and BLOCKED are their own opposite."""
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)
