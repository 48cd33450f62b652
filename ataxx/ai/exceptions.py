class GameException(Exception):
    """Base class for errors reported back to the player."""


class IllegalMove(GameException):
    def __init__(self, message="that move is illegal."):
        super().__init__(message)


class IllegalBlockPlacement(GameException):
    def __init__(self, message="illegal block placement"):
        super().__init__(message)


class EmptyHistory(GameException):
    def __init__(self, message="no moves to undo"):
        super().__init__(message)
