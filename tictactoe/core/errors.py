"""Exceptions raised by the board and the game session."""


class GameError(Exception):
    """Base class for recoverable game errors."""


class InvalidMove(GameError):
    """Target cell is occupied or the coordinates are off the board."""


class IllegalMove(GameError):
    """Move submitted out of turn or after the game has ended."""
