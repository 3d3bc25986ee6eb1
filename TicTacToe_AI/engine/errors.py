"""Exceptions raised for illegal moves and bad game setup."""


class TicTacToeError(ValueError):
    """Base class for all engine errors."""


class InvalidCoordinate(TicTacToeError):
    def __init__(self, x, y, size):
        super().__init__(f"move ({x}, {y}) out of bounds for a {size}x{size} board")
        self.x = x
        self.y = y
        self.size = size


class CellOccupied(TicTacToeError):
    def __init__(self, x, y, mark):
        super().__init__(f"cell ({x}, {y}) already occupied by {mark.symbol}")
        self.x = x
        self.y = y
        self.mark = mark


class InvalidConfiguration(TicTacToeError):
    """Bad mark assignment, board dimension, or settings value."""
