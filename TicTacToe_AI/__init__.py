"""TicTacToe_AI package exports."""

from .Board import Board, Mark, Outcome
from .TicTacToeGame import (
    TicTacToeGame,
    new_game,
    apply_human_move,
    choose_automated_move,
    apply_automated_move,
)
from .Player import Player, HumanPlayer
from .AIPlayer import AIPlayer
from .engine.errors import CellOccupied, InvalidConfiguration, InvalidCoordinate, TicTacToeError
from .engine.rules import GameResult, result_for
from .ai.search_minimax import NO_MOVE, MinimaxSearcher

# Subpackages for rule engine, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "Mark",
    "Outcome",
    "TicTacToeGame",
    "new_game",
    "apply_human_move",
    "choose_automated_move",
    "apply_automated_move",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "MinimaxSearcher",
    "NO_MOVE",
    "GameResult",
    "result_for",
    "TicTacToeError",
    "InvalidCoordinate",
    "CellOccupied",
    "InvalidConfiguration",
    "ai",
    "engine",
    "utils",
]
