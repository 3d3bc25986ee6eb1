"""Game rules shared by the search and the host: mark assignment, scoring, results."""

from contextlib import contextmanager
from enum import IntEnum

try:
    from Board import Board, Mark, Outcome
    from engine.errors import InvalidConfiguration
except ImportError:
    from TicTacToe_AI.Board import Board, Mark, Outcome
    from TicTacToe_AI.engine.errors import InvalidConfiguration


WIN_SCORE = 1
LOSS_SCORE = -1
TIE_SCORE = 0


class GameResult(IntEnum):
    """Outcome signal reported to the host, with the host's event codes."""

    TIE = -1
    AI_WIN = 1
    PLAYER_WIN = 2


@contextmanager
def simulate(board: Board, x: int, y: int, mark: Mark):
    board._push_mark(x, y, mark)
    try:
        yield
    finally:
        board._pop_mark(x, y)


def validate_marks(player_mark, ai_mark):
    """Raise InvalidConfiguration unless the two marks are distinct and non-empty."""
    for name, mark in (("player_mark", player_mark), ("ai_mark", ai_mark)):
        if mark not in (Mark.CROSS, Mark.CIRCLE):
            raise InvalidConfiguration(f"{name} must be CROSS or CIRCLE, got {mark!r}")
    if player_mark == ai_mark:
        raise InvalidConfiguration("player and automated side must use different marks")


def score_outcome(outcome: Outcome, ai_mark: Mark) -> int:
    """Score a terminal outcome from the automated side's point of view."""
    if outcome is Outcome.TIE:
        return TIE_SCORE
    return WIN_SCORE if outcome.winner == ai_mark else LOSS_SCORE


def result_for(outcome: Outcome, ai_mark: Mark, player_mark: Mark):
    """Map an Outcome to the host GameResult; None while the game is ongoing."""
    if outcome is Outcome.ONGOING:
        return None
    if outcome is Outcome.TIE:
        return GameResult.TIE
    if outcome.winner == ai_mark:
        return GameResult.AI_WIN
    if outcome.winner == player_mark:
        return GameResult.PLAYER_WIN
    raise ValueError(f"{outcome} does not match either assigned mark")
