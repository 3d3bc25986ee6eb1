"""Tests for the host API and TicTacToeGame turn handling."""

import random

import pytest

from TicTacToe_AI.AIPlayer import AIPlayer
from TicTacToe_AI.Board import Mark, Outcome
from TicTacToe_AI.Player import Player
from TicTacToe_AI.TicTacToeGame import (
    TicTacToeGame,
    apply_automated_move,
    apply_human_move,
    choose_automated_move,
    new_game,
)
from TicTacToe_AI.engine.errors import CellOccupied, InvalidConfiguration, InvalidCoordinate
from TicTacToe_AI.engine.rules import GameResult


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, mark, moves):
        super().__init__(mark)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, board):
        if self._idx >= len(self._moves):
            raise ValueError("No more scripted moves")
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


class FirstOpenPlayer(Player):
    def next_move(self, board):
        return next(board.open_cells())


def test_new_game_validates_configuration():
    board = new_game(3, Mark.CROSS, Mark.CIRCLE)
    assert board.size == 3
    assert board.move_count == 0
    with pytest.raises(InvalidConfiguration):
        new_game(3, Mark.CROSS, Mark.CROSS)
    with pytest.raises(InvalidConfiguration):
        new_game(3, Mark.EMPTY, Mark.CIRCLE)
    with pytest.raises(InvalidConfiguration):
        new_game(0, Mark.CROSS, Mark.CIRCLE)


def test_core_api_round():
    board = new_game()
    assert apply_human_move(board, 0, 0, Mark.CROSS) is Outcome.ONGOING
    mv = choose_automated_move(board, Mark.CIRCLE, Mark.CROSS)
    # Only the centre holds the draw against a corner opening.
    assert mv == (1, 1)
    assert apply_automated_move(board, *mv, Mark.CIRCLE) is Outcome.ONGOING
    assert board.move_count == 2


def test_apply_human_move_rejects_illegal_moves():
    board = new_game()
    apply_human_move(board, 1, 1, Mark.CROSS)
    before = board.snapshot()
    with pytest.raises(CellOccupied):
        apply_human_move(board, 1, 1, Mark.CROSS)
    with pytest.raises(InvalidCoordinate):
        apply_human_move(board, 3, 1, Mark.CROSS)
    with pytest.raises(InvalidCoordinate):
        apply_human_move(board, 1.0, 1, Mark.CROSS)
    assert board.snapshot() == before


def test_player_win_reported_through_callback():
    player = SeqPlayer(Mark.CROSS, [(0, 0), (0, 1), (0, 2)])
    ai = SeqPlayer(Mark.CIRCLE, [(1, 0), (1, 1)])
    results = []
    log = []

    game = TicTacToeGame(3, player, ai, first_move="player", logger=log.append, on_result=results.append)
    result = game.play()

    assert result is GameResult.PLAYER_WIN
    assert results == [GameResult.PLAYER_WIN]
    assert game.board.winner() is Outcome.CROSS_WINS
    assert log[-1].startswith("Winner: X")


def test_final_render_carries_result():
    player = SeqPlayer(Mark.CROSS, [(0, 0), (2, 2)])
    ai = SeqPlayer(Mark.CIRCLE, [(1, 0), (1, 1), (1, 2)])
    frames = []

    def renderer(board, last_move, current_mark, game_result):
        frames.append((last_move, current_mark, game_result))

    game = TicTacToeGame(3, player, ai, first_move="ai", logger=lambda *_: None, renderer=renderer)
    result = game.play()

    assert result is GameResult.AI_WIN
    assert frames[0] == (None, Mark.CIRCLE, None)
    assert frames[-1] == ((1, 2), Mark.CIRCLE, GameResult.AI_WIN)


def test_play_again_on_finished_board_raises():
    player = SeqPlayer(Mark.CROSS, [(0, 0), (2, 2), (0, 1)])
    ai = SeqPlayer(Mark.CIRCLE, [(1, 0), (1, 1), (1, 2), (2, 0)])
    results = []
    game = TicTacToeGame(3, player, ai, first_move="ai", logger=lambda *_: None, on_result=results.append)
    assert game.play() is GameResult.AI_WIN
    before = game.board.snapshot()

    with pytest.raises(RuntimeError):
        game.play()
    assert game.board.snapshot() == before
    assert results == [GameResult.AI_WIN]

    game.next_game()
    assert game.board.move_count == 0


def test_tie_against_first_open_player():
    player = FirstOpenPlayer(Mark.CROSS)
    ai = AIPlayer(Mark.CIRCLE)
    game = TicTacToeGame(3, player, ai, first_move="player", logger=lambda *_: None)
    result = game.play()
    assert result in (GameResult.TIE, GameResult.AI_WIN)
    assert result is not GameResult.PLAYER_WIN


def test_illegal_scripted_move_propagates():
    player = SeqPlayer(Mark.CROSS, [(1, 1), (1, 1)])
    ai = SeqPlayer(Mark.CIRCLE, [(0, 0)])
    game = TicTacToeGame(3, player, ai, first_move="player", logger=lambda *_: None)
    with pytest.raises(CellOccupied):
        game.play()


def test_series_alternates_opening_side():
    openers = []

    class RecordingAI(AIPlayer):
        def next_move(self, board):
            if board.move_count == 0:
                openers.append("ai")
            return super().next_move(board)

    class RecordingPlayer(FirstOpenPlayer):
        def next_move(self, board):
            if board.move_count == 0:
                openers.append("player")
            return super().next_move(board)

    game = TicTacToeGame(
        3,
        RecordingPlayer(Mark.CROSS),
        RecordingAI(Mark.CIRCLE),
        first_move="player",
        alternate_first_move=True,
        logger=lambda *_: None,
    )
    results = game.play_series(2)
    assert len(results) == 2
    assert openers == ["player", "ai"]
    assert game.games_played == 2


def test_random_first_move_uses_rng():
    class FixedRng(random.Random):
        def random(self):
            return 0.9

    game = TicTacToeGame(
        3, FirstOpenPlayer(Mark.CROSS), AIPlayer(Mark.CIRCLE), first_move="random", rng=FixedRng()
    )
    assert game.player_starts is True


def test_invalid_first_move_rejected():
    with pytest.raises(InvalidConfiguration):
        TicTacToeGame(3, FirstOpenPlayer(Mark.CROSS), AIPlayer(Mark.CIRCLE), first_move="nobody")


def test_same_marks_rejected():
    with pytest.raises(InvalidConfiguration):
        TicTacToeGame(3, FirstOpenPlayer(Mark.CROSS), SeqPlayer(Mark.CROSS, []))
