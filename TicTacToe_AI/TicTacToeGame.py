"""Host-facing game API and the turn loop that alternates player and automated side."""

import random

try:
    from Board import Board, Mark, Outcome
    from ai import search_minimax
    from engine import referee, rules
    from engine.errors import InvalidConfiguration
    from utils.logger import log_event
except ImportError:
    from TicTacToe_AI.Board import Board, Mark, Outcome
    from TicTacToe_AI.ai import search_minimax
    from TicTacToe_AI.engine import referee, rules
    from TicTacToe_AI.engine.errors import InvalidConfiguration
    from TicTacToe_AI.utils.logger import log_event


FIRST_MOVE_CHOICES = ("player", "ai", "random")


def new_game(dimension=3, player_mark=Mark.CROSS, ai_mark=Mark.CIRCLE):
    """Return an empty board after checking the mark assignment and dimension."""
    rules.validate_marks(player_mark, ai_mark)
    if not isinstance(dimension, int) or dimension < 1:
        raise InvalidConfiguration(f"board dimension must be a positive integer, got {dimension!r}")
    return Board(size=dimension)


def apply_human_move(board, x, y, player_mark) -> Outcome:
    referee.check_move((x, y), board, player_mark)
    board.place(x, y, player_mark)
    return board.winner()


def choose_automated_move(board, ai_mark, player_mark, stats=None):
    """Return (x, y) for the automated side, or NO_MOVE (None) on a full board."""
    return search_minimax.choose_move(board, ai_mark=ai_mark, player_mark=player_mark, stats=stats)


def apply_automated_move(board, x, y, ai_mark) -> Outcome:
    referee.check_move((x, y), board, ai_mark)
    board.place(x, y, ai_mark)
    return board.winner()


class TicTacToeGame:
    def __init__(
        self,
        board_size,
        player,
        ai,
        first_move="player",
        alternate_first_move=True,
        logger=log_event,
        renderer=None,
        on_result=None,
        rng=None,
    ):
        if first_move not in FIRST_MOVE_CHOICES:
            raise InvalidConfiguration(f"first_move must be one of {FIRST_MOVE_CHOICES}, got {first_move!r}")
        self.board = new_game(board_size, player_mark=player.mark, ai_mark=ai.mark)
        self.board_size = board_size
        self.players = {"player": player, "ai": ai}
        self.alternate_first_move = alternate_first_move
        self.logger = logger
        self.renderer = renderer
        self.on_result = on_result
        self.rng = rng or random.Random()
        self.games_played = 0

        if first_move == "random":
            self.player_starts = self.rng.random() > 0.5
        else:
            self.player_starts = first_move == "player"

    @property
    def player_mark(self):
        return self.players["player"].mark

    @property
    def ai_mark(self):
        return self.players["ai"].mark

    def play(self):
        """Run a single game on the current board. Returns the GameResult."""
        if self.board.winner().is_terminal:
            raise RuntimeError("game already finished; call next_game() before play()")
        side ="player" if self.player_starts else "ai"
        game_result = None
        last_move = None
        self.logger(f"Game {self.games_played + 1}: {side} opens as {self.players[side].mark.symbol}")

        while game_result is None:
            participant = self.players[side]
            if self.renderer:
                self.renderer(self.board, last_move, participant.mark, game_result)

            move = participant.next_move(self.board)
            if move is search_minimax.NO_MOVE:
                raise RuntimeError(f"{side} returned no move on a non-terminal board")

            if side == "player":
                outcome = apply_human_move(self.board, *move, self.player_mark)
            else:
                outcome = apply_automated_move(self.board, *move, self.ai_mark)
            last_move = move
            self.logger(f"Move {self.board.move_count}: {participant.mark.symbol} {move}")

            game_result = rules.result_for(outcome, self.ai_mark, self.player_mark)
            side = "ai" if side == "player" else "player"

        if game_result is rules.GameResult.TIE:
            self.logger("Result: Tie (board full)")
        else:
            self.logger(f"Winner: {outcome.winner.symbol} ({game_result.name})")

        if self.renderer:
            self.renderer(self.board, last_move, outcome.winner, game_result)
        if self.on_result:
            self.on_result(game_result)
        self.games_played += 1
        return game_result

    def next_game(self):
        """Reset the board; with alternation on, the other side opens next."""
        self.board = new_game(self.board_size, player_mark=self.player_mark, ai_mark=self.ai_mark)
        if self.alternate_first_move:
            self.player_starts = not self.player_starts

    def play_series(self, games):
        results = []
        for index in range(games):
            if index > 0:
                self.next_game()
            results.append(self.play())
        return results
