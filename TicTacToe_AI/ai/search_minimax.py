"""Plain exhaustive minimax over every legal continuation (no pruning, no depth limit)."""

import logging
import time

try:
    from engine import rules
except ImportError:
    from TicTacToe_AI.engine import rules


LOGGER = logging.getLogger(__name__)

NO_MOVE = None
LARGE_SEARCH_OPEN_CELLS = 9  # an empty 3x3 board is the largest practical search


class MinimaxSearcher:
    """
    Scores positions from the automated side's point of view: +1 win, -1 loss, 0 tie.

    The search explores hypothetical moves on the caller's board and undoes each
    one before trying the next, so the board must not be touched by anyone else
    while a search runs.
    """

    def __init__(self, ai_mark, player_mark, stats=None):
        rules.validate_marks(player_mark, ai_mark)
        self.ai_mark = ai_mark
        self.player_mark = player_mark
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.last_score = None

    def choose_move(self, board):
        """
        Return the (x, y) with the best guaranteed score for the automated side,
        or NO_MOVE when the board has no open cells. Ties keep the earliest
        cell in row-major order.
        """
        self.node_counter = 0
        start_time = time.perf_counter()

        open_count = sum(1 for _ in board.open_cells())
        if open_count > LARGE_SEARCH_OPEN_CELLS:
            LOGGER.warning(
                "minimax: %d open cells; exhaustive search grows factorially and may not finish",
                open_count,
            )

        best_score = None
        best_move = NO_MOVE
        for x, y in board.open_cells():
            with rules.simulate(board, x, y, self.ai_mark):
                score = self.evaluate(board, maximizing=False)
            if best_score is None or score > best_score:
                best_score = score
                best_move = (x, y)

        self.last_score = best_score
        elapsed = time.perf_counter() - start_time
        LOGGER.debug(
            "minimax: move=%s score=%s nodes=%d elapsed=%.3fs",
            best_move, best_score, self.node_counter, elapsed,
        )
        if self.stats_list is not None:
            self._record_stats(best_move, best_score, elapsed)
        return best_move

    def evaluate(self, board, maximizing):
        """Minimax value of the position with `maximizing` telling whose turn it is."""
        self.node_counter += 1

        outcome = board.winner()
        if outcome.is_terminal:
            return rules.score_outcome(outcome, self.ai_mark)

        mark = self.ai_mark if maximizing else self.player_mark
        best_score = None
        for x, y in board.open_cells():
            with rules.simulate(board, x, y, mark):
                score = self.evaluate(board, not maximizing)

            if best_score is None:
                best_score = score
            elif maximizing:
                best_score = max(best_score, score)
            else:
                best_score = min(best_score, score)

        if best_score is None:
            # winner() reports TIE on a full board, so a non-terminal board has an open cell.
            raise RuntimeError("non-terminal board without open cells")
        return best_score

    def _record_stats(self, move, score, elapsed):
        self.stats_list.append(
            {
                "move": move,
                "score": score,
                "nodes": self.node_counter,
                "elapsed": elapsed,
            }
        )


def choose_move(board, ai_mark, player_mark, stats=None):
    """Public function to start a search. Instantiates and uses MinimaxSearcher."""
    searcher = MinimaxSearcher(ai_mark=ai_mark, player_mark=player_mark, stats=stats)
    return searcher.choose_move(board)
