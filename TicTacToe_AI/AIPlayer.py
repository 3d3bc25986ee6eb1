"""Automated opponent backed by exhaustive minimax."""

try:
    from Player import Player
    from ai import search_minimax
except ImportError:
    from TicTacToe_AI.Player import Player
    from TicTacToe_AI.ai import search_minimax


class AIPlayer(Player):
    def __init__(self, mark, opponent_mark=None, stats=None):
        super().__init__(mark)
        self.opponent_mark = mark.opposite() if opponent_mark is None else opponent_mark
        self.stats = stats

    def next_move(self, board):
        return search_minimax.choose_move(
            board,
            ai_mark=self.mark,
            player_mark=self.opponent_mark,
            stats=self.stats,
        )
