"""Entry point for Tic-Tac-Toe matches. Load config, wire players, start TicTacToeGame."""

import logging
import random
from collections import Counter

try:
    from utils.cli import parse_args
    from utils.logger import configure_logging, log_event
    from utils.settings import load_settings
    from TicTacToeGame import TicTacToeGame
    from AIPlayer import AIPlayer
    from Player import HumanPlayer
    from engine.rules import GameResult
except ImportError:
    from TicTacToe_AI.utils.cli import parse_args
    from TicTacToe_AI.utils.logger import configure_logging, log_event
    from TicTacToe_AI.utils.settings import load_settings
    from TicTacToe_AI.TicTacToeGame import TicTacToeGame
    from TicTacToe_AI.AIPlayer import AIPlayer
    from TicTacToe_AI.Player import HumanPlayer
    from TicTacToe_AI.engine.rules import GameResult


LOGGER = logging.getLogger(__name__)


def print_board(board, last_move=None, current_mark=None, game_result=None):
    print()
    print(board)
    if game_result is None and current_mark is not None:
        print(f"{current_mark.symbol} to move")


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings).with_overrides(
        board_size=args.board_size,
        player_mark=args.player_mark,
        first_move=args.first_move,
        games=args.games,
        seed=args.seed,
        log_level=args.log_level,
    )
    configure_logging(settings.log_level)
    if settings.board_size > 3:
        LOGGER.warning(
            "board_size=%d: exhaustive minimax on an empty board this size will not finish in practice",
            settings.board_size,
        )

    if args.mode == "human-vs-ai":
        player = HumanPlayer(settings.player)
        renderer = print_board
    elif args.mode == "ai-vs-ai":
        player = AIPlayer(settings.player)
        renderer = None
    else:
        raise ValueError(f"Unsupported mode: {args.mode}")
    ai = AIPlayer(settings.ai)

    game = TicTacToeGame(
        board_size=settings.board_size,
        player=player,
        ai=ai,
        first_move=settings.first_move,
        alternate_first_move=settings.alternate_first_move,
        logger=log_event,
        renderer=renderer,
        rng=random.Random(settings.seed),
    )
    results = game.play_series(settings.games)

    outcome = {GameResult.TIE: "Tie", GameResult.AI_WIN: "AI wins", GameResult.PLAYER_WIN: "Player wins"}
    for index, result in enumerate(results, start=1):
        print(f"Game {index}: {outcome[result]}")
    tally = Counter(results)
    print(
        f"Player {tally[GameResult.PLAYER_WIN]} / AI {tally[GameResult.AI_WIN]} / Tie {tally[GameResult.TIE]}"
    )
    return results


if __name__ == "__main__":
    main()
