"""CLI options for selecting players, board size, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Tic-Tac-Toe against an exhaustive minimax opponent")
    parser.add_argument("--board-size", type=int, help="Board dimension N for an N x N grid (default 3)")
    parser.add_argument("--player-mark", choices=["X", "O"], help="Mark for the player; the AI takes the other one")
    parser.add_argument(
        "--first-move",
        choices=["player", "ai", "random"],
        help="Who opens the first game (default from settings)",
    )
    parser.add_argument("--games", type=int, help="Number of games to play")
    parser.add_argument(
        "--mode",
        choices=["human-vs-ai", "ai-vs-ai"],
        default="human-vs-ai",
        help="Play mode (who controls the player side)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random first-move coin flip")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG shows search node counts)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    return parser.parse_args(argv)
