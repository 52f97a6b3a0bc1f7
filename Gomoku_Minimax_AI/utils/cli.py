"""CLI options for selecting players, board size, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku five-in-a-row with a minimax AI")
    parser.add_argument("--board-size", type=int, help="Board size (default from settings, 9)")
    parser.add_argument("--win-length", type=int, help="Stones in a row needed to win (default 5)")
    parser.add_argument("--timeout", type=float, help="Seconds per move (default: untimed)")
    parser.add_argument("--depth", type=int, help="Search depth for AI")
    parser.add_argument("--seed", type=int, help="Seed for the AI tie-break random source")
    parser.add_argument(
        "--mode",
        choices=["human-vs-ai", "ai-vs-human", "human-vs-human", "ai-vs-ai"],
        default=None,
        help="Play mode (who plays black/white)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--scoring", default="config/scoring.yaml", help="Path to scoring YAML")
    parser.add_argument("--verbose", action="store_true", help="Log search statistics for every AI move")
    return parser.parse_args(argv)
