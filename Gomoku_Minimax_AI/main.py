"""Entry point for Gomoku matches. Load config, wire players, start Gomokugame."""

import random
from pathlib import Path

import yaml

try:
    from utils.cli import parse_args
    from utils.logger import log_event, configure
    from Gomokugame import Gomokugame
    from Board import BLACK, WHITE
    from Player import HumanPlayer, AIPlayer
    from ai import heuristic
except ImportError:
    from Gomoku_Minimax_AI.utils.cli import parse_args
    from Gomoku_Minimax_AI.utils.logger import log_event, configure
    from Gomoku_Minimax_AI.Gomokugame import Gomokugame
    from Gomoku_Minimax_AI.Board import BLACK, WHITE
    from Gomoku_Minimax_AI.Player import HumanPlayer, AIPlayer
    from Gomoku_Minimax_AI.ai import heuristic


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Gomoku_Minimax_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def _pick(cli_value, settings, key, default):
    """CLI value when given (zero included), else the settings value, else default."""
    if cli_value is not None:
        return cli_value
    return settings.get(key, default)


def build_players(mode, depth, scoring, seed=None):
    """Return (black, white) players for the requested mode."""
    rng = random.Random(seed)

    def ai(symbol, opponent):
        # Separate streams so two AIs do not share tie-break draws.
        return AIPlayer(symbol, opponent, depth=depth, scoring=scoring, rng=random.Random(rng.random()), name=f"AI {symbol}")

    if mode == "human-vs-ai":
        return HumanPlayer(BLACK, name="Player"), ai(WHITE, BLACK)
    if mode == "ai-vs-human":
        return ai(BLACK, WHITE), HumanPlayer(WHITE, name="Player")
    if mode == "human-vs-human":
        return HumanPlayer(BLACK, name="Player 1"), HumanPlayer(WHITE, name="Player 2")
    if mode == "ai-vs-ai":
        return ai(BLACK, WHITE), ai(WHITE, BLACK)
    raise ValueError(f"Unsupported mode: {mode}")


def main(argv=None):
    args = parse_args(argv)
    configure(verbose=args.verbose)
    settings = load_settings(args.settings)

    board_size = _pick(args.board_size, settings, "board_size", 9)
    win_length = _pick(args.win_length, settings, "win_length", 5)
    depth = _pick(args.depth, settings, "search_depth", 3)
    move_timeout = _pick(args.timeout, settings, "move_timeout_seconds", 0)
    mode = _pick(args.mode, settings, "mode", "human-vs-ai")
    seed = _pick(args.seed, settings, "seed", None)

    scoring = heuristic.load_scoring(args.scoring)
    black, white = build_players(mode, depth, scoring, seed=seed)

    game = Gomokugame(
        board_size=board_size,
        black_player=black,
        white_player=white,
        win_length=win_length,
        move_timeout=move_timeout,
        logger=log_event,
        renderer=lambda board: print(board.render()),
    )
    result = game.play()
    print(f"{game.players[result].name} wins" if result else "Draw")
    return result


if __name__ == "__main__":
    main()
