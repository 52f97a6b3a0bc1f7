"""Scoring constants and naive streak evaluation for Gomoku positions."""

from dataclasses import dataclass
from pathlib import Path

import yaml

try:
    from Board import DIRECTIONS
except ImportError:
    from Gomoku_Minimax_AI.Board import DIRECTIONS


# Streaks are measured forward from each stone, capped at this length.
MAX_STREAK = 5

DEFAULT_STREAK_WEIGHTS = {
    2: 10,
    3: 100,
    4: 5000,
}


@dataclass(frozen=True)
class ScoringConfig:
    """Terminal sentinels and per-streak weights used by the minimax search.

    streak_weights accepts a mapping and is stored as a sorted tuple of
    (length, weight) pairs so the config is hashable and immutable.
    """

    win_score: int = 100000
    lose_score: int = -100000
    draw_score: int = 0
    streak_weights: tuple = tuple(sorted(DEFAULT_STREAK_WEIGHTS.items()))

    def __post_init__(self):
        if self.win_score <= self.lose_score:
            raise ValueError("win_score must be greater than lose_score")
        weights = dict(self.streak_weights)
        for length in weights:
            if not 2 <= length < MAX_STREAK:
                # A streak of MAX_STREAK is a terminal win and must not be scored here.
                raise ValueError(f"streak length {length} must be between 2 and {MAX_STREAK - 1}")
        object.__setattr__(self, "streak_weights", tuple(sorted(weights.items())))

    def weight_for(self, streak):
        for length, weight in self.streak_weights:
            if length == streak:
                return weight
        return 0


DEFAULT_SCORING = ScoringConfig()


def load_scoring(path="config/scoring.yaml"):
    """Load scoring values from YAML; fallback to defaults when the file is missing."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Gomoku_Minimax_AI.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return DEFAULT_SCORING

    if data is None:
        return DEFAULT_SCORING
    if not isinstance(data, dict):
        raise ValueError(f"Malformed scoring file {path}: top level must be a mapping")

    weights = data.get("streak_weights", DEFAULT_STREAK_WEIGHTS)
    try:
        return ScoringConfig(
            win_score=int(data.get("win_score", DEFAULT_SCORING.win_score)),
            lose_score=int(data.get("lose_score", DEFAULT_SCORING.lose_score)),
            draw_score=int(data.get("draw_score", DEFAULT_SCORING.draw_score)),
            streak_weights={int(k): int(v) for k, v in (weights or {}).items()},
        )
    except (TypeError, AttributeError) as exc:
        raise ValueError(f"Malformed scoring file {path}: {exc}") from exc


def forward_streak(board, r, c, dr, dc, symbol):
    """Length of the run of symbol starting at (r, c) and heading (dr, dc), at most MAX_STREAK."""
    streak = 1
    for k in range(1, MAX_STREAK):
        nr, nc = r + dr * k, c + dc * k
        if board.in_bounds(nr, nc) and board.cells[nr][nc] == symbol:
            streak += 1
        else:
            break
    return streak


def score_lines(board, symbol, scoring=None):
    """
    Sum streak weights for every stone of symbol in the four forward directions.
    Ends of a streak are not inspected, so a blocked three scores like an open one.
    """
    scoring = scoring or DEFAULT_SCORING
    score = 0
    for r in range(board.size):
        for c in range(board.size):
            if board.cells[r][c] != symbol:
                continue
            for dr, dc in DIRECTIONS:
                score += scoring.weight_for(forward_streak(board, r, c, dr, dc, symbol))
    return score


def score_board(board, ai_symbol, opponent_symbol, scoring=None):
    """Positive favors ai_symbol, negative favors the opponent."""
    return score_lines(board, ai_symbol, scoring) - score_lines(board, opponent_symbol, scoring)
