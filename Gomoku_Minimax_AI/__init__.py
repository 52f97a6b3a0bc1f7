"""Gomoku_Minimax_AI package exports."""

from .Board import Board, EMPTY, BLACK, WHITE
from .Gomokugame import Gomokugame
from .Player import Player, HumanPlayer, AIPlayer

# Subpackages for rules, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "EMPTY",
    "BLACK",
    "WHITE",
    "Gomokugame",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "ai",
    "engine",
    "utils",
]
