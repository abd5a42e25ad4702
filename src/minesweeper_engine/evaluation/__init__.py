"""
Evaluation module for Minesweeper agents.

Provides evaluation loops, statistics and result export.
"""
from .evaluator import (
    EvaluationConfig,
    EvaluationStats,
    Evaluator,
    GameStats,
)

__all__ = [
    "EvaluationConfig",
    "EvaluationStats",
    "Evaluator",
    "GameStats",
]
