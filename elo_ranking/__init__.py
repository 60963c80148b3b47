"""
Elo Ranking - Elo pairwise rating updates for any participant type.
"""

from .core import (
    DEFAULT_K_FACTOR,
    DEFAULT_RATING,
    Elo,
    EloRanking,
    SimpleRating,
    expected_score,
)

__version__ = "0.1.0"

__all__ = [
    "Elo",
    "EloRanking",
    "expected_score",
    "SimpleRating",
    "DEFAULT_K_FACTOR",
    "DEFAULT_RATING",
]
