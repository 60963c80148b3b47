"""
Core Elo rating functionality.
"""

from .rating import Elo
from .elo_rating import DEFAULT_K_FACTOR, EloRanking, expected_score
from .simple_rating import DEFAULT_RATING, SimpleRating
