"""
In-memory participant for callers that do not have their own rating storage.
"""

import numpy as np

DEFAULT_RATING = 1400.0


class SimpleRating:
    """
    A participant that keeps its rating in memory.
    The rating is stored in single precision, matching the arithmetic
    EloRanking performs.
    """

    def __init__(self, rating: float = DEFAULT_RATING):
        """
        Initialize a SimpleRating.

        Args:
            rating: Starting rating
        """
        self.rating = np.float32(rating)

    def get_rating(self) -> float:
        return float(self.rating)

    def change_rating(self, delta: float) -> None:
        self.rating = np.float32(self.rating + np.float32(delta))

    def __float__(self) -> float:
        return self.get_rating()

    def __repr__(self) -> str:
        return f"SimpleRating(rating={self.get_rating()!r})"
