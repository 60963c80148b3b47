"""
Core implementation of the Elo rating system.
"""

import logging

import numpy as np

from .rating import Elo

logger = logging.getLogger(__name__)

DEFAULT_K_FACTOR = 32

# A RATING_SCALE point advantage means RATING_BASE:1 expected odds.
RATING_SCALE = np.float32(400.0)
RATING_BASE = np.float32(10.0)


def expected_score(player_one: Elo, player_two: Elo) -> np.float32:
    """
    Calculate the expected score for player one against player two.

    Args:
        player_one: Participant whose expectation is computed
        player_two: Opposing participant

    Returns:
        Expected score for player one (between 0 and 1), in single precision
    """
    rating_one = np.float32(player_one.get_rating())
    rating_two = np.float32(player_two.get_rating())
    # Extreme gaps overflow to inf, which saturates the score to 0.
    with np.errstate(over="ignore"):
        odds = np.power(RATING_BASE, (rating_two - rating_one) / RATING_SCALE)
        return np.float32(1.0) / (np.float32(1.0) + odds)


class EloRanking:
    """
    Applies Elo rating updates to pairs of participants.

    The only state is the K-factor, the maximum number of rating points at
    stake in a single game. Participants are anything implementing the Elo
    protocol and are updated in place.
    """

    def __init__(self, k_factor: int = DEFAULT_K_FACTOR):
        """
        Initialize an Elo ranking system.

        Args:
            k_factor: K-factor for Elo calculation (determines how much ratings change)
        """
        self._k_factor = k_factor

    @property
    def k_factor(self) -> int:
        return self._k_factor

    @k_factor.setter
    def k_factor(self, k_factor: int) -> None:
        self._k_factor = k_factor

    def get_k_factor(self) -> int:
        """Return the K-factor."""
        return self._k_factor

    def set_k_factor(self, k_factor: int) -> None:
        """Change the K-factor. Any value is accepted as-is."""
        self._k_factor = k_factor

    def _calculate_rating(self, player_one: Elo, player_two: Elo, score: float) -> None:
        """
        Move rating points between two participants.

        Args:
            player_one: Participant the score refers to
            player_two: Opponent
            score: Actual score for player one (1 for win, 0.5 for draw)
        """
        expected = expected_score(player_one, player_two)
        change = np.float32(self._k_factor) * (np.float32(score) - expected)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Elo update: %s vs %s, score=%s, expected=%s, change=%s",
                player_one.get_rating(),
                player_two.get_rating(),
                score,
                expected,
                change,
            )

        player_one.change_rating(float(change))
        player_two.change_rating(float(-change))

    def win(self, winner: Elo, loser: Elo) -> None:
        """
        Record a win for ``winner`` over ``loser``.

        Args:
            winner: Participant that won the game
            loser: Participant that lost the game
        """
        self._calculate_rating(winner, loser, 1.0)

    def tie(self, player_one: Elo, player_two: Elo) -> None:
        """Record a draw. Equal ratings stay unchanged."""
        self._calculate_rating(player_one, player_two, 0.5)

    def loss(self, loser: Elo, winner: Elo) -> None:
        """Record a loss for ``loser`` against ``winner``."""
        self.win(winner, loser)

    def __repr__(self) -> str:
        return f"EloRanking(k_factor={self._k_factor!r})"
