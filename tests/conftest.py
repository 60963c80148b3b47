"""
Shared fixtures for the Elo ranking tests.
"""

import pytest
from unittest.mock import MagicMock

from elo_ranking import EloRanking, SimpleRating


@pytest.fixture
def ranking():
    """Create an EloRanking with the standard K-factor."""
    return EloRanking(32)


@pytest.fixture
def players():
    """Create two participants at the default rating."""
    return SimpleRating(), SimpleRating()


@pytest.fixture
def mock_player():
    """Create a factory for mock participants with a fixed rating."""
    def make(rating):
        mock = MagicMock()
        mock.get_rating.return_value = rating
        return mock
    return make
