"""
Basic usage example for Elo ranking with a caller-defined participant.
"""

import logging
from dataclasses import dataclass

from elo_ranking import EloRanking


@dataclass
class Player:
    name: str
    rating: float = 1400.0

    def get_rating(self):
        return self.rating

    def change_rating(self, delta):
        self.rating += delta


def main():
    logging.basicConfig(level=logging.DEBUG)

    ranking = EloRanking(k_factor=32)
    players = {name: Player(name) for name in ("alice", "bob", "carol")}

    games = [
        ("alice", "bob", "win"),
        ("bob", "carol", "tie"),
        ("carol", "alice", "loss"),
        ("bob", "alice", "win"),
    ]

    for first, second, outcome in games:
        getattr(ranking, outcome)(players[first], players[second])
        print(f"{first} {outcome} vs {second}")

    print("\nStandings:")
    for player in sorted(players.values(), key=lambda p: p.rating, reverse=True):
        print(f"  {player.name:<6} {player.rating:8.2f}")


if __name__ == "__main__":
    main()
