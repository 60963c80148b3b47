"""
The rating capability every ranked participant provides.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Elo(Protocol):
    """
    Anything that can report a rating and accept a rating adjustment.

    Participants never need to inherit from this class; any object with
    matching ``get_rating`` and ``change_rating`` methods can be ranked.
    """

    def get_rating(self) -> float:
        """Return the current rating."""
        ...

    def change_rating(self, delta: float) -> None:
        """Add ``delta`` to the current rating."""
        ...
