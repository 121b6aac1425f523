"""Passenger domain entity."""
from dataclasses import dataclass


@dataclass(eq=False)
class Passenger:
    """
    Domain entity representing a travelling passenger.

    Passengers compare by identity: two travellers may share a name.
    """

    name: str

    def __post_init__(self):
        """Validate passenger entity."""
        if not self.name or not self.name.strip():
            raise ValueError("name is required")
