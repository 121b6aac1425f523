"""Interface for aircraft models.

Airports and flights only ever need the model name and the capacities,
so every aircraft kind (planes, helicopters, drones) implements this
contract.
"""
from abc import ABC, abstractmethod
from typing import Optional


class IAircraft(ABC):
    """Interface for an aircraft that can be assigned to a scheduled flight."""

    @property
    @abstractmethod
    def model(self) -> str:
        """Model name checked against the airports' allowed aircraft."""
        pass

    @property
    @abstractmethod
    def passenger_capacity(self) -> Optional[int]:
        """
        Number of passenger seats.

        Returns:
            Seat count, or None if the aircraft cannot report it
        """
        pass

    @property
    @abstractmethod
    def crew_capacity(self) -> Optional[int]:
        """
        Number of crew members the aircraft carries.

        Returns:
            Crew count, or None if the aircraft cannot report it
        """
        pass
