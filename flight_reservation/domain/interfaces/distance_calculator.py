"""Interface for route distance models (Strategy Pattern)."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flight_reservation.domain.entities.airport import Airport


class IDistanceCalculator(ABC):
    """
    Interface for computing the distance between two airports.

    Flight-time estimates are derived from this distance, so swapping the
    implementation changes itinerary arrival times as well.
    """

    @abstractmethod
    def distance_km(self, departure: "Airport", arrival: "Airport") -> int:
        """
        Compute the distance flown between two airports.

        Args:
            departure: Departure airport
            arrival: Arrival airport

        Returns:
            Distance in whole kilometres
        """
        pass
