"""Interface for flight change observers (Observer Pattern)."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flight_reservation.domain.entities.scheduled_flight import ScheduledFlight


class IFlightObserver(ABC):
    """Interface for anything that wants to hear about changes to a flight."""

    @abstractmethod
    def update(self, flight: "ScheduledFlight", message: str) -> None:
        """
        Receive a change notification.

        Implementations must not raise: delivery is synchronous and a failing
        observer would stop the remaining observers from being notified.

        Args:
            flight: Flight that changed
            message: Human-readable description of the change
        """
        pass
