"""Interface for bookable itineraries (Composite Pattern).

A single flight leg and a multi-leg journey expose the same queries, so
journeys can be nested to any depth.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Iterable, List, Optional

if TYPE_CHECKING:
    from flight_reservation.domain.entities.airport import Airport
    from flight_reservation.domain.entities.passenger import Passenger
    from flight_reservation.domain.entities.scheduled_flight import ScheduledFlight


class IItinerary(ABC):
    """
    Interface for itineraries following Composite Pattern.

    Every query is recomputed from the underlying flights, so changes to a
    flight or to a journey's legs are reflected immediately.
    """

    @abstractmethod
    def price(self) -> float:
        """Total price of the itinerary."""
        pass

    @abstractmethod
    def departure(self) -> Optional["Airport"]:
        """Airport the itinerary starts from, or None if it has no legs."""
        pass

    @abstractmethod
    def arrival(self) -> Optional["Airport"]:
        """Airport the itinerary ends at, or None if it has no legs."""
        pass

    @abstractmethod
    def departure_time(self) -> Optional[datetime]:
        """Departure time of the first leg, or None if it has no legs."""
        pass

    @abstractmethod
    def arrival_time(self) -> Optional[datetime]:
        """Arrival time of the last leg, or None if it has no legs."""
        pass

    @abstractmethod
    def stops(self) -> List["Airport"]:
        """Intermediate airports, in travel order."""
        pass

    @abstractmethod
    def flights(self) -> List["ScheduledFlight"]:
        """Every scheduled flight in the itinerary, flattened in travel order."""
        pass

    @abstractmethod
    def total_distance(self) -> int:
        """Total distance flown, in kilometres."""
        pass

    @abstractmethod
    def passengers(self) -> List["Passenger"]:
        """Passengers booked on the itinerary."""
        pass

    @abstractmethod
    def add_passengers(self, passengers: Iterable["Passenger"]) -> None:
        """
        Book passengers on every flight of the itinerary.

        Args:
            passengers: Passengers to add

        Raises:
            InsufficientCapacityError: If a leg cannot carry them
        """
        pass

    @abstractmethod
    def remove_passengers(self, passengers: Iterable["Passenger"]) -> None:
        """
        Remove passengers from every flight of the itinerary.

        Args:
            passengers: Passengers to remove
        """
        pass

    @abstractmethod
    def available_capacity(self) -> int:
        """
        Number of passengers the itinerary can still take.

        Raises:
            CapacityUnknownError: If the capacity cannot be determined
        """
        pass

    def add_passenger(self, passenger: "Passenger") -> None:
        """Book a single passenger on the itinerary."""
        self.add_passengers([passenger])

    def remove_passenger(self, passenger: "Passenger") -> None:
        """Remove a single passenger from the itinerary."""
        self.remove_passengers([passenger])
