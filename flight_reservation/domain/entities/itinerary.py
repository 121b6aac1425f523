"""Itinerary domain entities (Composite Pattern)."""
import logging
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from flight_reservation.config.settings import Config
from flight_reservation.domain.entities.airport import Airport
from flight_reservation.domain.entities.passenger import Passenger
from flight_reservation.domain.entities.scheduled_flight import ScheduledFlight
from flight_reservation.domain.exceptions import (
    CapacityUnknownError,
    IncompatibleLegError,
    InsufficientCapacityError,
)
from flight_reservation.domain.interfaces.distance_calculator import IDistanceCalculator
from flight_reservation.domain.interfaces.itinerary import IItinerary


logger = logging.getLogger(__name__)


class SingleLegItinerary(IItinerary):
    """Itinerary made of exactly one scheduled flight; every query delegates to it."""

    def __init__(
        self,
        flight: ScheduledFlight,
        distance_calculator: Optional[IDistanceCalculator] = None,
        cruise_speed_kmh: Optional[float] = None,
    ):
        """
        Initialize single-leg itinerary.

        Args:
            flight: Scheduled flight making up the leg
            distance_calculator: Route distance model (defaults to the
                configured fixed leg distance)
            cruise_speed_kmh: Speed used to estimate flight time
        """
        self.flight = flight
        self._distance_calculator = distance_calculator
        self._cruise_speed_kmh = cruise_speed_kmh or Config.CRUISE_SPEED_KMH

    def price(self) -> float:
        return self.flight.current_price

    def departure(self) -> Airport:
        return self.flight.departure

    def arrival(self) -> Airport:
        return self.flight.arrival

    def departure_time(self) -> datetime:
        return self.flight.departure_time

    def arrival_time(self) -> datetime:
        hours = self.total_distance() / self._cruise_speed_kmh
        return self.flight.departure_time + timedelta(hours=hours)

    def stops(self) -> List[Airport]:
        return []

    def flights(self) -> List[ScheduledFlight]:
        return [self.flight]

    def total_distance(self) -> int:
        if self._distance_calculator is None:
            return Config.DEFAULT_LEG_DISTANCE_KM
        return self._distance_calculator.distance_km(self.flight.departure, self.flight.arrival)

    def passengers(self) -> List[Passenger]:
        return self.flight.passengers

    def add_passengers(self, passengers: Iterable[Passenger]) -> None:
        self.flight.add_passengers(passengers)

    def remove_passengers(self, passengers: Iterable[Passenger]) -> None:
        self.flight.remove_passengers(passengers)

    def available_capacity(self) -> int:
        return self.flight.available_capacity()

    def __repr__(self) -> str:
        return f"SingleLegItinerary({self.flight})"


class CompositeItinerary(IItinerary):
    """
    Journey made of an ordered sequence of itineraries.

    Insertion order is travel order. Each leg must depart from the airport
    the previous leg arrives at, strictly after it lands; legs violating
    this are rejected when added. The journey keeps its own passenger
    roster alongside the rosters of its legs.
    """

    def __init__(self, legs: Optional[Iterable[IItinerary]] = None):
        self._legs: List[IItinerary] = []
        self._passengers: List[Passenger] = []
        for leg in legs or []:
            self.add_leg(leg)

    @property
    def legs(self) -> List[IItinerary]:
        return list(self._legs)

    def add_leg(self, leg: IItinerary) -> None:
        """
        Append a leg to the end of the journey.

        Args:
            leg: Itinerary to append

        Raises:
            IncompatibleLegError: If the leg does not connect to the current last leg
        """
        reason = self._incompatibility(leg)
        if reason:
            logger.warning(f"Rejected leg {leg!r}: {reason}")
            raise IncompatibleLegError(reason)
        self._legs.append(leg)
        logger.debug(f"Added leg {leg!r}, journey now has {len(self._legs)} legs")

    def remove_leg(self, leg: IItinerary) -> None:
        """Remove a leg by identity; unknown legs are ignored."""
        for index, existing in enumerate(self._legs):
            if existing is leg:
                del self._legs[index]
                return

    def _incompatibility(self, leg: IItinerary) -> Optional[str]:
        if leg is self:
            return "a journey cannot contain itself"
        if leg.departure() is None:
            return "cannot add an itinerary without legs"
        if not self._legs:
            return None
        last = self._legs[-1]
        if last.arrival() != leg.departure():
            return f"leg departs from {leg.departure()} but the journey arrives at {last.arrival()}"
        if not leg.departure_time() > last.arrival_time():
            return (
                f"leg departs at {leg.departure_time()} which is not after "
                f"the journey's arrival at {last.arrival_time()}"
            )
        return None

    def price(self) -> float:
        return sum(leg.price() for leg in self._legs)

    def departure(self) -> Optional[Airport]:
        return self._legs[0].departure() if self._legs else None

    def arrival(self) -> Optional[Airport]:
        return self._legs[-1].arrival() if self._legs else None

    def departure_time(self) -> Optional[datetime]:
        return self._legs[0].departure_time() if self._legs else None

    def arrival_time(self) -> Optional[datetime]:
        return self._legs[-1].arrival_time() if self._legs else None

    def stops(self) -> List[Airport]:
        return [leg.arrival() for leg in self._legs[:-1]]

    def flights(self) -> List[ScheduledFlight]:
        return [flight for leg in self._legs for flight in leg.flights()]

    def total_distance(self) -> int:
        return sum(leg.total_distance() for leg in self._legs)

    def passengers(self) -> List[Passenger]:
        return list(self._passengers)

    def add_passengers(self, passengers: Iterable[Passenger]) -> None:
        """
        Book passengers on the journey and on every leg.

        Capacity is checked on every flight before anything changes, so a
        rejected booking leaves every roster untouched. Only passengers a
        flight does not carry yet count against its free seats.

        Raises:
            InsufficientCapacityError: If a flight cannot carry its newcomers
        """
        candidates = []
        for passenger in passengers:
            if passenger not in candidates:
                candidates.append(passenger)
        newcomers = [p for p in candidates if not any(p is booked for booked in self._passengers)]
        if newcomers and not self._legs:
            raise InsufficientCapacityError("Journey has no legs to book passengers on")

        for flight in self.flights():
            missing = [p for p in candidates if not any(p is booked for booked in flight.passengers)]
            if not missing:
                continue
            try:
                available = flight.available_capacity()
            except CapacityUnknownError:
                available = 0
            if available < len(missing):
                raise InsufficientCapacityError(
                    f"Flight {flight.number} can take {available} more passenger(s), "
                    f"{len(missing)} requested"
                )

        self._passengers.extend(newcomers)
        for leg in self._legs:
            leg.add_passengers(candidates)

    def remove_passengers(self, passengers: Iterable[Passenger]) -> None:
        leaving = list(passengers)
        self._passengers = [p for p in self._passengers if not any(p is gone for gone in leaving)]
        for leg in self._legs:
            leg.remove_passengers(leaving)

    def available_capacity(self) -> int:
        """Seats left on the tightest leg; legs with unknown capacity count as full."""
        if not self._legs:
            return 0
        capacities = []
        for leg in self._legs:
            try:
                capacities.append(leg.available_capacity())
            except CapacityUnknownError:
                capacities.append(0)
        return min(capacities)

    def __repr__(self) -> str:
        return f"CompositeItinerary({self._legs!r})"
