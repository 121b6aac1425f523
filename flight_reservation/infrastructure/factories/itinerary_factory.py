"""Factory for assembling itineraries (Factory Pattern)."""
import logging
from typing import Optional, Sequence

from flight_reservation.config.settings import Config
from flight_reservation.domain.entities.itinerary import CompositeItinerary, SingleLegItinerary
from flight_reservation.domain.entities.scheduled_flight import ScheduledFlight
from flight_reservation.domain.interfaces.distance_calculator import IDistanceCalculator
from flight_reservation.domain.interfaces.itinerary import IItinerary
from flight_reservation.infrastructure.distance.fixed_distance import FixedDistanceCalculator


logger = logging.getLogger(__name__)


class ItineraryFactory:
    """
    Factory for building single-leg and multi-leg itineraries.

    Every single leg it creates shares the same distance model and cruise
    speed, so flight-time estimates stay consistent within a journey.
    """

    def __init__(
        self,
        distance_calculator: Optional[IDistanceCalculator] = None,
        cruise_speed_kmh: Optional[float] = None,
    ):
        """
        Initialize itinerary factory.

        Args:
            distance_calculator: Route distance model (defaults to the fixed placeholder)
            cruise_speed_kmh: Speed used to estimate flight times
        """
        self.distance_calculator = distance_calculator or FixedDistanceCalculator()
        self.cruise_speed_kmh = cruise_speed_kmh or Config.CRUISE_SPEED_KMH

    def single_leg(self, flight: ScheduledFlight) -> SingleLegItinerary:
        return SingleLegItinerary(flight, self.distance_calculator, self.cruise_speed_kmh)

    def from_flights(self, flights: Sequence[ScheduledFlight]) -> IItinerary:
        """
        Build an itinerary from flights in travel order.

        Args:
            flights: Flights to chain

        Returns:
            A single leg for one flight, a multi-leg journey otherwise

        Raises:
            ValueError: If no flights are given
            IncompatibleLegError: If consecutive flights do not connect
        """
        if not flights:
            raise ValueError("At least one flight is required")
        if len(flights) == 1:
            return self.single_leg(flights[0])
        journey = CompositeItinerary([self.single_leg(flight) for flight in flights])
        logger.info(f"Built journey {journey.departure()} -> {journey.arrival()} with {len(flights)} legs")
        return journey

    def from_itineraries(self, itineraries: Sequence[IItinerary]) -> CompositeItinerary:
        """
        Chain existing itineraries into one journey.

        Raises:
            IncompatibleLegError: If consecutive itineraries do not connect
        """
        return CompositeItinerary(itineraries)
