"""Placeholder distance model."""
from typing import Optional

from flight_reservation.config.settings import Config
from flight_reservation.domain.entities.airport import Airport
from flight_reservation.domain.interfaces.distance_calculator import IDistanceCalculator


class FixedDistanceCalculator(IDistanceCalculator):
    """
    Distance model returning the same distance for every route.

    Stand-in until real great-circle distances are needed; swap it through
    ``ItineraryFactory`` to change flight-time estimates.
    """

    def __init__(self, distance_km: Optional[int] = None):
        self._distance_km = distance_km if distance_km is not None else Config.DEFAULT_LEG_DISTANCE_KM
        if self._distance_km < 0:
            raise ValueError("distance_km must be non-negative")

    def distance_km(self, departure: Airport, arrival: Airport) -> int:
        return self._distance_km
