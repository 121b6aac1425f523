"""Distance models."""
from flight_reservation.infrastructure.distance.fixed_distance import FixedDistanceCalculator

__all__ = ["FixedDistanceCalculator"]
