"""Aircraft implementations."""
from flight_reservation.infrastructure.aircraft.passenger_plane import PassengerPlane
from flight_reservation.infrastructure.aircraft.helicopter import Helicopter
from flight_reservation.infrastructure.aircraft.passenger_drone import PassengerDrone

__all__ = [
    "PassengerPlane",
    "Helicopter",
    "PassengerDrone",
]
