"""Domain interfaces following Dependency Inversion Principle."""

from flight_reservation.domain.interfaces.aircraft import IAircraft
from flight_reservation.domain.interfaces.distance_calculator import IDistanceCalculator
from flight_reservation.domain.interfaces.payment_method import IPaymentMethod
from flight_reservation.domain.interfaces.flight_observer import IFlightObserver
from flight_reservation.domain.interfaces.flight_subject import IFlightSubject
from flight_reservation.domain.interfaces.itinerary import IItinerary

__all__ = [
    "IAircraft",
    "IDistanceCalculator",
    "IPaymentMethod",
    "IFlightObserver",
    "IFlightSubject",
    "IItinerary",
]
