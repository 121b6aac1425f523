"""Factories for aircraft, itineraries and payment methods."""
from flight_reservation.infrastructure.factories.aircraft_factory import AircraftFactory
from flight_reservation.infrastructure.factories.itinerary_factory import ItineraryFactory
from flight_reservation.infrastructure.factories.payment_factory import PaymentMethodFactory

__all__ = [
    "AircraftFactory",
    "ItineraryFactory",
    "PaymentMethodFactory",
]
