"""Domain entities - core business objects."""
from flight_reservation.domain.entities.airport import Airport
from flight_reservation.domain.entities.passenger import Passenger
from flight_reservation.domain.entities.no_fly_registry import NoFlyRegistry
from flight_reservation.domain.entities.scheduled_flight import Flight, ScheduledFlight
from flight_reservation.domain.entities.itinerary import SingleLegItinerary, CompositeItinerary
from flight_reservation.domain.entities.order import Order, FlightOrder
from flight_reservation.domain.entities.customer import Customer

__all__ = [
    "Airport",
    "Passenger",
    "NoFlyRegistry",
    "Flight",
    "ScheduledFlight",
    "SingleLegItinerary",
    "CompositeItinerary",
    "Order",
    "FlightOrder",
    "Customer",
]
