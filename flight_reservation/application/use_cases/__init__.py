"""Application use cases."""
from flight_reservation.application.use_cases.book_itinerary_use_case import (
    BookingRequest,
    BookingResult,
    BookItineraryUseCase,
)

__all__ = [
    "BookingRequest",
    "BookingResult",
    "BookItineraryUseCase",
]
