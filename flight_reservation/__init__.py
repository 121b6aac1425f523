"""Flight reservation core: itineraries, orders, payments and flight notifications."""
import logging
import sys
from typing import Optional

from flight_reservation.config.settings import Config, get_config
from flight_reservation.domain.entities import (
    Airport,
    CompositeItinerary,
    Customer,
    FlightOrder,
    NoFlyRegistry,
    Passenger,
    ScheduledFlight,
    SingleLegItinerary,
)
from flight_reservation.infrastructure.service_container import ServiceContainer


def create_booking_system(config_class: Optional[type[Config]] = None) -> ServiceContainer:
    """
    Create a configured booking system.

    Implements Factory Pattern: validates configuration, configures logging
    and returns the container that builds customers and flights.

    Args:
        config_class: Optional configuration class (for testing)

    Returns:
        Configured ServiceContainer
    """
    config = config_class or get_config()
    config.validate()
    _configure_logging(config)

    container = ServiceContainer(config)
    logging.getLogger(__name__).info(f"Booking system initialized with {config.__name__}")
    return container


def _configure_logging(config: type[Config]) -> None:
    """Configure application logging."""
    level = logging.DEBUG if config.DEBUG else getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True,
    )


__all__ = [
    "create_booking_system",
    "ServiceContainer",
    "Airport",
    "CompositeItinerary",
    "Customer",
    "FlightOrder",
    "NoFlyRegistry",
    "Passenger",
    "ScheduledFlight",
    "SingleLegItinerary",
]
