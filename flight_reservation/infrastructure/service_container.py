"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from datetime import datetime
from typing import Optional

from flight_reservation.application.use_cases.book_itinerary_use_case import BookItineraryUseCase
from flight_reservation.config.settings import Config, get_config
from flight_reservation.domain.entities.customer import Customer
from flight_reservation.domain.entities.no_fly_registry import NoFlyRegistry
from flight_reservation.domain.entities.scheduled_flight import ScheduledFlight
from flight_reservation.infrastructure.catalog.airport_catalog import AirportCatalog
from flight_reservation.infrastructure.distance.fixed_distance import FixedDistanceCalculator
from flight_reservation.infrastructure.factories.aircraft_factory import AircraftFactory
from flight_reservation.infrastructure.factories.itinerary_factory import ItineraryFactory
from flight_reservation.infrastructure.payments.paypal import PayPalAccountRegistry


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    Builds the shared collaborators (no-fly registry, catalogues, factories)
    from configuration once and threads them into the objects it creates.
    """

    def __init__(self, config_class: Optional[type[Config]] = None):
        """
        Initialize service container.

        Args:
            config_class: Configuration class (defaults to the environment's)
        """
        self.config = config_class or get_config()
        self._logger = logging.getLogger(__name__)
        self._no_fly_registry: Optional[NoFlyRegistry] = None
        self._paypal_accounts: Optional[PayPalAccountRegistry] = None
        self._airport_catalog: Optional[AirportCatalog] = None
        self._itinerary_factory: Optional[ItineraryFactory] = None
        self._book_itinerary_use_case: Optional[BookItineraryUseCase] = None

    def get_no_fly_registry(self) -> NoFlyRegistry:
        """Get or create the no-fly registry."""
        if self._no_fly_registry is None:
            self._no_fly_registry = NoFlyRegistry.from_names(self.config.no_fly_names())
            self._logger.info(f"NoFlyRegistry created with {len(self._no_fly_registry)} name(s)")
        return self._no_fly_registry

    def get_paypal_accounts(self) -> PayPalAccountRegistry:
        """Get or create the PayPal account registry."""
        if self._paypal_accounts is None:
            self._paypal_accounts = PayPalAccountRegistry()
            self._logger.info("PayPalAccountRegistry created")
        return self._paypal_accounts

    def get_airport_catalog(self) -> AirportCatalog:
        """Get or create the airport catalogue."""
        if self._airport_catalog is None:
            self._airport_catalog = AirportCatalog()
            self._logger.info(f"AirportCatalog created with {len(self._airport_catalog.all())} airport(s)")
        return self._airport_catalog

    def get_itinerary_factory(self) -> ItineraryFactory:
        """Get or create the itinerary factory."""
        if self._itinerary_factory is None:
            self._itinerary_factory = ItineraryFactory(
                distance_calculator=FixedDistanceCalculator(self.config.DEFAULT_LEG_DISTANCE_KM),
                cruise_speed_kmh=self.config.CRUISE_SPEED_KMH,
            )
            self._logger.info("ItineraryFactory created")
        return self._itinerary_factory

    def get_book_itinerary_use_case(self) -> BookItineraryUseCase:
        """Get or create the booking use case."""
        if self._book_itinerary_use_case is None:
            self._book_itinerary_use_case = BookItineraryUseCase()
            self._logger.info("BookItineraryUseCase created")
        return self._book_itinerary_use_case

    def create_customer(self, name: str, email: str) -> Customer:
        """Create a customer wired to the shared registry and itinerary factory."""
        return Customer(
            name,
            email,
            no_fly_registry=self.get_no_fly_registry(),
            itinerary_factory=self.get_itinerary_factory(),
        )

    def schedule_flight(
        self,
        number: int,
        departure_code: str,
        arrival_code: str,
        aircraft_kind: str,
        aircraft_model: str,
        departure_time: datetime,
        price: Optional[float] = None,
    ) -> ScheduledFlight:
        """
        Schedule a flight between two catalogued airports.

        Raises:
            ValueError: If an airport is unknown or the aircraft may not use the route
            UnknownAircraftError: If the aircraft kind or model is unknown
        """
        catalog = self.get_airport_catalog()
        aircraft = AircraftFactory.create(aircraft_kind, aircraft_model)
        if price is None:
            price = self.config.DEFAULT_FLIGHT_PRICE
        flight = ScheduledFlight(
            number,
            catalog.get(departure_code),
            catalog.get(arrival_code),
            aircraft,
            departure_time,
            price,
        )
        self._logger.info(f"Scheduled flight {flight} departing {departure_time}")
        return flight
