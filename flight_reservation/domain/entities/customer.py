"""Customer domain entity."""
import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from flight_reservation.domain.entities.no_fly_registry import NoFlyRegistry
from flight_reservation.domain.entities.order import FlightOrder
from flight_reservation.domain.entities.passenger import Passenger
from flight_reservation.domain.entities.scheduled_flight import ScheduledFlight
from flight_reservation.domain.exceptions import (
    CapacityUnknownError,
    IncompatibleLegError,
    InsufficientCapacityError,
    InvalidOrderError,
)
from flight_reservation.domain.interfaces.flight_observer import IFlightObserver
from flight_reservation.domain.interfaces.itinerary import IItinerary
from flight_reservation.utils.notification_formatter import NotificationFormatter

if TYPE_CHECKING:
    from flight_reservation.infrastructure.factories.itinerary_factory import ItineraryFactory


logger = logging.getLogger(__name__)


class Customer(IFlightObserver):
    """
    A booking customer.

    Creates flight orders and, once an order is placed, follows every flight
    in it, keeping a log of the change notifications it receives.
    """

    def __init__(
        self,
        name: str,
        email: str,
        no_fly_registry: NoFlyRegistry,
        itinerary_factory: Optional["ItineraryFactory"] = None,
    ):
        """
        Initialize customer.

        Args:
            name: Customer name, checked against the no-fly registry
            email: Contact email
            no_fly_registry: Names barred from booking
            itinerary_factory: Factory used to build itineraries from flights
        """
        if not name:
            raise ValueError("name is required")
        self.name = name
        self.email = email
        self.orders: List[FlightOrder] = []
        self.notifications: List[str] = []
        self._no_fly_registry = no_fly_registry
        if itinerary_factory is None:
            # Import here to avoid circular dependencies
            from flight_reservation.infrastructure.factories.itinerary_factory import ItineraryFactory
            itinerary_factory = ItineraryFactory()
        self._itinerary_factory = itinerary_factory

    def update(self, flight: ScheduledFlight, message: str) -> None:
        try:
            notification = NotificationFormatter.for_customer(
                flight.number, flight.departure.code, flight.arrival.code, message
            )
        except Exception as e:
            logger.error(f"Could not format notification for {self.name}: {e}", exc_info=True)
            notification = "Notification: <unprintable message>"
        self.notifications.append(notification)
        logger.info(f"Customer {self.name} received: {notification}")

    def create_order(
        self,
        passenger_names: Sequence[str],
        flights: Sequence[ScheduledFlight],
        price: Optional[float] = None,
    ) -> FlightOrder:
        """
        Create an order for a list of connecting flights.

        Args:
            passenger_names: Names of the travelling passengers
            flights: Flights in travel order
            price: Order price (defaults to the itinerary price per passenger)

        Returns:
            The new, still unpaid order

        Raises:
            InvalidOrderError: If the order fails validation
        """
        if not flights:
            raise InvalidOrderError("Order has no flights")
        try:
            itinerary = self._itinerary_factory.from_flights(flights)
        except IncompatibleLegError as e:
            raise InvalidOrderError(f"Flights do not form a valid itinerary: {e}") from e
        return self.create_order_for_itinerary(passenger_names, itinerary, price)

    def create_order_for_itinerary(
        self,
        passenger_names: Sequence[str],
        itinerary: IItinerary,
        price: Optional[float] = None,
    ) -> FlightOrder:
        """
        Create an order for an already assembled itinerary.

        Every check runs before anything changes: a rejected order books no
        passengers and registers no observers.

        Args:
            passenger_names: Names of the travelling passengers
            itinerary: Itinerary to book
            price: Order price (defaults to the itinerary price per passenger)

        Returns:
            The new, still unpaid order

        Raises:
            InvalidOrderError: If the order fails validation
        """
        problem = self._order_problem(passenger_names, itinerary)
        if problem:
            logger.warning(f"Order rejected for customer {self.name}: {problem}")
            raise InvalidOrderError(problem)

        if price is None:
            price = itinerary.price() * len(passenger_names)
        passengers = [Passenger(name) for name in passenger_names]

        order = FlightOrder(itinerary, self._no_fly_registry, price=price)
        order.customer = self
        order.passengers = passengers

        try:
            itinerary.add_passengers(passengers)
        except InsufficientCapacityError as e:
            raise InvalidOrderError(str(e)) from e
        for flight in itinerary.flights():
            flight.register_observer(self)

        self.orders.append(order)
        logger.info(
            f"Order {order.id} created for {self.name}: {len(passengers)} passenger(s), price {price:.2f}"
        )
        return order

    def _order_problem(self, passenger_names: Sequence[str], itinerary: IItinerary) -> Optional[str]:
        if not passenger_names:
            return "Order has no passengers"
        if any(not name or not name.strip() for name in passenger_names):
            return "Passenger names must not be empty"
        if self.name in self._no_fly_registry:
            return f"Customer {self.name} is on the no-fly list"
        barred = [name for name in passenger_names if name in self._no_fly_registry]
        if barred:
            return f"Passengers on the no-fly list: {', '.join(barred)}"
        flights = itinerary.flights()
        if not flights:
            return "Itinerary has no flights"
        for flight in flights:
            if flight.is_cancelled:
                return f"Flight {flight.number} is cancelled"
            try:
                available = flight.available_capacity()
            except CapacityUnknownError:
                return f"Capacity of flight {flight.number} is unknown"
            if available < len(passenger_names):
                return (
                    f"Insufficient capacity on flight {flight.number}: "
                    f"{available} seat(s) left, {len(passenger_names)} requested"
                )
        return None

    def __repr__(self) -> str:
        return f"Customer({self.name!r})"
