"""Flight domain entities.

``ScheduledFlight`` is the notification source of the booking core: every
change to its price, schedule, roster or status is broadcast to the
customers who booked it.
"""
import logging
import weakref
from datetime import datetime
from typing import Iterable, List, Optional

from flight_reservation.config.settings import Config
from flight_reservation.domain.entities.airport import Airport
from flight_reservation.domain.entities.passenger import Passenger
from flight_reservation.domain.exceptions import CapacityUnknownError, InsufficientCapacityError
from flight_reservation.domain.interfaces.aircraft import IAircraft
from flight_reservation.domain.interfaces.flight_observer import IFlightObserver
from flight_reservation.domain.interfaces.flight_subject import IFlightSubject
from flight_reservation.utils.notification_formatter import NotificationFormatter


logger = logging.getLogger(__name__)


class Flight:
    """Domain entity representing a route flown by a given aircraft."""

    def __init__(self, number: int, departure: Airport, arrival: Airport, aircraft: IAircraft):
        """
        Initialize flight.

        Args:
            number: Flight number
            departure: Departure airport
            arrival: Arrival airport
            aircraft: Aircraft operating the route

        Raises:
            ValueError: If the number is missing or the aircraft is not
                allowed at either airport
        """
        if number is None or number == "":
            raise ValueError("number is required")
        self.number = number
        self.departure = departure
        self.arrival = arrival
        self.aircraft = aircraft
        self._check_validity()

    def _check_validity(self) -> None:
        model = self.aircraft.model
        if not self.departure.allows(model) or not self.arrival.allows(model):
            raise ValueError(
                f"Aircraft {model} is not valid for route {self.departure.code}/{self.arrival.code}"
            )

    def __str__(self) -> str:
        return f"{self.aircraft.model}-{self.number}-{self.departure.code}/{self.arrival.code}"


class ScheduledFlight(Flight, IFlightSubject):
    """
    A dated flight instance with a price, a passenger roster and observers.

    Observers are held by weak reference: a customer that is no longer used
    anywhere else silently drops out of the list. Forgetting to call
    ``remove_observer`` therefore only keeps a dead slot around until the
    next delivery prunes it.

    Delivery is synchronous and works on a snapshot of the observer list
    taken when ``notify_observers`` is called; observers registered during
    delivery only receive later messages.
    """

    def __init__(
        self,
        number: int,
        departure: Airport,
        arrival: Airport,
        aircraft: IAircraft,
        departure_time: datetime,
        current_price: Optional[float] = None,
    ):
        super().__init__(number, departure, arrival, aircraft)
        if current_price is None:
            current_price = Config.DEFAULT_FLIGHT_PRICE
        if current_price < 0:
            raise ValueError("current_price must be non-negative")
        self._departure_time = departure_time
        self._current_price = float(current_price)
        self._passengers: List[Passenger] = []
        self._observers: List[weakref.ref] = []
        self._cancelled = False

    # Observer management

    def register_observer(self, observer: IFlightObserver) -> None:
        if self._find_observer(observer) is not None:
            return
        self._observers.append(weakref.ref(observer))
        logger.debug(f"Observer {observer!r} registered on flight {self.number}")

    def remove_observer(self, observer: IFlightObserver) -> None:
        index = self._find_observer(observer)
        if index is not None:
            del self._observers[index]

    def notify_observers(self, message: str) -> None:
        snapshot = list(self._observers)
        for ref in snapshot:
            observer = ref()
            if observer is None:
                continue
            logger.debug(f"Delivering to {observer!r}: {message}")
            observer.update(self, message)
        self._observers = [ref for ref in self._observers if ref() is not None]

    def observers(self) -> List[IFlightObserver]:
        """Return the live observers in registration order."""
        return [observer for observer in (ref() for ref in self._observers) if observer is not None]

    def _find_observer(self, observer: IFlightObserver) -> Optional[int]:
        for index, ref in enumerate(self._observers):
            if ref() is observer:
                return index
        return None

    # State changes broadcast to observers

    @property
    def departure_time(self) -> datetime:
        return self._departure_time

    @property
    def current_price(self) -> float:
        return self._current_price

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    @property
    def passengers(self) -> List[Passenger]:
        return list(self._passengers)

    def set_price(self, new_price: float) -> None:
        """
        Change the ticket price and notify observers.

        Raises:
            ValueError: If the price is negative
        """
        if new_price < 0:
            raise ValueError("price must be non-negative")
        old_price = self._current_price
        self._current_price = float(new_price)
        logger.info(f"Flight {self.number} price {old_price:.2f} -> {new_price:.2f}")
        self.notify_observers(NotificationFormatter.price_changed(self.number, old_price, new_price))

    def reschedule(self, new_departure_time: datetime) -> None:
        """Move the departure time and notify observers."""
        old_time = self._departure_time
        self._departure_time = new_departure_time
        logger.info(f"Flight {self.number} rescheduled from {old_time} to {new_departure_time}")
        self.notify_observers(
            NotificationFormatter.departure_time_changed(self.number, old_time, new_departure_time)
        )

    def cancel(self) -> None:
        """Cancel the flight. Cancelling twice does not notify again."""
        if self._cancelled:
            return
        self._cancelled = True
        logger.info(f"Flight {self.number} cancelled")
        self.notify_observers(NotificationFormatter.cancelled(self.number))

    def add_passengers(self, passengers: Iterable[Passenger]) -> None:
        """
        Add passengers to the roster; passengers already booked are skipped.

        Raises:
            InsufficientCapacityError: If the newcomers do not fit, in which
                case the roster is left unchanged
            CapacityUnknownError: If the aircraft cannot report its capacity
        """
        added = []
        for passenger in passengers:
            if not self._has_passenger(passenger) and passenger not in added:
                added.append(passenger)
        if not added:
            return
        available = self.available_capacity()
        if available < len(added):
            raise InsufficientCapacityError(
                f"Flight {self.number} has {available} seat(s) left, {len(added)} requested"
            )
        booked_before = len(self._passengers)
        self._passengers.extend(added)
        self.notify_observers(
            NotificationFormatter.passengers_added(
                self.number, [p.name for p in added], booked_before, len(self._passengers)
            )
        )

    def remove_passengers(self, passengers: Iterable[Passenger]) -> None:
        """Remove passengers from the roster; unknown passengers are ignored."""
        removed = [p for p in passengers if self._has_passenger(p)]
        if not removed:
            return
        booked_before = len(self._passengers)
        self._passengers = [p for p in self._passengers if not any(p is r for r in removed)]
        self.notify_observers(
            NotificationFormatter.passengers_removed(
                self.number, [p.name for p in removed], booked_before, len(self._passengers)
            )
        )

    def _has_passenger(self, passenger: Passenger) -> bool:
        return any(p is passenger for p in self._passengers)

    # Capacity

    def capacity(self) -> int:
        """
        Passenger seats on the aircraft.

        Raises:
            CapacityUnknownError: If the aircraft cannot report it
        """
        seats = self.aircraft.passenger_capacity
        if seats is None:
            raise CapacityUnknownError(f"Aircraft {self.aircraft.model} does not report passenger capacity")
        return seats

    def crew_capacity(self) -> int:
        crew = self.aircraft.crew_capacity
        if crew is None:
            raise CapacityUnknownError(f"Aircraft {self.aircraft.model} does not report crew capacity")
        return crew

    def available_capacity(self) -> int:
        """
        Seats still free on this flight.

        Raises:
            CapacityUnknownError: If the aircraft cannot report its capacity
        """
        return self.capacity() - len(self._passengers)
