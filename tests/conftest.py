from datetime import date, datetime
from typing import List, Optional

import pytest

from flight_reservation.domain.entities.airport import Airport
from flight_reservation.domain.entities.no_fly_registry import NoFlyRegistry
from flight_reservation.domain.entities.scheduled_flight import ScheduledFlight
from flight_reservation.domain.interfaces.aircraft import IAircraft
from flight_reservation.domain.interfaces.flight_observer import IFlightObserver
from flight_reservation.infrastructure.catalog.airport_catalog import AirportCatalog
from flight_reservation.infrastructure.factories.aircraft_factory import AircraftFactory
from flight_reservation.infrastructure.factories.itinerary_factory import ItineraryFactory
from flight_reservation.infrastructure.payments.credit_card import CreditCard


DEPARTURE = datetime(2030, 5, 1, 8, 0)


class StubAircraft(IAircraft):
    """Aircraft with arbitrary capacity, allowed only at ``stub_airports``."""

    def __init__(self, seats: Optional[int], crew: Optional[int] = 2):
        self._seats = seats
        self._crew = crew

    @property
    def model(self) -> str:
        return "Stub"

    @property
    def passenger_capacity(self) -> Optional[int]:
        return self._seats

    @property
    def crew_capacity(self) -> Optional[int]:
        return self._crew


class RecordingObserver(IFlightObserver):
    def __init__(self):
        self.messages: List[str] = []

    def update(self, flight, message):
        self.messages.append(message)


@pytest.fixture
def catalog():
    return AirportCatalog()


@pytest.fixture
def ber(catalog):
    return catalog.get("BER")


@pytest.fixture
def fra(catalog):
    return catalog.get("FRA")


@pytest.fixture
def muc(catalog):
    return catalog.get("MUC")


@pytest.fixture
def cdg(catalog):
    return catalog.get("CDG")


@pytest.fixture
def stub_airports():
    return [Airport(code, f"{code} Field", "Nowhere", {"Stub"}) for code in ("XAA", "XBB", "XCC", "XDD")]


@pytest.fixture
def registry():
    return NoFlyRegistry.from_names(["Peter", "Johannes"])


@pytest.fixture
def itinerary_factory():
    # 500 km at 800 km/h: every leg takes 37.5 minutes
    return ItineraryFactory()


@pytest.fixture
def a380():
    return AircraftFactory.create_plane("A380")


@pytest.fixture
def make_flight(a380):
    def _make(number, departure, arrival, departure_time=DEPARTURE, price=100.0, aircraft=None):
        return ScheduledFlight(number, departure, arrival, aircraft or a380, departure_time, price)

    return _make


@pytest.fixture
def card():
    return CreditCard(number="4111111111111111", expiration_date=date(2099, 12, 31), cvv="123", balance=1000.0)
