from datetime import timedelta

import pytest

from conftest import DEPARTURE, StubAircraft
from flight_reservation.domain.entities.itinerary import CompositeItinerary, SingleLegItinerary
from flight_reservation.domain.entities.passenger import Passenger
from flight_reservation.domain.exceptions import IncompatibleLegError, InsufficientCapacityError
from flight_reservation.infrastructure.distance.fixed_distance import FixedDistanceCalculator
from flight_reservation.infrastructure.factories.aircraft_factory import AircraftFactory
from flight_reservation.infrastructure.factories.itinerary_factory import ItineraryFactory

LEG_TIME = timedelta(minutes=37, seconds=30)


def test_single_leg_delegates_to_flight(make_flight, itinerary_factory, ber, fra):
    flight = make_flight(1, ber, fra, price=199.0)
    leg = itinerary_factory.single_leg(flight)

    assert leg.price() == 199.0
    assert leg.departure() == ber
    assert leg.arrival() == fra
    assert leg.departure_time() == DEPARTURE
    assert leg.arrival_time() == DEPARTURE + LEG_TIME
    assert leg.stops() == []
    assert leg.flights() == [flight]
    assert leg.total_distance() == 500


def test_single_leg_follows_price_changes(make_flight, itinerary_factory, ber, fra):
    flight = make_flight(1, ber, fra, price=100.0)
    leg = itinerary_factory.single_leg(flight)

    flight.set_price(120.0)

    assert leg.price() == 120.0


def test_distance_model_is_pluggable(make_flight, ber, fra):
    factory = ItineraryFactory(FixedDistanceCalculator(1600), cruise_speed_kmh=800)
    leg = factory.single_leg(make_flight(1, ber, fra))

    assert leg.total_distance() == 1600
    assert leg.arrival_time() == DEPARTURE + timedelta(hours=2)


def test_connecting_leg_accepted(make_flight, itinerary_factory, ber, fra, muc):
    first = itinerary_factory.single_leg(make_flight(1, ber, fra))
    second = itinerary_factory.single_leg(make_flight(2, fra, muc, DEPARTURE + timedelta(hours=2)))

    journey = CompositeItinerary()
    journey.add_leg(first)
    journey.add_leg(second)

    assert journey.legs == [first, second]
    assert journey.departure() == ber
    assert journey.arrival() == muc
    assert journey.stops() == [fra]


def test_leg_from_other_airport_rejected(make_flight, itinerary_factory, ber, fra, muc, cdg):
    journey = CompositeItinerary([itinerary_factory.single_leg(make_flight(1, ber, fra))])
    elsewhere = itinerary_factory.single_leg(make_flight(2, muc, cdg, DEPARTURE + timedelta(hours=2)))

    with pytest.raises(IncompatibleLegError):
        journey.add_leg(elsewhere)
    assert len(journey.legs) == 1


@pytest.mark.parametrize("offset", [timedelta(minutes=10), LEG_TIME, timedelta(hours=-3)])
def test_leg_departing_before_arrival_rejected(make_flight, itinerary_factory, ber, fra, muc, offset):
    journey = CompositeItinerary([itinerary_factory.single_leg(make_flight(1, ber, fra))])
    too_early = itinerary_factory.single_leg(make_flight(2, fra, muc, DEPARTURE + offset))

    with pytest.raises(IncompatibleLegError):
        journey.add_leg(too_early)
    assert len(journey.legs) == 1


def test_empty_journey_cannot_be_added(make_flight, itinerary_factory, ber, fra):
    journey = CompositeItinerary([itinerary_factory.single_leg(make_flight(1, ber, fra))])

    with pytest.raises(IncompatibleLegError):
        journey.add_leg(CompositeItinerary())
    with pytest.raises(IncompatibleLegError):
        journey.add_leg(journey)


def test_empty_journey_has_no_values():
    journey = CompositeItinerary()

    assert journey.departure() is None
    assert journey.arrival() is None
    assert journey.departure_time() is None
    assert journey.arrival_time() is None
    assert journey.stops() == []
    assert journey.flights() == []
    assert journey.price() == 0
    assert journey.total_distance() == 0
    assert journey.available_capacity() == 0


def test_sums_hold_for_nested_journeys(make_flight, itinerary_factory, ber, fra, muc, cdg):
    flights = [
        make_flight(1, ber, fra, DEPARTURE, price=100.0),
        make_flight(2, fra, muc, DEPARTURE + timedelta(hours=2), price=80.0),
        make_flight(3, muc, cdg, DEPARTURE + timedelta(hours=4), price=120.0),
        make_flight(4, cdg, ber, DEPARTURE + timedelta(hours=6), price=50.0),
    ]
    inner = itinerary_factory.from_flights(flights[:2])
    middle = itinerary_factory.from_itineraries([inner, itinerary_factory.single_leg(flights[2])])
    outer = itinerary_factory.from_itineraries([middle, itinerary_factory.single_leg(flights[3])])

    assert outer.price() == pytest.approx(350.0)
    assert outer.total_distance() == 2000
    assert outer.flights() == flights
    assert outer.departure() == ber
    assert outer.arrival() == ber
    assert outer.arrival_time() == flights[3].departure_time + LEG_TIME
    assert outer.stops() == [cdg]
    assert middle.stops() == [muc]


def test_queries_reflect_leg_removal(make_flight, itinerary_factory, ber, fra, muc):
    first = itinerary_factory.single_leg(make_flight(1, ber, fra, price=100.0))
    second = itinerary_factory.single_leg(make_flight(2, fra, muc, DEPARTURE + timedelta(hours=2), price=60.0))
    journey = CompositeItinerary([first, second])

    journey.remove_leg(second)
    journey.remove_leg(second)

    assert journey.price() == 100.0
    assert journey.arrival() == fra
    assert journey.legs == [first]


def test_journey_capacity_is_tightest_leg(make_flight, stub_airports):
    a, b, c, d = stub_airports
    journey = CompositeItinerary(
        [
            SingleLegItinerary(make_flight(1, a, b, DEPARTURE, aircraft=StubAircraft(2))),
            SingleLegItinerary(make_flight(2, b, c, DEPARTURE + timedelta(hours=2), aircraft=StubAircraft(5))),
            SingleLegItinerary(make_flight(3, c, d, DEPARTURE + timedelta(hours=4), aircraft=StubAircraft(3))),
        ]
    )

    assert journey.available_capacity() == 2


def test_unknown_leg_capacity_counts_as_zero(make_flight, stub_airports):
    a, b, c, _ = stub_airports
    journey = CompositeItinerary(
        [
            SingleLegItinerary(make_flight(1, a, b, DEPARTURE, aircraft=StubAircraft(5))),
            SingleLegItinerary(make_flight(2, b, c, DEPARTURE + timedelta(hours=2), aircraft=StubAircraft(None))),
        ]
    )

    assert journey.available_capacity() == 0


def test_passengers_propagate_to_every_leg(make_flight, itinerary_factory, ber, fra, muc):
    flights = [make_flight(1, ber, fra), make_flight(2, fra, muc, DEPARTURE + timedelta(hours=2))]
    journey = itinerary_factory.from_flights(flights)
    john, jane = Passenger("John"), Passenger("Jane")

    journey.add_passenger(john)
    journey.add_passengers([john, jane])

    assert journey.passengers() == [john, jane]
    for flight in flights:
        assert flight.passengers == [john, jane]

    journey.remove_passenger(john)

    assert journey.passengers() == [jane]
    for flight in flights:
        assert flight.passengers == [jane]


def test_over_capacity_booking_changes_nothing(make_flight, stub_airports):
    a, b, c, _ = stub_airports
    flights = [
        make_flight(1, a, b, DEPARTURE, aircraft=StubAircraft(5)),
        make_flight(2, b, c, DEPARTURE + timedelta(hours=2), aircraft=StubAircraft(1)),
    ]
    journey = CompositeItinerary([SingleLegItinerary(flight) for flight in flights])

    with pytest.raises(InsufficientCapacityError):
        journey.add_passengers([Passenger("A"), Passenger("B")])

    assert journey.passengers() == []
    assert all(flight.passengers == [] for flight in flights)


def test_factory_requires_flights(itinerary_factory):
    with pytest.raises(ValueError):
        itinerary_factory.from_flights([])


def test_factory_returns_single_leg_for_one_flight(make_flight, itinerary_factory, ber, fra):
    assert isinstance(itinerary_factory.from_flights([make_flight(1, ber, fra)]), SingleLegItinerary)


def test_single_leg_over_capacity_booking_changes_nothing(make_flight, ber, fra):
    flight = make_flight(1, ber, fra, aircraft=AircraftFactory.create_helicopter("H1"))
    leg = SingleLegItinerary(flight)

    with pytest.raises(InsufficientCapacityError):
        leg.add_passengers([Passenger(f"P{i}") for i in range(6)])

    assert flight.passengers == []
    assert flight.available_capacity() == 4


def test_full_legs_accept_passengers_already_on_board(make_flight, ber, fra):
    helicopter = AircraftFactory.create_helicopter("H1")
    flights = [
        make_flight(1, ber, fra, DEPARTURE, aircraft=helicopter),
        make_flight(2, fra, ber, DEPARTURE + timedelta(hours=2), aircraft=helicopter),
    ]
    crew = [Passenger(f"P{i}") for i in range(4)]
    for flight in flights:
        flight.add_passengers(crew)
    journey = CompositeItinerary([SingleLegItinerary(flight) for flight in flights])

    journey.add_passengers(crew)

    assert journey.passengers() == crew
    assert all(flight.passengers == crew for flight in flights)
    with pytest.raises(InsufficientCapacityError):
        journey.add_passengers([Passenger("Extra")])
    assert journey.passengers() == crew
