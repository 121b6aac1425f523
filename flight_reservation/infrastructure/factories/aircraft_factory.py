"""Factory for creating aircraft instances (Factory Pattern)."""
import logging

from flight_reservation.domain.exceptions import UnknownAircraftError
from flight_reservation.domain.interfaces.aircraft import IAircraft
from flight_reservation.infrastructure.aircraft.helicopter import Helicopter
from flight_reservation.infrastructure.aircraft.passenger_drone import PassengerDrone
from flight_reservation.infrastructure.aircraft.passenger_plane import PassengerPlane


logger = logging.getLogger(__name__)


class AircraftFactory:
    """
    Factory for creating aircraft following Factory Pattern.

    Centralizes the mapping from aircraft kind to implementation.
    """

    _KINDS = {
        "plane": PassengerPlane,
        "helicopter": Helicopter,
        "drone": PassengerDrone,
    }

    @staticmethod
    def create(kind: str, model: str) -> IAircraft:
        """
        Create an aircraft.

        Args:
            kind: Aircraft kind ("plane", "helicopter" or "drone")
            model: Model name within that kind

        Returns:
            IAircraft instance

        Raises:
            UnknownAircraftError: If the kind or the model is not supported
        """
        aircraft_class = AircraftFactory._KINDS.get(kind.lower())
        if aircraft_class is None:
            raise UnknownAircraftError(f"Unknown aircraft type: {kind}")
        aircraft = aircraft_class(model)
        logger.debug(f"Created aircraft {aircraft!r}")
        return aircraft

    @staticmethod
    def create_plane(model: str) -> IAircraft:
        return PassengerPlane(model)

    @staticmethod
    def create_helicopter(model: str) -> IAircraft:
        return Helicopter(model)

    @staticmethod
    def create_drone(model: str) -> IAircraft:
        return PassengerDrone(model)
