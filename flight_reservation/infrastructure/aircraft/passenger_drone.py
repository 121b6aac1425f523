"""Autonomous passenger drones."""
from flight_reservation.domain.exceptions import UnknownAircraftError
from flight_reservation.domain.interfaces.aircraft import IAircraft


class PassengerDrone(IAircraft):
    """Crewless passenger drone."""

    MODELS = ("HypaHype",)
    PASSENGERS = 4

    def __init__(self, model: str):
        if model not in self.MODELS:
            raise UnknownAircraftError(f"Model type '{model}' is not recognized")
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    @property
    def passenger_capacity(self) -> int:
        return self.PASSENGERS

    @property
    def crew_capacity(self) -> int:
        # No crew needed
        return 0

    def __repr__(self) -> str:
        return f"PassengerDrone({self._model!r})"
