"""Passenger helicopters."""
from flight_reservation.domain.exceptions import UnknownAircraftError
from flight_reservation.domain.interfaces.aircraft import IAircraft


class Helicopter(IAircraft):
    """Helicopter; every model flies with a crew of two."""

    MODELS = {"H1": 4, "H2": 6}
    CREW = 2

    def __init__(self, model: str):
        if model not in self.MODELS:
            raise UnknownAircraftError(f"Model type '{model}' is not recognized")
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    @property
    def passenger_capacity(self) -> int:
        return self.MODELS[self._model]

    @property
    def crew_capacity(self) -> int:
        return self.CREW

    def __repr__(self) -> str:
        return f"Helicopter({self._model!r})"
