"""Fixed-wing passenger aircraft."""
from typing import Dict, Tuple

from flight_reservation.domain.exceptions import UnknownAircraftError
from flight_reservation.domain.interfaces.aircraft import IAircraft


class PassengerPlane(IAircraft):
    """Passenger plane with per-model seat and crew counts."""

    # model -> (passenger capacity, crew capacity)
    MODELS: Dict[str, Tuple[int, int]] = {
        "A380": (500, 42),
        "A350": (320, 40),
        "Embraer 190": (25, 5),
        "Antonov AN2": (15, 3),
    }

    def __init__(self, model: str):
        if model not in self.MODELS:
            raise UnknownAircraftError(f"Model type '{model}' is not recognized")
        self._model = model
        self._passenger_capacity, self._crew_capacity = self.MODELS[model]

    @property
    def model(self) -> str:
        return self._model

    @property
    def passenger_capacity(self) -> int:
        return self._passenger_capacity

    @property
    def crew_capacity(self) -> int:
        return self._crew_capacity

    def __repr__(self) -> str:
        return f"PassengerPlane({self._model!r})"
