"""In-memory airport catalogue for development and testing."""
import logging
from typing import Dict, Iterable, List, Optional

from flight_reservation.domain.entities.airport import Airport


logger = logging.getLogger(__name__)

_ALL_PLANES = ("A380", "A350", "Embraer 190", "Antonov AN2")
_HELICOPTERS = ("H1", "H2")
_DRONES = ("HypaHype",)


class AirportCatalog:
    """
    Catalogue of known airports.

    Seeded with sample data; in production this would be backed by a real
    airport directory.
    """

    def __init__(self, airports: Optional[Iterable[Airport]] = None):
        """Initialize catalogue, seeding sample airports unless some are given."""
        self._airports: Dict[str, Airport] = {}
        if airports is None:
            self._initialize_sample_data()
        else:
            for airport in airports:
                self.add(airport)

    def _initialize_sample_data(self) -> None:
        samples = [
            Airport("BER", "Berlin Airport", "Berlin, Berlin", _ALL_PLANES + _HELICOPTERS),
            Airport("FRA", "Frankfurt Airport", "Frankfurt, Hesse", _ALL_PLANES + _HELICOPTERS),
            Airport("MUC", "Munich International Airport", "Munich, Bavaria", _ALL_PLANES + _HELICOPTERS + _DRONES),
            Airport("MAD", "Adolfo Suarez Madrid-Barajas Airport", "Madrid, Spain", ("A380", "A350")),
            Airport("LHR", "Heathrow Airport", "London, United Kingdom", ("A380", "A350")),
            Airport("JFK", "John F. Kennedy International Airport", "New York, United States", ("A380", "A350")),
            Airport("CDG", "Charles de Gaulle Airport", "Paris, France", _ALL_PLANES),
        ]
        for airport in samples:
            self.add(airport)

    def add(self, airport: Airport) -> None:
        if airport.code.upper() in self._airports:
            logger.warning(f"Airport {airport.code} already in catalogue, replacing it")
        self._airports[airport.code.upper()] = airport

    def get(self, code: str) -> Airport:
        """
        Look up an airport by IATA code.

        Raises:
            ValueError: If the code is unknown
        """
        airport = self._airports.get(code.upper())
        if airport is None:
            raise ValueError(f"Unknown airport code: {code}")
        return airport

    def all(self) -> List[Airport]:
        return list(self._airports.values())
