"""Reference data catalogues."""
from flight_reservation.infrastructure.catalog.airport_catalog import AirportCatalog

__all__ = ["AirportCatalog"]
