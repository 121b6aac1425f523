"""Formatting of flight change notifications."""
from datetime import datetime
from typing import Iterable


class NotificationFormatter:
    """Utility class building deterministic, human-readable change messages."""

    TIME_FORMAT = "%Y-%m-%d %H:%M"

    @staticmethod
    def price_changed(flight_number: int, old_price: float, new_price: float) -> str:
        return f"Flight {flight_number} price changed from {old_price:.2f} to {new_price:.2f}"

    @staticmethod
    def departure_time_changed(flight_number: int, old_time: datetime, new_time: datetime) -> str:
        fmt = NotificationFormatter.TIME_FORMAT
        return (
            f"Flight {flight_number} departure time changed from "
            f"{old_time.strftime(fmt)} to {new_time.strftime(fmt)}"
        )

    @staticmethod
    def passengers_added(flight_number: int, names: Iterable[str], booked_before: int, booked_after: int) -> str:
        return (
            f"Passengers added to flight {flight_number}: {', '.join(names)} "
            f"(booked {booked_before} -> {booked_after})"
        )

    @staticmethod
    def passengers_removed(flight_number: int, names: Iterable[str], booked_before: int, booked_after: int) -> str:
        return (
            f"Passengers removed from flight {flight_number}: {', '.join(names)} "
            f"(booked {booked_before} -> {booked_after})"
        )

    @staticmethod
    def cancelled(flight_number: int) -> str:
        return f"Flight {flight_number} has been cancelled"

    @staticmethod
    def for_customer(flight_number: int, departure_code: str, arrival_code: str, message: str) -> str:
        """
        Prefix a change message with the route it refers to.

        Args:
            flight_number: Number of the flight that changed
            departure_code: IATA code of the departure airport
            arrival_code: IATA code of the arrival airport
            message: Change message delivered by the flight

        Returns:
            Notification line as stored in the customer's log
        """
        return (
            f"Notification for flight {flight_number} from {departure_code} "
            f"to {arrival_code}: {message}"
        )
