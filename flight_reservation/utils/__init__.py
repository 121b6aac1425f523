"""Utility helpers."""
from flight_reservation.utils.notification_formatter import NotificationFormatter

__all__ = ["NotificationFormatter"]
