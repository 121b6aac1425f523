"""Booking error taxonomy.

Validation errors are fatal to the current call and never leave partial
state behind. A declined payment is not an error at the order level: the
order reports it as a ``False`` result so the caller can retry with another
payment method.
"""


class BookingError(Exception):
    """Base class for every error raised by the booking core."""


class ValidationError(BookingError):
    """Raised when order or itinerary preconditions are not met."""


class OrderValidationError(ValidationError):
    """Raised by ``Order.process`` when the order cannot be processed."""


class InvalidOrderError(ValidationError):
    """Raised by ``Customer.create_order`` when an order cannot be created."""


class IncompatibleLegError(ValidationError):
    """Raised when a leg does not connect to the end of an itinerary."""


class InsufficientCapacityError(ValidationError):
    """Raised when an itinerary cannot carry the requested passengers."""


class PaymentError(BookingError):
    """Base class for payment method failures."""


class InvalidPaymentMethodError(PaymentError):
    """Raised when ``pay`` is called on a payment method that is not valid."""


class PaymentDeclinedError(PaymentError):
    """Raised when a payment instrument declines a charge."""


class PaymentLimitExceededError(PaymentError):
    """Raised when a charge would overdraw the payment instrument."""

    def __init__(self, amount: float, available: float):
        self.amount = amount
        self.available = available
        super().__init__(
            f"Card limit reached: cannot charge {amount:.2f} with {available:.2f} available"
        )


class CapacityUnknownError(BookingError):
    """Raised when an aircraft cannot report its capacity."""


class UnknownAircraftError(BookingError, ValueError):
    """Raised when an aircraft kind or model is not recognized."""
