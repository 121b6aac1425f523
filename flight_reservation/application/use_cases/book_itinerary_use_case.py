"""Use case for booking and paying for an itinerary (Use Case Pattern)."""
import logging
from dataclasses import dataclass
from typing import List, Optional

from flight_reservation.domain.entities.customer import Customer
from flight_reservation.domain.entities.order import FlightOrder
from flight_reservation.domain.entities.scheduled_flight import ScheduledFlight
from flight_reservation.domain.exceptions import PaymentError
from flight_reservation.domain.interfaces.payment_method import IPaymentMethod


logger = logging.getLogger(__name__)


@dataclass
class BookingRequest:
    """Request to book flights for a customer."""

    customer: Customer
    passenger_names: List[str]
    flights: List[ScheduledFlight]
    payment_method: IPaymentMethod
    price: Optional[float] = None


@dataclass
class BookingResult:
    """Outcome of a booking attempt."""

    order: FlightOrder
    success: bool
    error: Optional[str] = None


class BookItineraryUseCase:
    """
    Use case driving a booking from order creation to payment.

    Follows Use Case Pattern: order creation and payment stay in the domain
    entities, this class only sequences them and reports the outcome.
    """

    def execute(self, request: BookingRequest) -> BookingResult:
        """
        Create the order and process it with the requested payment method.

        Args:
            request: Booking request

        Returns:
            Booking result; ``success`` is False when the payment was
            declined or could not cover the price, and the order stays open

        Raises:
            InvalidOrderError: If the order cannot be created
            OrderValidationError: If the order cannot be processed
        """
        customer = request.customer
        order = customer.create_order(request.passenger_names, request.flights, request.price)

        try:
            paid = order.process_with_payment(request.payment_method)
        except PaymentError as e:
            logger.warning(f"Payment failed for order {order.id}: {e}")
            return BookingResult(order=order, success=False, error=str(e))

        if not paid:
            logger.warning(f"Payment declined for order {order.id}")
            return BookingResult(order=order, success=False, error="Payment declined")

        logger.info(f"Booking completed for {customer.name}: order {order.id}")
        return BookingResult(order=order, success=True)
