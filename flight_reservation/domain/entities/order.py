"""Order domain entities (Template Method Pattern)."""
import logging
import uuid
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from flight_reservation.domain.entities.no_fly_registry import NoFlyRegistry
from flight_reservation.domain.entities.passenger import Passenger
from flight_reservation.domain.entities.scheduled_flight import ScheduledFlight
from flight_reservation.domain.exceptions import OrderValidationError, PaymentDeclinedError
from flight_reservation.domain.interfaces.itinerary import IItinerary
from flight_reservation.domain.interfaces.payment_method import IPaymentMethod

if TYPE_CHECKING:
    from flight_reservation.domain.entities.customer import Customer
    from flight_reservation.infrastructure.payments.credit_card import CreditCard
    from flight_reservation.infrastructure.payments.paypal import PayPalAccountRegistry


logger = logging.getLogger(__name__)


class Order(ABC):
    """
    Base order with a fixed processing sequence.

    ``process`` runs validate -> pay -> finalize and must not be overridden;
    subclasses customize the individual steps. An order closes at most once
    and is never reopened.
    """

    def __init__(self, price: float = 0.0):
        if price < 0:
            raise ValueError("price must be non-negative")
        self._id = uuid.uuid4()
        self._price = float(price)
        self._closed = False
        self._customer: Optional["Customer"] = None
        self._passengers: Optional[List[Passenger]] = None

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def price(self) -> float:
        return self._price

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def customer(self) -> Optional["Customer"]:
        return self._customer

    @customer.setter
    def customer(self, customer: "Customer") -> None:
        if self._customer is not None and self._customer is not customer:
            raise ValueError(f"Order {self._id} already belongs to {self._customer.name}")
        self._customer = customer

    @property
    def passengers(self) -> List[Passenger]:
        return list(self._passengers or [])

    @passengers.setter
    def passengers(self, passengers: List[Passenger]) -> None:
        if self._passengers is not None:
            raise ValueError(f"Passengers of order {self._id} are already set")
        self._passengers = list(passengers)

    def process(self) -> bool:
        """
        Validate, pay for and close the order.

        Returns:
            True if the order is (or already was) closed, False if the
            payment was declined and the order stays open

        Raises:
            OrderValidationError: If the order cannot be processed
            PaymentLimitExceededError: If the payment method cannot cover the price
        """
        if self._closed:
            return True

        self._validate_order()

        if not self._process_payment():
            return False

        self._finalize_order()
        return True

    @abstractmethod
    def _validate_order(self) -> None:
        """Raise OrderValidationError if the order cannot be processed."""
        pass

    @abstractmethod
    def _process_payment(self) -> bool:
        """Charge the order; return False if the charge was declined."""
        pass

    def _finalize_order(self) -> None:
        self._closed = True
        logger.info(f"Order {self._id} closed")


class FlightOrder(Order):
    """Order for an itinerary of scheduled flights, paid through a pluggable payment method."""

    def __init__(self, itinerary: IItinerary, no_fly_registry: NoFlyRegistry, price: float = 0.0):
        """
        Initialize flight order.

        Args:
            itinerary: Itinerary being booked
            no_fly_registry: Names barred from booking
            price: Amount charged when the order is processed
        """
        super().__init__(price)
        self.itinerary = itinerary
        self._no_fly_registry = no_fly_registry
        self._payment_method: Optional[IPaymentMethod] = None

    @property
    def payment_method(self) -> Optional[IPaymentMethod]:
        return self._payment_method

    def set_payment_method(self, payment_method: IPaymentMethod) -> None:
        self._payment_method = payment_method

    def scheduled_flights(self) -> List[ScheduledFlight]:
        return self.itinerary.flights()

    def _validate_order(self) -> None:
        if self._payment_method is None:
            raise OrderValidationError("Payment method is not set")
        if self.customer is None:
            raise OrderValidationError("Customer is not set")
        if not self.passengers:
            raise OrderValidationError("Order has no passengers")
        if self.customer.name in self._no_fly_registry:
            raise OrderValidationError(f"Customer {self.customer.name} is on the no-fly list")
        barred = [p.name for p in self.passengers if p.name in self._no_fly_registry]
        if barred:
            raise OrderValidationError(f"Passengers on the no-fly list: {', '.join(barred)}")

    def _process_payment(self) -> bool:
        if not self._payment_method.is_valid():
            logger.warning(f"Order {self.id}: payment method is not valid")
            return False
        try:
            paid = self._payment_method.pay(self.price)
        except PaymentDeclinedError as e:
            logger.warning(f"Order {self.id}: payment declined: {e}")
            return False
        if not paid:
            logger.warning(f"Order {self.id}: payment declined")
        return paid

    # Convenience entry points

    def process_with_payment(self, payment_method: IPaymentMethod) -> bool:
        """Set the payment method and process the order."""
        self.set_payment_method(payment_method)
        return self.process()

    def process_with_credit_card(self, credit_card: "CreditCard") -> bool:
        """Pay by credit card and process the order."""
        from flight_reservation.infrastructure.payments.credit_card import CreditCardPayment

        return self.process_with_payment(CreditCardPayment(credit_card))

    def process_with_paypal(self, email: str, password: str, accounts: "PayPalAccountRegistry") -> bool:
        """Pay with a PayPal account and process the order."""
        from flight_reservation.infrastructure.payments.paypal import PayPalPayment

        return self.process_with_payment(PayPalPayment(email, password, accounts))
