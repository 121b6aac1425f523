"""Factory for creating payment methods (Factory Pattern)."""
import logging
from typing import Any

from flight_reservation.domain.interfaces.payment_method import IPaymentMethod
from flight_reservation.infrastructure.payments.credit_card import CreditCardPayment
from flight_reservation.infrastructure.payments.paypal import PayPalPayment


logger = logging.getLogger(__name__)


class PaymentMethodFactory:
    """
    Factory for creating payment methods following Factory Pattern.

    Allows callers to pick a payment method by name without depending on
    the concrete classes.
    """

    @staticmethod
    def create(method_type: str, **kwargs: Any) -> IPaymentMethod:
        """
        Create a payment method.

        Args:
            method_type: "credit_card" or "paypal"
            **kwargs: ``card`` for credit cards; ``email``, ``password`` and
                ``accounts`` for PayPal

        Returns:
            IPaymentMethod instance

        Raises:
            ValueError: If the method type is not supported or arguments are missing
        """
        method_type = method_type.lower()

        if method_type == "credit_card":
            if "card" not in kwargs:
                raise ValueError("credit_card payment requires 'card'")
            return CreditCardPayment(kwargs["card"])
        elif method_type == "paypal":
            missing = [key for key in ("email", "password", "accounts") if key not in kwargs]
            if missing:
                raise ValueError(f"paypal payment requires {', '.join(missing)}")
            return PayPalPayment(kwargs["email"], kwargs["password"], kwargs["accounts"])
        else:
            raise ValueError(f"Unsupported payment method type: {method_type}")
