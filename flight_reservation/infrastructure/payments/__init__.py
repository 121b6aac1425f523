"""Payment method implementations."""
from flight_reservation.infrastructure.payments.credit_card import CreditCard, CreditCardPayment
from flight_reservation.infrastructure.payments.paypal import PayPalAccountRegistry, PayPalPayment

__all__ = [
    "CreditCard",
    "CreditCardPayment",
    "PayPalAccountRegistry",
    "PayPalPayment",
]
