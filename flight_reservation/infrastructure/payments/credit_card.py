"""Credit card payment method."""
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from flight_reservation.domain.exceptions import InvalidPaymentMethodError, PaymentLimitExceededError
from flight_reservation.domain.interfaces.payment_method import IPaymentMethod


logger = logging.getLogger(__name__)


@dataclass
class CreditCard:
    """Credit card with a spendable balance."""

    number: str
    expiration_date: date
    cvv: str
    balance: float = 0.0

    def is_valid(self, on: Optional[date] = None) -> bool:
        """
        Check card number format, CVV format and expiry.

        Args:
            on: Date the card must still be valid on (defaults to today)

        Returns:
            True if the card can be charged, False otherwise
        """
        on = on or date.today()
        digits = (self.number or "").replace(" ", "").replace("-", "")
        if not digits.isdigit() or not 12 <= len(digits) <= 19:
            return False
        if not self.cvv or not self.cvv.isdigit() or len(self.cvv) not in (3, 4):
            return False
        return self.expiration_date >= on


class CreditCardPayment(IPaymentMethod):
    """
    Credit card payment following Strategy Pattern.

    Charges debit the card balance. A charge that would overdraw the card
    raises PaymentLimitExceededError and leaves the balance untouched.
    """

    def __init__(self, credit_card: Optional[CreditCard]):
        self.credit_card = credit_card

    def is_valid(self) -> bool:
        return self.credit_card is not None and self.credit_card.is_valid()

    def pay(self, amount: float) -> bool:
        if amount < 0:
            raise ValueError("amount must be non-negative")
        if not self.is_valid():
            raise InvalidPaymentMethodError("Credit card information is not valid")

        logger.info(f"Paying {amount:.2f} using credit card")
        remaining = self.credit_card.balance - amount
        if remaining < 0:
            logger.warning(f"Card limit reached - balance would be {remaining:.2f}")
            raise PaymentLimitExceededError(amount, self.credit_card.balance)
        self.credit_card.balance = remaining
        return True
