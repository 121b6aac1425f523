"""PayPal payment method."""
import logging
from typing import Dict, Optional

from flight_reservation.domain.exceptions import InvalidPaymentMethodError
from flight_reservation.domain.interfaces.payment_method import IPaymentMethod


logger = logging.getLogger(__name__)


class PayPalAccountRegistry:
    """In-memory lookup of PayPal credentials (Registry Pattern)."""

    def __init__(self, accounts: Optional[Dict[str, str]] = None):
        """
        Initialize the registry.

        Args:
            accounts: Mapping of account email to password
        """
        self._accounts: Dict[str, str] = dict(accounts or {})

    def register(self, email: str, password: str) -> None:
        if not email or not password:
            raise ValueError("email and password are required")
        self._accounts[email] = password
        logger.debug(f"Registered PayPal account {email}")

    def matches(self, email: Optional[str], password: Optional[str]) -> bool:
        if email is None or password is None:
            return False
        return self._accounts.get(email) == password

    def __len__(self) -> int:
        return len(self._accounts)


class PayPalPayment(IPaymentMethod):
    """PayPal payment following Strategy Pattern; no balance is tracked."""

    def __init__(self, email: Optional[str], password: Optional[str], accounts: PayPalAccountRegistry):
        self.email = email
        self._password = password
        self._accounts = accounts

    def is_valid(self) -> bool:
        return self._accounts.matches(self.email, self._password)

    def pay(self, amount: float) -> bool:
        if amount < 0:
            raise ValueError("amount must be non-negative")
        if not self.is_valid():
            raise InvalidPaymentMethodError("PayPal credentials are not valid")

        logger.info(f"Paying {amount:.2f} using PayPal account {self.email}")
        return True
