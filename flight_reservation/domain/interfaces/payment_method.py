"""Interface for payment methods (Strategy Pattern).

Orders charge through this contract only, so new payment methods can be
added without touching order processing.
"""
from abc import ABC, abstractmethod


class IPaymentMethod(ABC):
    """
    Interface for payment methods following Strategy Pattern.

    Implementations must never let ``pay`` succeed when ``is_valid`` would
    return False at the same instant.
    """

    @abstractmethod
    def is_valid(self) -> bool:
        """
        Check the stored credentials without side effects.

        Returns:
            True if the payment method can be charged, False otherwise
        """
        pass

    @abstractmethod
    def pay(self, amount: float) -> bool:
        """
        Charge the payment method.

        Args:
            amount: Amount to charge (non-negative)

        Returns:
            True if the charge went through, False if it was declined

        Raises:
            InvalidPaymentMethodError: If called while the method is invalid
            PaymentLimitExceededError: If the instrument cannot cover the amount
            ValueError: If amount is negative
        """
        pass
