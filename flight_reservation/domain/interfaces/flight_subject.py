"""Interface for notification sources (Observer Pattern)."""
from abc import ABC, abstractmethod

from flight_reservation.domain.interfaces.flight_observer import IFlightObserver


class IFlightSubject(ABC):
    """
    Interface for a source of flight change notifications.

    The subject owns its observer list; observers are referenced, never
    owned, so removing one does not destroy it.
    """

    @abstractmethod
    def register_observer(self, observer: IFlightObserver) -> None:
        """
        Register an observer. Registering the same observer twice is a no-op.

        Args:
            observer: Observer to notify on future changes
        """
        pass

    @abstractmethod
    def remove_observer(self, observer: IFlightObserver) -> None:
        """
        Remove an observer if it is registered.

        Args:
            observer: Observer to stop notifying
        """
        pass

    @abstractmethod
    def notify_observers(self, message: str) -> None:
        """
        Deliver a message to every registered observer, in registration order.

        Args:
            message: Human-readable description of the change
        """
        pass
