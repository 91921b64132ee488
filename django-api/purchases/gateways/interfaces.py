"""Gateway interfaces for the third-party services a purchase relies on.

Gateways must be swappable. Implementations are trusted: they either
complete or raise, and the caller neither retries nor inspects a result.
"""

from abc import ABC, abstractmethod


class PaymentProcessor(ABC):
    """Interface for taking payment from an account."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge `amount` price units to the account."""
        ...


class SeatReservationService(ABC):
    """Interface for reserving seats at the venue."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve `seat_count` seats for the account."""
        ...
