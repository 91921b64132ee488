"""Django ORM implementations of the purchase gateways.

Each call is recorded as a row; no business validation happens here.
"""

import logging

from purchases.gateways.interfaces import PaymentProcessor, SeatReservationService
from purchases.models import PaymentRecord, SeatReservationRecord

logger = logging.getLogger(__name__)


class DjangoPaymentProcessor(PaymentProcessor):
    """Payment processor that records payments in the database."""

    def make_payment(self, account_id: int, amount: int) -> None:
        record = PaymentRecord.objects.create(account_id=str(account_id), amount=amount)
        logger.debug("Payment recorded", extra={"record_id": str(record.id)})


class DjangoSeatReservationService(SeatReservationService):
    """Seat reservation service that records reservations in the database."""

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        record = SeatReservationRecord.objects.create(
            account_id=str(account_id), seat_count=seat_count
        )
        logger.debug("Seat reservation recorded", extra={"record_id": str(record.id)})
