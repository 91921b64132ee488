"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

import logging
from collections.abc import Iterable

from django.conf import settings
from django.utils.module_loading import import_string

from purchases.domain import (
    MAX_TICKETS,
    AccountId,
    ErrorCode,
    InvalidPurchaseError,
    PurchaseOrder,
    TicketRequest,
    TicketType,
)
from purchases.gateways.interfaces import PaymentProcessor, SeatReservationService

logger = logging.getLogger(__name__)


class TicketService:
    """Service for validating and paying for ticket purchases."""

    def __init__(
        self,
        payment_processor: PaymentProcessor,
        seat_reservation_service: SeatReservationService,
    ) -> None:
        self._payment_processor = payment_processor
        self._seat_reservation_service = seat_reservation_service

    def purchase_tickets(
        self,
        account_id: int | None,
        ticket_requests: Iterable[TicketRequest | None] | None,
    ) -> None:
        """Validate a purchase, then take payment and reserve seats.

        Payment is always made before seats are reserved. A failure raised by
        either gateway propagates unchanged, and a reservation failure does
        not undo the payment.

        Raises:
            InvalidPurchaseError: If the request breaks an eligibility rule.
                Neither gateway is called in that case.
        """
        try:
            order = self._validate(account_id, ticket_requests)
        except InvalidPurchaseError as exc:
            logger.warning(
                "Purchase rejected",
                extra={"account_id": account_id, "code": exc.code.value},
            )
            raise

        amount = order.total_amount.amount
        seats = order.total_seats.value
        self._payment_processor.make_payment(order.account_id.value, amount)
        self._seat_reservation_service.reserve_seat(order.account_id.value, seats)
        logger.info(
            "Purchase completed",
            extra={"account_id": order.account_id.value, "amount": amount, "seats": seats},
        )

    def _validate(
        self,
        account_id: int | None,
        ticket_requests: Iterable[TicketRequest | None] | None,
    ) -> PurchaseOrder:
        if account_id is None or isinstance(account_id, bool) or account_id <= 0:
            raise InvalidPurchaseError(ErrorCode.ACCOUNT_ID_INVALID)

        requests = tuple(ticket_requests) if ticket_requests is not None else ()
        if not requests:
            raise InvalidPurchaseError(ErrorCode.NO_TICKETS_REQUESTED)

        total_tickets = 0
        for request in requests:
            if request is None:
                raise InvalidPurchaseError(ErrorCode.NULL_REQUEST)
            if request.quantity <= 0:
                raise InvalidPurchaseError(ErrorCode.NON_POSITIVE_QUANTITY)
            total_tickets += request.quantity

        if total_tickets > MAX_TICKETS:
            raise InvalidPurchaseError(ErrorCode.MAX_TICKETS_EXCEEDED)

        adult_count = 0
        infant_count = 0
        for request in requests:
            if request.ticket_type is TicketType.ADULT:
                adult_count += request.quantity
            elif request.ticket_type is TicketType.INFANT:
                infant_count += request.quantity

        if adult_count == 0:
            raise InvalidPurchaseError(ErrorCode.ADULT_TICKET_REQUIRED)
        # One infant per adult lap.
        if infant_count > adult_count:
            raise InvalidPurchaseError(ErrorCode.TOO_MANY_INFANTS)

        return PurchaseOrder(account_id=AccountId(account_id), requests=requests)


def get_ticket_service() -> TicketService:
    """Build a TicketService from the gateways named in settings.PURCHASES."""
    config = settings.PURCHASES
    payment_processor = import_string(config["PAYMENT_PROCESSOR"])()
    seat_reservation_service = import_string(config["SEAT_RESERVATION_SERVICE"])()
    return TicketService(payment_processor, seat_reservation_service)
