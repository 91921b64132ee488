from purchases.domain.errors import DomainError, ErrorCode, InvalidPurchaseError
from purchases.domain.models import (
    MAX_TICKETS,
    TICKET_PRICES,
    PurchaseOrder,
    TicketRequest,
    TicketType,
)
from purchases.domain.value_objects import AccountId, Money, SeatCount

__all__ = [
    "MAX_TICKETS",
    "TICKET_PRICES",
    "PurchaseOrder",
    "TicketRequest",
    "TicketType",
    "AccountId",
    "Money",
    "SeatCount",
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
]
