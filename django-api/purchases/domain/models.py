"""Domain models for a ticket purchase.

These are pure domain objects. Eligibility rules live in the service;
persistence records are in purchases/models.py.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from purchases.domain.value_objects import AccountId, Money, SeatCount

MAX_TICKETS = 25


class TicketType(Enum):
    """Closed set of ticket variants sold by the venue."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def unit_price(self) -> Money:
        return TICKET_PRICES[self]

    @property
    def occupies_seat(self) -> bool:
        # Infants sit on an adult's lap.
        return self is not TicketType.INFANT


TICKET_PRICES: Mapping[TicketType, Money] = MappingProxyType(
    {
        TicketType.ADULT: Money(25),
        TicketType.CHILD: Money(15),
        TicketType.INFANT: Money(0),
    }
)

_unpriced = set(TicketType) - set(TICKET_PRICES)
if _unpriced:
    names = sorted(t.name for t in _unpriced)
    raise RuntimeError(f"No price defined for ticket types: {names}")


@dataclass(frozen=True)
class TicketRequest:
    """A requested quantity of one ticket type, as received from the caller."""

    ticket_type: TicketType
    quantity: int


@dataclass(frozen=True)
class PurchaseOrder:
    """A purchase that has passed every eligibility rule."""

    account_id: AccountId
    requests: tuple[TicketRequest, ...]

    def count_of(self, ticket_type: TicketType) -> int:
        return sum(r.quantity for r in self.requests if r.ticket_type is ticket_type)

    @property
    def total_ticket_count(self) -> int:
        return sum(r.quantity for r in self.requests)

    @property
    def adult_count(self) -> int:
        return self.count_of(TicketType.ADULT)

    @property
    def child_count(self) -> int:
        return self.count_of(TicketType.CHILD)

    @property
    def infant_count(self) -> int:
        return self.count_of(TicketType.INFANT)

    @property
    def total_amount(self) -> Money:
        return Money(sum(r.quantity * r.ticket_type.unit_price.amount for r in self.requests))

    @property
    def total_seats(self) -> SeatCount:
        return SeatCount(sum(r.quantity for r in self.requests if r.ticket_type.occupies_seat))
