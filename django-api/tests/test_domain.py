"""Unit tests for domain primitives and the purchase order.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import dataclasses

import pytest

from purchases.domain import (
    MAX_TICKETS,
    TICKET_PRICES,
    AccountId,
    ErrorCode,
    InvalidPurchaseError,
    Money,
    PurchaseOrder,
    SeatCount,
    TicketRequest,
    TicketType,
)


class TestTicketType:
    """Tests for TicketType prices and seating."""

    def test_every_ticket_type_has_a_price(self):
        """The price table covers the whole enum."""
        assert set(TICKET_PRICES) == set(TicketType)

    @pytest.mark.parametrize(
        "ticket_type, price",
        [(TicketType.ADULT, 25), (TicketType.CHILD, 15), (TicketType.INFANT, 0)],
    )
    def test_unit_price(self, ticket_type, price):
        """Each ticket type has its fixed unit price."""
        assert ticket_type.unit_price == Money(price)

    def test_infants_do_not_occupy_seats(self):
        """Only infants go without a seat."""
        assert TicketType.ADULT.occupies_seat
        assert TicketType.CHILD.occupies_seat
        assert not TicketType.INFANT.occupies_seat

    def test_price_table_is_read_only(self):
        """The price table cannot be changed at runtime."""
        with pytest.raises(TypeError):
            TICKET_PRICES[TicketType.CHILD] = Money(1)

    def test_max_tickets(self):
        """The per-purchase ticket limit is 25."""
        assert MAX_TICKETS == 25


class TestTicketRequest:
    """Tests for TicketRequest."""

    def test_is_immutable(self):
        """A request cannot be changed after creation."""
        request = TicketRequest(TicketType.ADULT, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.quantity = 3

    def test_carries_untrusted_quantity(self):
        """Non-positive quantities are left for the service to reject."""
        assert TicketRequest(TicketType.CHILD, 0).quantity == 0


class TestValueObjects:
    """Tests for AccountId, Money and SeatCount."""

    def test_account_id_accepts_positive_value(self):
        assert int(AccountId(7)) == 7

    @pytest.mark.parametrize("value", [0, -1])
    def test_account_id_rejects_non_positive_value(self, value):
        with pytest.raises(ValueError):
            AccountId(value)

    def test_money_accepts_zero(self):
        assert str(Money(0)) == "0"

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(-5)

    def test_seat_count_rejects_negative_value(self):
        with pytest.raises(ValueError):
            SeatCount(-1)


class TestPurchaseOrder:
    """Tests for totals derived from a PurchaseOrder."""

    def test_mixed_order_totals(self):
        """Amount sums unit prices; seats exclude infants."""
        order = PurchaseOrder(
            account_id=AccountId(1),
            requests=(
                TicketRequest(TicketType.ADULT, 2),
                TicketRequest(TicketType.CHILD, 1),
                TicketRequest(TicketType.INFANT, 1),
            ),
        )

        assert order.total_ticket_count == 4
        assert order.adult_count == 2
        assert order.child_count == 1
        assert order.infant_count == 1
        assert order.total_amount == Money(65)
        assert order.total_seats == SeatCount(3)

    def test_counts_merge_repeated_types(self):
        """Requests of the same type are summed regardless of order."""
        order = PurchaseOrder(
            account_id=AccountId(1),
            requests=(
                TicketRequest(TicketType.CHILD, 3),
                TicketRequest(TicketType.ADULT, 1),
                TicketRequest(TicketType.CHILD, 2),
                TicketRequest(TicketType.ADULT, 4),
            ),
        )

        assert order.adult_count == 5
        assert order.child_count == 5
        assert order.total_amount == Money(5 * 25 + 5 * 15)
        assert order.total_seats == SeatCount(10)


class TestInvalidPurchaseError:
    """Tests for the purchase error."""

    def test_reason_and_str(self):
        error = InvalidPurchaseError(ErrorCode.TOO_MANY_INFANTS)

        assert error.code is ErrorCode.TOO_MANY_INFANTS
        assert error.reason == "too many infants"
        assert str(error) == "TOO_MANY_INFANTS: too many infants"

    def test_every_code_has_a_reason(self):
        for code in ErrorCode:
            assert InvalidPurchaseError(code).reason
