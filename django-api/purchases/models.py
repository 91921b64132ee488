"""Django ORM models (persistence layer).

These models record what the gateways were asked to do. Domain logic lives
in domain/models.py.
"""

import uuid

from django.db import models


class PaymentRecord(models.Model):
    """A payment taken from an account."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # Decimal text; account ids have no upper bound.
    account_id = models.TextField()
    amount = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(
                fields=["account_id", "-created_at"], name="payment_account_created_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.account_id} - {self.amount}"


class SeatReservationRecord(models.Model):
    """A block of seats reserved for an account."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # Decimal text; account ids have no upper bound.
    account_id = models.TextField()
    seat_count = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(
                fields=["account_id", "-created_at"], name="seat_resv_account_created_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.account_id} - {self.seat_count} seats"
