"""Serializers for turning purchase payloads into domain requests.

Only the payload format is checked here. Eligibility rules such as positive
quantities or the ticket limit belong to TicketService.
"""

from rest_framework import serializers

from purchases.domain import TicketRequest, TicketType


class TicketRequestSerializer(serializers.Serializer):
    """Serializer for a single TicketRequest."""

    type = serializers.ChoiceField(choices=[t.value for t in TicketType])
    quantity = serializers.IntegerField()

    def to_internal_value(self, data) -> TicketRequest:
        validated = super().to_internal_value(data)
        return TicketRequest(
            ticket_type=TicketType(validated["type"]),
            quantity=validated["quantity"],
        )


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for a purchase request body."""

    account_id = serializers.IntegerField(allow_null=True, default=None)
    tickets = serializers.ListField(
        child=TicketRequestSerializer(allow_null=True),
        allow_null=True,
        allow_empty=True,
        default=None,
    )
