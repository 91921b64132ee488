from purchases.gateways.django_gateway import (
    DjangoPaymentProcessor,
    DjangoSeatReservationService,
)
from purchases.gateways.interfaces import PaymentProcessor, SeatReservationService

__all__ = [
    "PaymentProcessor",
    "SeatReservationService",
    "DjangoPaymentProcessor",
    "DjangoSeatReservationService",
]
