"""Domain error codes for the purchases module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    ACCOUNT_ID_INVALID = "ACCOUNT_ID_INVALID"
    NO_TICKETS_REQUESTED = "NO_TICKETS_REQUESTED"
    NULL_REQUEST = "NULL_REQUEST"
    NON_POSITIVE_QUANTITY = "NON_POSITIVE_QUANTITY"
    MAX_TICKETS_EXCEEDED = "MAX_TICKETS_EXCEEDED"
    ADULT_TICKET_REQUIRED = "ADULT_TICKET_REQUIRED"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"


REASONS: dict[ErrorCode, str] = {
    ErrorCode.ACCOUNT_ID_INVALID: "account id invalid",
    ErrorCode.NO_TICKETS_REQUESTED: "no tickets requested",
    ErrorCode.NULL_REQUEST: "null request",
    ErrorCode.NON_POSITIVE_QUANTITY: "quantity must be positive",
    ErrorCode.MAX_TICKETS_EXCEEDED: "exceeds maximum ticket count",
    ErrorCode.ADULT_TICKET_REQUIRED: "adult ticket required",
    ErrorCode.TOO_MANY_INFANTS: "too many infants",
}


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request breaks an eligibility rule."""

    def __init__(self, code: ErrorCode) -> None:
        super().__init__(code=code, message=REASONS[code])

    @property
    def reason(self) -> str:
        return self.message
