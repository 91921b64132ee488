"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("AccountId must be greater than zero")

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class Money:
    """Amount in abstract integer price units."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class SeatCount:
    """Non-negative number of seats to reserve."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("SeatCount cannot be negative")
