from __future__ import annotations

from ..core.errors import AmountOverflowError, InsufficientFundsError
from ..core.money import MAX_BALANCE, format_cents, validate_amount


class Account:
    """A single balance held in cents.

    ``id`` and ``holder`` are fixed at construction. The balance starts at
    zero and only moves through :meth:`deposit` and :meth:`withdraw`; a
    failed call leaves it untouched.
    """

    __slots__ = ("_id", "_holder", "_balance")

    def __init__(self, account_id: int, holder: str) -> None:
        if isinstance(account_id, bool) or not isinstance(account_id, int):
            raise TypeError(f"Account id must be an integer, got {account_id!r}")
        if account_id <= 0:
            raise ValueError("Account id must be positive")
        if not isinstance(holder, str):
            raise TypeError(f"Account holder must be a string, got {holder!r}")
        if not holder:
            raise ValueError("Account holder cannot be empty")

        self._id = account_id
        self._holder = holder
        self._balance = 0

    @property
    def id(self) -> int:
        return self._id

    @property
    def holder(self) -> str:
        return self._holder

    @property
    def balance(self) -> int:
        return self._balance

    def deposit(self, amount: int) -> int:
        validate_amount(amount)
        if self._balance + amount > MAX_BALANCE:
            raise AmountOverflowError()
        self._balance += amount
        return self._balance

    def withdraw(self, amount: int) -> int:
        validate_amount(amount)
        if self._balance < amount:
            raise InsufficientFundsError()
        self._balance -= amount
        return self._balance

    def summary(self) -> str:
        return (
            f"Account {self._id} ({self._holder}) "
            f"has a balance of {format_cents(self._balance)}"
        )

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        return (
            f"Account(id={self._id!r}, holder={self._holder!r}, "
            f"balance={self._balance!r})"
        )
