from __future__ import annotations

from typing import Optional


class AccountError(Exception):
    """Base class for every ledger failure surfaced to callers."""

    default_message = "Account error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class NegativeAmountError(AccountError):
    """Raised when a deposit, withdrawal or transfer amount is below zero."""

    default_message = "Amount cannot be negative"


class InsufficientFundsError(AccountError):
    """Raised when a withdrawal/transfer would drop balance below zero."""

    default_message = "Insufficient funds"


class AmountOverflowError(AccountError):
    """Raised when a deposit would push a balance past MAX_BALANCE."""

    default_message = "Amount overflow"


class AccountNotFoundError(AccountError):
    """Raised when an account id is missing from the ledger."""

    default_message = "Account not found"

    def __init__(self, account_id: Optional[int] = None) -> None:
        self.account_id = account_id
        if account_id is None:
            super().__init__()
        else:
            super().__init__(f"Account {account_id} not found")


class DuplicateAccountError(AccountError):
    """Raised when registering an id that is already taken."""

    def __init__(self, account_id: int) -> None:
        self.account_id = account_id
        super().__init__(f"Account {account_id} already exists")
