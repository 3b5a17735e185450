from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from ..core.errors import (
    AccountError,
    AccountNotFoundError,
    DuplicateAccountError,
    InsufficientFundsError,
)
from ..core.money import format_cents, validate_amount
from .account import Account


logger = logging.getLogger(__name__)


class Ledger:
    """
    In-memory collection of accounts keyed by id.

    Transfers are all-or-nothing: every precondition is checked before any
    balance moves, and a deposit that fails after the source was debited is
    compensated by crediting the source back before the error is re-raised.

    Thread Safety:
        Not thread-safe. Concurrent callers must serialise access themselves
        (LedgerService does this with a single lock).
    """

    def __init__(self) -> None:
        self._accounts: Dict[int, Account] = {}

    @property
    def accounts(self) -> Mapping[int, Account]:
        return MappingProxyType(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts

    def __iter__(self) -> Iterator[Account]:
        for account_id in sorted(self._accounts):
            yield self._accounts[account_id]

    # ------------------------------------------------------------------
    # Registration and lookup
    # ------------------------------------------------------------------
    def add_account(self, account: Account) -> None:
        if account.id in self._accounts:
            raise DuplicateAccountError(account.id)
        self._accounts[account.id] = account

    def replace_account(self, account: Account) -> Optional[Account]:
        """Register ``account``, returning whatever it displaced."""
        previous = self._accounts.get(account.id)
        self._accounts[account.id] = account
        return previous

    def get_account(self, account_id: int) -> Optional[Account]:
        return self._accounts.get(account_id)

    def require_account(self, account_id: int) -> Account:
        try:
            return self._accounts[account_id]
        except KeyError as exc:
            raise AccountNotFoundError(account_id) from exc

    # ------------------------------------------------------------------
    # Aggregates and rendering
    # ------------------------------------------------------------------
    def total_balance(self) -> int:
        return sum(account.balance for account in self._accounts.values())

    def summary(self) -> str:
        return "\n".join(account.summary() for account in self)

    def __str__(self) -> str:
        return f"Bank total balance: {format_cents(self.total_balance())}"

    # ------------------------------------------------------------------
    # Transfers
    # ------------------------------------------------------------------
    def transfer(self, from_id: int, to_id: int, amount: int) -> None:
        validate_amount(amount)

        source = self.require_account(from_id)
        dest = self.require_account(to_id)

        if from_id == to_id:
            return

        if source.balance < amount:
            raise InsufficientFundsError()

        source.withdraw(amount)
        try:
            dest.deposit(amount)
        except AccountError:
            # the debit above just succeeded, so crediting it back cannot overflow
            source.deposit(amount)
            logger.warning(
                "transfer.rolled_back",
                extra={"from_id": from_id, "to_id": to_id, "amount": amount},
            )
            raise
