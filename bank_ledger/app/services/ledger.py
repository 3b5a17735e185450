from __future__ import annotations

import logging
import threading
from typing import Iterable, Optional

from ..core.errors import DuplicateAccountError
from ..core.money import format_cents
from ..domain import Account, Ledger
from ..models import (
    AccountCreate,
    AccountResponse,
    LedgerSummaryResponse,
    MoneyMovementRequest,
    TransferRequest,
    TransferResponse,
)


logger = logging.getLogger(__name__)


class LedgerService:
    """Serialised access to a single in-memory :class:`Ledger`.

    FastAPI runs sync endpoints in a threadpool, so every public method holds
    one re-entrant lock for its whole duration. A transfer is therefore one
    critical section from validation through the final deposit.
    """

    def __init__(self, ledger: Optional[Ledger] = None) -> None:
        self.ledger = ledger if ledger is not None else Ledger()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _account_to_response(self, account: Account) -> AccountResponse:
        return AccountResponse(
            id=account.id,
            holder=account.holder,
            balance=account.balance,
            balance_display=format_cents(account.balance),
        )

    def _next_id(self) -> int:
        return max(self.ledger.accounts, default=0) + 1

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def register(self, accounts: Iterable[Account]) -> None:
        """Add already-built accounts, e.g. a seeded demo ledger."""
        with self._lock:
            for account in accounts:
                self.ledger.add_account(account)
                logger.info(
                    "account.registered",
                    extra={"account_id": account.id, "balance": account.balance},
                )

    def is_empty(self) -> bool:
        with self._lock:
            return len(self.ledger) == 0

    def create_account(self, payload: AccountCreate) -> AccountResponse:
        with self._lock:
            account_id = payload.id if payload.id is not None else self._next_id()
            if account_id in self.ledger:
                raise DuplicateAccountError(account_id)

            account = Account(account_id, payload.holder)
            self.ledger.add_account(account)
            logger.info(
                "account.created",
                extra={"account_id": account.id, "holder": account.holder},
            )
            return self._account_to_response(account)

    def get_account(self, account_id: int) -> AccountResponse:
        with self._lock:
            return self._account_to_response(self.ledger.require_account(account_id))

    def deposit(self, account_id: int, payload: MoneyMovementRequest) -> AccountResponse:
        with self._lock:
            account = self.ledger.require_account(account_id)
            account.deposit(payload.amount)
            logger.info(
                "account.deposit",
                extra={
                    "account_id": account_id,
                    "amount": payload.amount,
                    "balance": account.balance,
                },
            )
            return self._account_to_response(account)

    def withdraw(self, account_id: int, payload: MoneyMovementRequest) -> AccountResponse:
        with self._lock:
            account = self.ledger.require_account(account_id)
            account.withdraw(payload.amount)
            logger.info(
                "account.withdraw",
                extra={
                    "account_id": account_id,
                    "amount": payload.amount,
                    "balance": account.balance,
                },
            )
            return self._account_to_response(account)

    def transfer(self, payload: TransferRequest) -> TransferResponse:
        with self._lock:
            self.ledger.transfer(
                payload.source_account_id,
                payload.dest_account_id,
                payload.amount,
            )
            source = self.ledger.require_account(payload.source_account_id)
            dest = self.ledger.require_account(payload.dest_account_id)
            logger.info(
                "account.transfer",
                extra={
                    "source_account_id": payload.source_account_id,
                    "dest_account_id": payload.dest_account_id,
                    "amount": payload.amount,
                },
            )
            return TransferResponse(
                source=self._account_to_response(source),
                dest=self._account_to_response(dest),
            )

    def total_balance(self) -> int:
        with self._lock:
            return self.ledger.total_balance()

    def summary(self) -> LedgerSummaryResponse:
        with self._lock:
            total = self.ledger.total_balance()
            lines = [account.summary() for account in self.ledger]
            lines.append(str(self.ledger))
            return LedgerSummaryResponse(
                accounts=[self._account_to_response(account) for account in self.ledger],
                total_balance=total,
                total_display=format_cents(total),
                text="\n".join(lines),
            )
