"""Console demonstration: two accounts, one transfer, printed summary."""
from __future__ import annotations

import sys

from .core.errors import AccountError
from .domain import Account, Ledger


def build_demo_ledger() -> Ledger:
    ledger = Ledger()

    giorgi = Account(1, "Giorgi")
    qioji = Account(2, "QioJI")

    giorgi.deposit(50_000)
    giorgi.withdraw(25_000)
    qioji.deposit(30_000)

    ledger.add_account(giorgi)
    ledger.add_account(qioji)

    ledger.transfer(1, 2, 10_000)
    return ledger


def main() -> int:
    try:
        ledger = build_demo_ledger()
    except AccountError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(ledger.summary())
    print(ledger)
    return 0


if __name__ == "__main__":
    sys.exit(main())
