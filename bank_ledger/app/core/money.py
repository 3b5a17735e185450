from __future__ import annotations

from decimal import Decimal

from .errors import NegativeAmountError

# Balances are kept in cents and capped at the signed 64-bit range.
MAX_BALANCE = 2**63 - 1


def format_cents(amount: int) -> str:
    """Render an amount of cents as ``$<units>.<cents>``."""
    return f"${Decimal(amount).scaleb(-2):.2f}"


def validate_amount(amount: int) -> None:
    # bool is an int subclass but never a meaningful amount
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"Amount must be an integer number of cents, got {amount!r}")
    if amount < 0:
        raise NegativeAmountError()
