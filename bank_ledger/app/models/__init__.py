from .schemas import (
    AccountCreate,
    AccountResponse,
    LedgerSummaryResponse,
    MoneyMovementRequest,
    TransferRequest,
    TransferResponse,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "LedgerSummaryResponse",
    "MoneyMovementRequest",
    "TransferRequest",
    "TransferResponse",
]
