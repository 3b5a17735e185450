from fastapi import APIRouter, Depends, status

from ..core.dependencies import get_ledger_service
from ..core.money import format_cents
from ..models import (
    AccountCreate,
    AccountResponse,
    LedgerSummaryResponse,
    MoneyMovementRequest,
    TransferRequest,
    TransferResponse,
)
from ..services import LedgerService


router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    payload: AccountCreate,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    return service.create_account(payload)

@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    return service.get_account(account_id)

@router.post("/{account_id}/deposit", response_model=AccountResponse)
def deposit(
    account_id: int,
    payload: MoneyMovementRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    return service.deposit(account_id, payload)

@router.post("/{account_id}/withdraw", response_model=AccountResponse)
def withdraw(
    account_id: int,
    payload: MoneyMovementRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    return service.withdraw(account_id, payload)

transfer_router = APIRouter(prefix="/transfers", tags=["transfers"])

@transfer_router.post("", response_model=TransferResponse)
def create_transfer(
    payload: TransferRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> TransferResponse:
    return service.transfer(payload)

ledger_router = APIRouter(prefix="/ledger", tags=["ledger"])

@ledger_router.get("", response_model=LedgerSummaryResponse)
def get_summary(
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerSummaryResponse:
    return service.summary()

@ledger_router.get("/total")
def get_total(
    service: LedgerService = Depends(get_ledger_service),
) -> dict[str, int | str]:
    total = service.total_balance()
    return {"total_balance": total, "total_display": format_cents(total)}

__all__ = ["router", "transfer_router", "ledger_router"]
