from typing import Optional

from pydantic import BaseModel, Field, StrictInt

class AccountCreate(BaseModel):
    holder: str = Field(..., min_length=1, description="Name of the account holder")
    id: Optional[int] = Field(default=None, ge=1, description="Explicit id; allocated when omitted")

class AccountResponse(BaseModel):
    id: int
    holder: str
    balance: int = Field(..., ge=0, description="Balance in minor units (e.g. cents)")
    balance_display: str = Field(..., description="Balance rendered as dollars, e.g. $250.00")

class MoneyMovementRequest(BaseModel):
    amount: StrictInt = Field(..., description="Amount in minor units; negatives are rejected by the ledger")

class TransferRequest(BaseModel):
    source_account_id: int
    dest_account_id: int
    amount: StrictInt

class TransferResponse(BaseModel):
    source: AccountResponse
    dest: AccountResponse

class LedgerSummaryResponse(BaseModel):
    accounts: list[AccountResponse]
    total_balance: int
    total_display: str
    text: str = Field(..., description="Account summary lines followed by the bank total line")
