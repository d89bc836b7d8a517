import datetime as dt
from typing import Optional
from pydantic import Field

from schemas.base import CamelModel
from schemas.enums import ClaimStatus


class ExpenseClaimCreate(CamelModel):
    # defaults to the caller's own employee record
    employee_id: Optional[str] = None
    # generated as EXP-<year>-<NNN> when omitted
    claim_number: Optional[str] = Field(default=None, min_length=1)
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=2000, le=2100)
    # accepted for client compatibility, never applied
    total_amount: Optional[float] = None
    status: Optional[ClaimStatus] = None


class ExpenseClaimUpdate(CamelModel):
    """Whitelist of the claim fields a PATCH may touch."""
    month: Optional[int] = Field(default=None, ge=1, le=12)
    year: Optional[int] = Field(default=None, ge=2000, le=2100)
    claim_number: Optional[str] = Field(default=None, min_length=1)
    total_amount: Optional[float] = Field(default=None, ge=0)


class ExpenseClaimReview(CamelModel):
    remarks: Optional[str] = None


class ExpenseClaimItemCreate(CamelModel):
    expense_type_id: str
    date: dt.date
    amount: float = Field(gt=0)
    description: Optional[str] = None
    bill_url: Optional[str] = None
    start_location: Optional[str] = None
    end_location: Optional[str] = None
    distance_km: Optional[float] = Field(default=None, ge=0)


class ExpenseClaimItemUpdate(CamelModel):
    expense_type_id: Optional[str] = None
    date: Optional[dt.date] = None
    amount: Optional[float] = Field(default=None, gt=0)
    description: Optional[str] = None
    bill_url: Optional[str] = None
    start_location: Optional[str] = None
    end_location: Optional[str] = None
    distance_km: Optional[float] = Field(default=None, ge=0)
