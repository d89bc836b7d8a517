from typing import List, Optional
from pydantic import Field

from schemas.base import CamelModel


class PayrollGenerate(CamelModel):
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=2000, le=2100)
    employee_ids: List[str] = Field(min_length=1)
    # super admins pick the tenant explicitly
    company_id: Optional[str] = None


class PayrollReject(CamelModel):
    # checked by the service so the message stays "Rejection reason is required"
    reason: Optional[str] = None
