"""
Company master data: organisation structure (departments, designations,
roles & levels, CTC components) and configuration masters (shifts,
holidays, leave types, expense types).

Every Create schema takes an optional companyId. It is only honoured for
SUPER_ADMIN callers; everyone else gets their session's company.
Update schemas have no companyId at all.
"""
import datetime as dt
from typing import List, Optional
from pydantic import Field

from schemas.base import CamelModel
from schemas.enums import CtcComponentType, LimitUnit

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$"


class DepartmentCreate(CamelModel):
    company_id: Optional[str] = None
    name: str = Field(min_length=1)
    description: Optional[str] = None


class DepartmentUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None


class DesignationCreate(DepartmentCreate):
    pass


class DesignationUpdate(DepartmentUpdate):
    pass


class RoleLevelCreate(CamelModel):
    company_id: Optional[str] = None
    role: str = Field(min_length=1)
    level: str = Field(min_length=1)


class RoleLevelUpdate(CamelModel):
    role: Optional[str] = Field(default=None, min_length=1)
    level: Optional[str] = Field(default=None, min_length=1)


class CtcComponentCreate(CamelModel):
    company_id: Optional[str] = None
    name: str = Field(min_length=1)
    type: CtcComponentType
    is_standard: bool = False


class CtcComponentUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[CtcComponentType] = None
    is_standard: Optional[bool] = None


class ShiftCreate(CamelModel):
    company_id: Optional[str] = None
    name: str = Field(min_length=1)
    start_time: str = Field(pattern=TIME_PATTERN)
    end_time: str = Field(pattern=TIME_PATTERN)
    weekly_offs: List[str] = Field(default_factory=list)


class ShiftUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    start_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    weekly_offs: Optional[List[str]] = None


class HolidayCreate(CamelModel):
    company_id: Optional[str] = None
    date: dt.date
    name: str = Field(min_length=1)
    description: Optional[str] = None
    department_ids: Optional[List[str]] = None


class HolidayUpdate(CamelModel):
    date: Optional[dt.date] = None
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    department_ids: Optional[List[str]] = None


class LeaveTypeCreate(CamelModel):
    company_id: Optional[str] = None
    code: str = Field(min_length=1)
    name: str = Field(min_length=1)
    max_days: Optional[int] = Field(default=None, ge=0)
    carry_forward: bool = False


class LeaveTypeUpdate(CamelModel):
    code: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1)
    max_days: Optional[int] = Field(default=None, ge=0)
    carry_forward: Optional[bool] = None


class RoleLevelLimit(CamelModel):
    role_level_id: str
    role_name: Optional[str] = None
    limit_amount: float = Field(ge=0)
    limit_unit: LimitUnit


class ExpenseTypeCreate(CamelModel):
    company_id: Optional[str] = None
    code: str = Field(min_length=1)
    name: str = Field(min_length=1)
    role_level_limits: List[RoleLevelLimit] = Field(default_factory=list)
    enable_google_maps: bool = False
    bill_mandatory: bool = False
    approval_required: bool = True


class ExpenseTypeUpdate(CamelModel):
    code: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1)
    role_level_limits: Optional[List[RoleLevelLimit]] = None
    enable_google_maps: Optional[bool] = None
    bill_mandatory: Optional[bool] = None
    approval_required: Optional[bool] = None
