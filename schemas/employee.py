import datetime as dt
from typing import List, Optional
from pydantic import EmailStr, Field

from schemas.base import CamelModel


class Education(CamelModel):
    degree: str
    institution: str
    year: str
    grade: Optional[str] = None


class Experience(CamelModel):
    company: str
    position: str
    start_date: str
    end_date: Optional[str] = None
    description: Optional[str] = None


class Document(CamelModel):
    name: str
    type: str
    size: float
    url: str
    uploaded_at: str


class CtcEntry(CamelModel):
    component: str
    amount: float
    frequency: str  # monthly / annual / one_time
    type: str  # earning / payable / deduction / deductable


class Asset(CamelModel):
    name: str
    type: str
    serial_number: Optional[str] = None
    assigned_date: str
    return_date: Optional[str] = None


class BankInfo(CamelModel):
    account_number: str
    bank_name: str
    ifsc_code: str
    account_holder_name: str


class InsuranceInfo(CamelModel):
    provider: str
    policy_number: str
    coverage_amount: float
    start_date: str
    end_date: str


class StatutoryInfo(CamelModel):
    pan_number: Optional[str] = None
    aadhar_number: Optional[str] = None
    pf_number: Optional[str] = None
    esi_number: Optional[str] = None
    uan_number: Optional[str] = None


class EmployeeCreate(CamelModel):
    company_id: Optional[str] = None
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    department_id: Optional[str] = None
    designation_id: Optional[str] = None
    role_level_id: Optional[str] = None
    reporting_manager_id: Optional[str] = None
    status: str = "active"
    join_date: dt.date
    exit_date: Optional[dt.date] = None
    attendance_type: str = "regular"
    education: List[Education] = Field(default_factory=list)
    experience: List[Experience] = Field(default_factory=list)
    documents: List[Document] = Field(default_factory=list)
    ctc: List[CtcEntry] = Field(default_factory=list)
    assets: List[Asset] = Field(default_factory=list)
    bank: Optional[BankInfo] = None
    insurance: Optional[InsuranceInfo] = None
    statutory: Optional[StatutoryInfo] = None


class EmployeeUpdate(CamelModel):
    # companyId is deliberately absent: an employee never changes tenant
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, min_length=1)
    department_id: Optional[str] = None
    designation_id: Optional[str] = None
    role_level_id: Optional[str] = None
    reporting_manager_id: Optional[str] = None
    status: Optional[str] = None
    join_date: Optional[dt.date] = None
    exit_date: Optional[dt.date] = None
    attendance_type: Optional[str] = None
    education: Optional[List[Education]] = None
    experience: Optional[List[Experience]] = None
    documents: Optional[List[Document]] = None
    ctc: Optional[List[CtcEntry]] = None
    assets: Optional[List[Asset]] = None
    bank: Optional[BankInfo] = None
    insurance: Optional[InsuranceInfo] = None
    statutory: Optional[StatutoryInfo] = None


class AttendanceCreate(CamelModel):
    company_id: Optional[str] = None
    employee_id: str
    date: dt.date
    check_in: Optional[dt.datetime] = None
    check_out: Optional[dt.datetime] = None
    shift_id: Optional[str] = None
    status: str = "pending"
    duration: Optional[int] = Field(default=None, ge=0)
    location: Optional[str] = None
    notes: Optional[str] = None


class AttendanceUpdate(CamelModel):
    date: Optional[dt.date] = None
    check_in: Optional[dt.datetime] = None
    check_out: Optional[dt.datetime] = None
    shift_id: Optional[str] = None
    status: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=0)
    location: Optional[str] = None
    notes: Optional[str] = None
