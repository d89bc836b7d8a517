from typing import Optional
from pydantic import EmailStr, Field

from schemas.base import CamelModel
from schemas.enums import UserRole


class CompanyAdminCreate(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)


class CompanyCreate(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    status: str = "active"
    plan: str = "basic"
    max_employees: int = Field(default=50, ge=1)
    # onboarding: first COMPANY_ADMIN login, created with the company
    admin: Optional[CompanyAdminCreate] = None


class CompanyUpdate(CamelModel):
    status: Optional[str] = None
    plan: Optional[str] = None
    max_employees: Optional[int] = Field(default=None, ge=1)


class UserCreate(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)
    name: str = Field(min_length=1)
    role: UserRole = Field(default=UserRole.EMPLOYEE, validate_default=True)
    company_id: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    status: str = "active"
