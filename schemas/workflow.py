import datetime as dt
from typing import Optional
from pydantic import Field

from schemas.base import CamelModel
from schemas.enums import WorkflowPriority, WorkflowStatus, WorkflowType

# the only fields an EMPLOYEE may change on a workflow assigned to them
EMPLOYEE_EDITABLE_FIELDS = ("progress", "status", "notes")


class WorkflowCreate(CamelModel):
    # only honoured for SUPER_ADMIN callers
    company_id: Optional[str] = None
    title: str = Field(min_length=1)
    description: Optional[str] = None
    type: WorkflowType
    department_id: Optional[str] = None
    assigned_to: str
    deadline: dt.date
    priority: WorkflowPriority = Field(default=WorkflowPriority.MEDIUM, validate_default=True)
    status: WorkflowStatus = Field(default=WorkflowStatus.PENDING, validate_default=True)
    progress: int = Field(default=0, ge=0, le=100)
    notes: Optional[str] = None


class WorkflowUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    type: Optional[WorkflowType] = None
    department_id: Optional[str] = None
    assigned_to: Optional[str] = None
    deadline: Optional[dt.date] = None
    priority: Optional[WorkflowPriority] = None
    status: Optional[WorkflowStatus] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)
    notes: Optional[str] = None
