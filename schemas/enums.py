from enum import Enum


class UserRole(str, Enum):
    SUPER_ADMIN = "SUPER_ADMIN"
    COMPANY_ADMIN = "COMPANY_ADMIN"
    EMPLOYEE = "EMPLOYEE"


ADMIN_ROLES = (UserRole.SUPER_ADMIN.value, UserRole.COMPANY_ADMIN.value)


class ClaimStatus(str, Enum):
    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    REJECTED = "rejected"
    DISBURSED = "disbursed"


class PayrollStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PayrollItemType(str, Enum):
    EARNING = "earning"
    DEDUCTION = "deduction"


class CtcComponentType(str, Enum):
    PAYABLE = "payable"
    DEDUCTABLE = "deductable"


class LimitUnit(str, Enum):
    FIXED = "fixed"
    PER_KM = "per_km"
    PER_DAY = "per_day"


class WorkflowType(str, Enum):
    TASK = "task"
    TARGET = "target"


class WorkflowPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class WorkflowStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
