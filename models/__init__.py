# models/__init__.py
import uuid
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def new_id():
    return str(uuid.uuid4())


def iso(value):
    return value.isoformat() if value else None


# Import all models
from .company import Company
from .user import User
from .session import UserSession
from .department import Department
from .designation import Designation
from .role_level import RoleLevel
from .ctc_component import CtcComponent
from .employee import Employee
from .attendance import AttendanceRecord
from .shift import Shift
from .holiday import Holiday
from .leave_type import LeaveType
from .expense import ExpenseType, ExpenseClaim, ExpenseClaimItem
from .payroll import PayrollRecord, PayrollItem
from .workflow import Workflow
