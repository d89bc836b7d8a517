"""
Repository layer over the Flask-SQLAlchemy models.

Repositories add and flush; committing is left to the service or route
that owns the request, so a multi-row change lands in one transaction.
"""
from sqlalchemy import func

from models import (
    db, Company, User, Department, Designation, RoleLevel, CtcComponent,
    Employee, AttendanceRecord, Shift, Holiday, LeaveType, ExpenseType,
    ExpenseClaim, ExpenseClaimItem, PayrollRecord, PayrollItem, Workflow,
)


class Repository:
    def __init__(self, model):
        self.model = model

    @property
    def query(self):
        return self.model.query

    def get(self, id):
        if not id:
            return None
        return db.session.get(self.model, id)

    def get_for_update(self, id):
        return self.query.filter_by(id=id).with_for_update().populate_existing().first()

    def get_by_company(self, company_id):
        return self.query.filter_by(company_id=company_id).order_by(self.model.created_at).all()

    def all(self):
        return self.query.order_by(self.model.created_at).all()

    def create(self, **fields):
        obj = self.model(**fields)
        db.session.add(obj)
        db.session.flush()
        return obj

    def update(self, id, **fields):
        obj = self.get(id)
        if obj is None:
            return None
        for key, value in fields.items():
            setattr(obj, key, value)
        db.session.flush()
        return obj

    def delete(self, id) -> bool:
        obj = self.get(id)
        if obj is None:
            return False
        db.session.delete(obj)
        db.session.flush()
        return True


class CompanyRepository(Repository):
    def get_by_company(self, company_id):
        company = self.get(company_id)
        return [company] if company else []

    def get_by_email(self, email):
        return self.query.filter(func.lower(Company.email) == (email or "").lower()).first()


class UserRepository(Repository):
    def get_by_email(self, email):
        return self.query.filter(func.lower(User.email) == (email or "").lower()).first()


class EmployeeRepository(Repository):
    def get_by_email(self, company_id, email):
        return self.query.filter(
            Employee.company_id == company_id,
            func.lower(Employee.email) == (email or "").lower(),
        ).first()


class AttendanceRepository(Repository):
    def get_by_employee(self, employee_id):
        return (
            self.query.filter_by(employee_id=employee_id)
            .order_by(AttendanceRecord.date.desc())
            .all()
        )

    def count_present(self, employee_id, start, end):
        return self.query.filter(
            AttendanceRecord.employee_id == employee_id,
            AttendanceRecord.date >= start,
            AttendanceRecord.date <= end,
            AttendanceRecord.status.in_(("present", "approved")),
        ).count()


class ExpenseClaimRepository(Repository):
    def get_by_company(self, company_id):
        return (
            self.query.filter_by(company_id=company_id)
            .order_by(ExpenseClaim.created_at.desc())
            .all()
        )

    def all(self):
        return self.query.order_by(ExpenseClaim.created_at.desc()).all()

    def get_by_employee(self, employee_id):
        return (
            self.query.filter_by(employee_id=employee_id)
            .order_by(ExpenseClaim.created_at.desc())
            .all()
        )

    def get_by_manager(self, manager_employee_id, company_id):
        """Claims of every employee reporting to the given manager within one company."""
        team = db.select(Employee.id).where(
            Employee.company_id == company_id,
            Employee.reporting_manager_id == manager_employee_id,
        )
        return (
            self.query.filter(
                ExpenseClaim.company_id == company_id,
                ExpenseClaim.employee_id.in_(team),
            )
            .order_by(ExpenseClaim.created_at.desc())
            .all()
        )

    def count_for_year(self, company_id, year):
        return self.query.filter_by(company_id=company_id, year=year).count()

    def claim_number_exists(self, company_id, claim_number):
        return self.query.filter_by(company_id=company_id, claim_number=claim_number).first() is not None


class ExpenseClaimItemRepository(Repository):
    def get_by_company(self, company_id):
        return (
            self.query.join(ExpenseClaim, ExpenseClaim.id == ExpenseClaimItem.claim_id)
            .filter(ExpenseClaim.company_id == company_id)
            .all()
        )

    def get_by_claim(self, claim_id):
        return (
            self.query.filter_by(claim_id=claim_id)
            .order_by(ExpenseClaimItem.date, ExpenseClaimItem.created_at)
            .all()
        )

    def sum_for_claim(self, claim_id):
        total = (
            db.session.query(func.coalesce(func.sum(ExpenseClaimItem.amount), 0.0))
            .filter(ExpenseClaimItem.claim_id == claim_id)
            .scalar()
        )
        return float(total or 0)


class PayrollRecordRepository(Repository):
    def get_by_company(self, company_id):
        return (
            self.query.filter_by(company_id=company_id)
            .order_by(PayrollRecord.year.desc(), PayrollRecord.month.desc(), PayrollRecord.created_at)
            .all()
        )

    def get_by_employee(self, employee_id):
        return (
            self.query.filter_by(employee_id=employee_id)
            .order_by(PayrollRecord.year.desc(), PayrollRecord.month.desc())
            .all()
        )

    def get_by_employee_and_period(self, employee_id, month, year):
        return self.query.filter_by(employee_id=employee_id, month=month, year=year).first()


class PayrollItemRepository(Repository):
    def get_by_company(self, company_id):
        return (
            self.query.join(PayrollRecord, PayrollRecord.id == PayrollItem.payroll_id)
            .filter(PayrollRecord.company_id == company_id)
            .all()
        )

    def get_by_payroll(self, payroll_id):
        return self.query.filter_by(payroll_id=payroll_id).order_by(PayrollItem.created_at).all()


class WorkflowRepository(Repository):
    def get_by_company(self, company_id):
        return (
            self.query.filter_by(company_id=company_id)
            .order_by(Workflow.created_at.desc())
            .all()
        )

    def get_by_assignee(self, user_id):
        return self.query.filter_by(assigned_to=user_id).order_by(Workflow.created_at.desc()).all()


companies = CompanyRepository(Company)
users = UserRepository(User)
departments = Repository(Department)
designations = Repository(Designation)
roles_levels = Repository(RoleLevel)
ctc_components = Repository(CtcComponent)
shifts = Repository(Shift)
holidays = Repository(Holiday)
leave_types = Repository(LeaveType)
expense_types = Repository(ExpenseType)
employees = EmployeeRepository(Employee)
attendance = AttendanceRepository(AttendanceRecord)
expense_claims = ExpenseClaimRepository(ExpenseClaim)
expense_claim_items = ExpenseClaimItemRepository(ExpenseClaimItem)
payroll_records = PayrollRecordRepository(PayrollRecord)
payroll_items = PayrollItemRepository(PayrollItem)
workflows = WorkflowRepository(Workflow)
