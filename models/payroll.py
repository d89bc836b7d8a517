from datetime import datetime
from models import db, new_id, iso
from sqlalchemy import CheckConstraint


class PayrollRecord(db.Model):
    __tablename__ = 'payroll_records'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    company_id = db.Column(db.String(36), db.ForeignKey('companies.id'), nullable=False, index=True)
    employee_id = db.Column(db.String(36), db.ForeignKey('employees.id'), nullable=False, index=True)

    month = db.Column(db.Integer, nullable=False)  # 1-12
    year = db.Column(db.Integer, nullable=False)
    status = db.Column(db.String(20), nullable=False, default='pending')  # pending/approved/rejected

    working_days = db.Column(db.Integer, nullable=False)
    present_days = db.Column(db.Integer, nullable=False)
    absent_days = db.Column(db.Integer, nullable=False)
    paid_leave_days = db.Column(db.Integer, default=0)
    overtime_hours = db.Column(db.Integer, default=0)

    gross_pay = db.Column(db.Float, nullable=False, default=0)
    total_deductions = db.Column(db.Float, nullable=False, default=0)
    net_pay = db.Column(db.Float, nullable=False, default=0)

    approved_by = db.Column(db.String(36))
    approved_at = db.Column(db.DateTime)
    rejection_reason = db.Column(db.Text)
    # gates employee visibility
    payslip_published = db.Column(db.Boolean, default=False)
    payslip_published_at = db.Column(db.DateTime)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    items = db.relationship('PayrollItem', backref='payroll', lazy=True, cascade="all, delete-orphan")

    __table_args__ = (
        db.UniqueConstraint('employee_id', 'month', 'year', name='uq_payroll_employee_period'),
        CheckConstraint("status IN ('pending', 'approved', 'rejected')", name='chk_payroll_status'),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "companyId": self.company_id,
            "employeeId": self.employee_id,
            "month": self.month,
            "year": self.year,
            "status": self.status,
            "workingDays": self.working_days,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "paidLeaveDays": self.paid_leave_days,
            "overtimeHours": self.overtime_hours,
            "grossPay": self.gross_pay,
            "totalDeductions": self.total_deductions,
            "netPay": self.net_pay,
            "approvedBy": self.approved_by,
            "approvedAt": iso(self.approved_at),
            "rejectionReason": self.rejection_reason,
            "payslipPublished": bool(self.payslip_published),
            "payslipPublishedAt": iso(self.payslip_published_at),
            "createdAt": iso(self.created_at),
        }


class PayrollItem(db.Model):
    __tablename__ = 'payroll_items'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    payroll_id = db.Column(db.String(36), db.ForeignKey('payroll_records.id'), nullable=False, index=True)
    ctc_component_id = db.Column(db.String(36), db.ForeignKey('ctc_components.id'), nullable=True)
    type = db.Column(db.String(20), nullable=False)  # earning / deduction
    name = db.Column(db.String(100), nullable=False)
    amount = db.Column(db.Float, nullable=False)
    description = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("type IN ('earning', 'deduction')", name='chk_payroll_item_type'),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "payrollId": self.payroll_id,
            "ctcComponentId": self.ctc_component_id,
            "type": self.type,
            "name": self.name,
            "amount": self.amount,
            "description": self.description,
            "createdAt": iso(self.created_at),
        }
