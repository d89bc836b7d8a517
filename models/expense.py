from datetime import datetime
from sqlalchemy import CheckConstraint
from models import db, new_id, iso


class ExpenseType(db.Model):
    __tablename__ = 'expense_types'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    company_id = db.Column(db.String(36), db.ForeignKey('companies.id'), nullable=False, index=True)
    code = db.Column(db.String(20), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    # [{roleLevelId, roleName, limitAmount, limitUnit}]
    role_level_limits = db.Column(db.JSON, default=list)
    enable_google_maps = db.Column(db.Boolean, default=False)
    bill_mandatory = db.Column(db.Boolean, default=False)
    approval_required = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "companyId": self.company_id,
            "code": self.code,
            "name": self.name,
            "roleLevelLimits": self.role_level_limits or [],
            "enableGoogleMaps": bool(self.enable_google_maps),
            "billMandatory": bool(self.bill_mandatory),
            "approvalRequired": bool(self.approval_required),
            "createdAt": iso(self.created_at),
        }


class ExpenseClaim(db.Model):
    __tablename__ = 'expense_claims'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    company_id = db.Column(db.String(36), db.ForeignKey('companies.id'), nullable=False, index=True)
    employee_id = db.Column(db.String(36), db.ForeignKey('employees.id'), nullable=False, index=True)
    claim_number = db.Column(db.String(50), nullable=False)
    month = db.Column(db.Integer, nullable=False)
    year = db.Column(db.Integer, nullable=False)
    # always the sum of the items, see services.expense_claims.recalculate_claim_total
    total_amount = db.Column(db.Float, nullable=False, default=0)
    status = db.Column(db.String(20), nullable=False, default='draft')
    submitted_at = db.Column(db.DateTime)
    manager_reviewed_by = db.Column(db.String(36), db.ForeignKey('employees.id'))
    manager_reviewed_at = db.Column(db.DateTime)
    manager_remarks = db.Column(db.Text)
    admin_disbursed_by = db.Column(db.String(36))
    admin_disbursed_at = db.Column(db.DateTime)
    version = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    items = db.relationship(
        'ExpenseClaimItem',
        backref='claim',
        lazy=True,
        cascade="all, delete-orphan",
        order_by='ExpenseClaimItem.date',
    )
    employee = db.relationship('Employee', foreign_keys=[employee_id])

    __table_args__ = (
        CheckConstraint(
            "status IN ('draft', 'pending_approval', 'approved', 'rejected', 'disbursed')",
            name='chk_claim_status',
        ),
        CheckConstraint("month >= 1 AND month <= 12", name='chk_claim_month'),
    )
    __mapper_args__ = {"version_id_col": version}

    def to_dict(self):
        return {
            "id": self.id,
            "companyId": self.company_id,
            "employeeId": self.employee_id,
            "claimNumber": self.claim_number,
            "month": self.month,
            "year": self.year,
            "totalAmount": self.total_amount,
            "status": self.status,
            "submittedAt": iso(self.submitted_at),
            "managerReviewedBy": self.manager_reviewed_by,
            "managerReviewedAt": iso(self.manager_reviewed_at),
            "managerRemarks": self.manager_remarks,
            "adminDisbursedBy": self.admin_disbursed_by,
            "adminDisbursedAt": iso(self.admin_disbursed_at),
            "createdAt": iso(self.created_at),
        }


class ExpenseClaimItem(db.Model):
    __tablename__ = 'expense_claim_items'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    claim_id = db.Column(db.String(36), db.ForeignKey('expense_claims.id'), nullable=False, index=True)
    expense_type_id = db.Column(db.String(36), db.ForeignKey('expense_types.id'), nullable=False)
    date = db.Column(db.Date, nullable=False)
    amount = db.Column(db.Float, nullable=False)
    description = db.Column(db.Text)
    bill_url = db.Column(db.String(500))
    start_location = db.Column(db.String(255))
    end_location = db.Column(db.String(255))
    distance_km = db.Column(db.Float)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("amount > 0", name='chk_item_amount_positive'),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "claimId": self.claim_id,
            "expenseTypeId": self.expense_type_id,
            "date": iso(self.date),
            "amount": self.amount,
            "description": self.description,
            "billUrl": self.bill_url,
            "startLocation": self.start_location,
            "endLocation": self.end_location,
            "distanceKm": self.distance_km,
            "createdAt": iso(self.created_at),
        }
