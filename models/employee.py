from datetime import datetime
from models import db, new_id, iso


class Employee(db.Model):
    __tablename__ = 'employees'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    # fixed at creation, never rewritten by updates
    company_id = db.Column(db.String(36), db.ForeignKey('companies.id'), nullable=False, index=True)
    first_name = db.Column(db.String(50), nullable=False)
    last_name = db.Column(db.String(50), nullable=False)
    # links the HR record to the login User
    email = db.Column(db.String(120), nullable=False, index=True)
    phone = db.Column(db.String(20), nullable=False)
    department_id = db.Column(db.String(36), db.ForeignKey('departments.id'), nullable=True)
    designation_id = db.Column(db.String(36), db.ForeignKey('designations.id'), nullable=True)
    role_level_id = db.Column(db.String(36), db.ForeignKey('roles_levels.id'), nullable=True)
    reporting_manager_id = db.Column(db.String(36), db.ForeignKey('employees.id'), nullable=True, index=True)
    status = db.Column(db.String(20), nullable=False, default='active')
    join_date = db.Column(db.Date, nullable=False)
    exit_date = db.Column(db.Date)
    attendance_type = db.Column(db.String(20), default='regular')

    # JSON fields for the embedded sub-documents
    education = db.Column(db.JSON, default=list)
    experience = db.Column(db.JSON, default=list)
    documents = db.Column(db.JSON, default=list)
    ctc = db.Column(db.JSON, default=list)
    assets = db.Column(db.JSON, default=list)
    bank = db.Column(db.JSON, nullable=True)
    insurance = db.Column(db.JSON, nullable=True)
    statutory = db.Column(db.JSON, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    manager = db.relationship('Employee', remote_side=[id], backref='reportees')

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def to_dict(self):
        return {
            "id": self.id,
            "companyId": self.company_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "departmentId": self.department_id,
            "designationId": self.designation_id,
            "roleLevelId": self.role_level_id,
            "reportingManagerId": self.reporting_manager_id,
            "status": self.status,
            "joinDate": iso(self.join_date),
            "exitDate": iso(self.exit_date),
            "attendanceType": self.attendance_type,
            "education": self.education or [],
            "experience": self.experience or [],
            "documents": self.documents or [],
            "ctc": self.ctc or [],
            "assets": self.assets or [],
            "bank": self.bank,
            "insurance": self.insurance,
            "statutory": self.statutory,
            "createdAt": iso(self.created_at),
        }
