from datetime import datetime
from models import db, new_id, iso


class LeaveType(db.Model):
    __tablename__ = 'leave_types'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    company_id = db.Column(db.String(36), db.ForeignKey('companies.id'), nullable=False, index=True)
    code = db.Column(db.String(20), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    max_days = db.Column(db.Integer)
    carry_forward = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "companyId": self.company_id,
            "code": self.code,
            "name": self.name,
            "maxDays": self.max_days,
            "carryForward": bool(self.carry_forward),
            "createdAt": iso(self.created_at),
        }
