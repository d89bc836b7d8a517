from datetime import datetime
from sqlalchemy import CheckConstraint
from models import db, new_id, iso


class CtcComponent(db.Model):
    __tablename__ = 'ctc_components'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    company_id = db.Column(db.String(36), db.ForeignKey('companies.id'), nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    type = db.Column(db.String(20), nullable=False)  # payable / deductable
    is_standard = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("type IN ('payable', 'deductable')", name='chk_ctc_type'),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "companyId": self.company_id,
            "name": self.name,
            "type": self.type,
            "isStandard": bool(self.is_standard),
            "createdAt": iso(self.created_at),
        }
