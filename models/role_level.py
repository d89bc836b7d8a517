from datetime import datetime
from models import db, new_id, iso


class RoleLevel(db.Model):
    """Company-defined (role, level) pair, used for expense spending limits."""
    __tablename__ = 'roles_levels'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    company_id = db.Column(db.String(36), db.ForeignKey('companies.id'), nullable=False, index=True)
    role = db.Column(db.String(100), nullable=False)
    level = db.Column(db.String(50), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "companyId": self.company_id,
            "role": self.role,
            "level": self.level,
            "createdAt": iso(self.created_at),
        }
