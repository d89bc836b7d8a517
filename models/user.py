from datetime import datetime
from models import db, new_id, iso


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    email = db.Column(db.String(120), unique=True, nullable=False)
    # werkzeug hash, never the plain password
    password = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(150), nullable=False)
    role = db.Column(db.String(20), nullable=False)  # SUPER_ADMIN, COMPANY_ADMIN, EMPLOYEE
    company_id = db.Column(db.String(36), db.ForeignKey('companies.id'), nullable=True)
    department = db.Column(db.String(100))
    position = db.Column(db.String(100))
    status = db.Column(db.String(20), nullable=False, default='active')
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role,
            "companyId": self.company_id,
            "department": self.department,
            "position": self.position,
            "status": self.status,
            "createdAt": iso(self.created_at),
        }
