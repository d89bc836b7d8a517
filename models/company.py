from datetime import datetime
from . import db, new_id, iso


class Company(db.Model):
    __tablename__ = 'companies'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.String(150), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    status = db.Column(db.String(20), nullable=False, default="active")
    plan = db.Column(db.String(50), nullable=False, default="basic")
    max_employees = db.Column(db.Integer, default=50)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    users = db.relationship('User', backref='company', lazy=True)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "status": self.status,
            "plan": self.plan,
            "maxEmployees": self.max_employees,
            "createdAt": iso(self.created_at),
        }

    def __repr__(self):
        return f"<Company {self.name}>"
