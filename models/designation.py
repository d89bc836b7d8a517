from datetime import datetime
from models import db, new_id, iso


class Designation(db.Model):
    __tablename__ = 'designations'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    company_id = db.Column(db.String(36), db.ForeignKey('companies.id'), nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "companyId": self.company_id,
            "name": self.name,
            "description": self.description,
            "createdAt": iso(self.created_at),
        }

    def __repr__(self):
        return f"<Designation {self.name}>"
