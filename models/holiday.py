from datetime import datetime
from models import db, new_id, iso


class Holiday(db.Model):
    __tablename__ = 'holidays'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    company_id = db.Column(db.String(36), db.ForeignKey('companies.id'), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    # empty / null means company-wide
    department_ids = db.Column(db.JSON, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "companyId": self.company_id,
            "date": iso(self.date),
            "name": self.name,
            "description": self.description,
            "departmentIds": self.department_ids,
            "createdAt": iso(self.created_at),
        }
