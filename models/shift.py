from datetime import datetime
from models import db, new_id, iso


class Shift(db.Model):
    __tablename__ = 'shifts'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    company_id = db.Column(db.String(36), db.ForeignKey('companies.id'), nullable=False, index=True)
    name = db.Column(db.String(50), nullable=False)
    start_time = db.Column(db.String(8), nullable=False)  # HH:MM
    end_time = db.Column(db.String(8), nullable=False)
    weekly_offs = db.Column(db.JSON, default=list)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "companyId": self.company_id,
            "name": self.name,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "weeklyOffs": self.weekly_offs or [],
            "createdAt": iso(self.created_at),
        }
