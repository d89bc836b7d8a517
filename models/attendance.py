from datetime import datetime
from models import db, new_id, iso


class AttendanceRecord(db.Model):
    __tablename__ = "attendance_records"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    company_id = db.Column(db.String(36), db.ForeignKey("companies.id"), nullable=False, index=True)
    employee_id = db.Column(db.String(36), db.ForeignKey("employees.id"), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False, index=True)

    check_in = db.Column(db.DateTime, nullable=True)
    check_out = db.Column(db.DateTime, nullable=True)
    shift_id = db.Column(db.String(36), db.ForeignKey("shifts.id"), nullable=True)

    # pending / present / approved / absent ...
    status = db.Column(db.String(20), default="pending", nullable=False)
    duration = db.Column(db.Integer)  # minutes
    location = db.Column(db.String(255))
    notes = db.Column(db.Text)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def recalc_duration(self):
        if self.check_in and self.check_out and self.check_out > self.check_in:
            diff = self.check_out - self.check_in
            self.duration = int(diff.total_seconds() // 60)

    def to_dict(self):
        return {
            "id": self.id,
            "companyId": self.company_id,
            "employeeId": self.employee_id,
            "date": iso(self.date),
            "checkIn": iso(self.check_in),
            "checkOut": iso(self.check_out),
            "shiftId": self.shift_id,
            "status": self.status,
            "duration": self.duration,
            "location": self.location,
            "notes": self.notes,
            "createdAt": iso(self.created_at),
        }
