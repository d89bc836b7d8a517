from datetime import datetime
from models import db, new_id, iso


class Workflow(db.Model):
    """Task or target assigned by an admin to a user."""
    __tablename__ = 'workflows'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    company_id = db.Column(db.String(36), db.ForeignKey('companies.id'), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    type = db.Column(db.String(20), nullable=False)  # task / target
    department_id = db.Column(db.String(36), db.ForeignKey('departments.id'), nullable=True)
    assigned_to = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    assigned_by = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False)
    deadline = db.Column(db.Date, nullable=False)
    priority = db.Column(db.String(20), nullable=False, default='medium')  # low/medium/high/urgent
    status = db.Column(db.String(20), nullable=False, default='pending')  # pending/in_progress/completed/cancelled
    progress = db.Column(db.Integer, nullable=False, default=0)  # 0-100
    notes = db.Column(db.Text)
    completed_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "companyId": self.company_id,
            "title": self.title,
            "description": self.description,
            "type": self.type,
            "departmentId": self.department_id,
            "assignedTo": self.assigned_to,
            "assignedBy": self.assigned_by,
            "deadline": iso(self.deadline),
            "priority": self.priority,
            "status": self.status,
            "progress": self.progress,
            "notes": self.notes,
            "completedAt": iso(self.completed_at),
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }
