from datetime import datetime
from models import db


class UserSession(db.Model):
    """Server-side session row backing DatabaseSessionStore."""
    __tablename__ = 'user_sessions'

    id = db.Column(db.String(64), primary_key=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    email = db.Column(db.String(120), nullable=False)
    role = db.Column(db.String(20), nullable=False)
    company_id = db.Column(db.String(36), nullable=True)
    expires_at = db.Column(db.DateTime, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
