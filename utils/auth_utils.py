"""
Bearer-token sessions and password hashing.

A token is a PyJWT HS256 string whose ``sid`` claim points at a row in the
configured SessionStore. Dropping that row (logout, expiry) invalidates the
token even though its signature is still good.
"""
import secrets
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Optional

import jwt
from flask import current_app, request
from werkzeug.security import generate_password_hash, check_password_hash

from models import db
from models.session import UserSession

SESSION_STORE_KEY = "hrms_session_store"
PASSWORD_HASHER_KEY = "hrms_password_hasher"


@dataclass
class SessionData:
    user_id: str
    email: str
    role: str
    company_id: Optional[str]
    expires_at: datetime

    def is_expired(self, now=None):
        return (now or datetime.utcnow()) >= self.expires_at


class SessionStore:
    def create(self, data: SessionData) -> str:
        raise NotImplementedError

    def get(self, session_id: str) -> Optional[SessionData]:
        raise NotImplementedError

    def destroy(self, session_id: str) -> None:
        raise NotImplementedError

    def purge_expired(self) -> int:
        raise NotImplementedError


class InMemorySessionStore(SessionStore):
    def __init__(self):
        self._sessions: Dict[str, SessionData] = {}
        self._lock = threading.Lock()

    def create(self, data):
        session_id = secrets.token_urlsafe(32)
        with self._lock:
            self._drop_expired(datetime.utcnow())
            self._sessions[session_id] = data
        return session_id

    def _drop_expired(self, now):
        # caller holds the lock
        expired = [sid for sid, data in self._sessions.items() if data.is_expired(now)]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)

    def get(self, session_id):
        with self._lock:
            data = self._sessions.get(session_id)
            if data is not None and data.is_expired():
                del self._sessions[session_id]
                return None
            return data

    def destroy(self, session_id):
        with self._lock:
            self._sessions.pop(session_id, None)

    def purge_expired(self):
        with self._lock:
            return self._drop_expired(datetime.utcnow())


class DatabaseSessionStore(SessionStore):
    """Keeps sessions in the user_sessions table so every worker sees them."""

    def create(self, data):
        session_id = secrets.token_urlsafe(32)
        UserSession.query.filter(UserSession.expires_at <= datetime.utcnow()).delete()
        db.session.add(UserSession(
            id=session_id,
            user_id=data.user_id,
            email=data.email,
            role=data.role,
            company_id=data.company_id,
            expires_at=data.expires_at,
        ))
        db.session.commit()
        return session_id

    def get(self, session_id):
        row = db.session.get(UserSession, session_id)
        if row is None:
            return None
        data = SessionData(row.user_id, row.email, row.role, row.company_id, row.expires_at)
        if data.is_expired():
            db.session.delete(row)
            db.session.commit()
            return None
        return data

    def destroy(self, session_id):
        UserSession.query.filter_by(id=session_id).delete()
        db.session.commit()

    def purge_expired(self):
        count = UserSession.query.filter(UserSession.expires_at <= datetime.utcnow()).delete()
        db.session.commit()
        return count


class PasswordHasher:
    def hash(self, password: str) -> str:
        raise NotImplementedError

    def verify(self, hashed: str, password: str) -> bool:
        raise NotImplementedError


class WerkzeugPasswordHasher(PasswordHasher):
    def hash(self, password):
        return generate_password_hash(password)

    def verify(self, hashed, password):
        if not hashed or password is None:
            return False
        return check_password_hash(hashed, password)


def init_auth(app, store=None, hasher=None):
    if store is None:
        if app.config.get("SESSION_STORE") == "database":
            store = DatabaseSessionStore()
        else:
            store = InMemorySessionStore()
    app.extensions[SESSION_STORE_KEY] = store
    app.extensions[PASSWORD_HASHER_KEY] = hasher or WerkzeugPasswordHasher()


def get_session_store() -> SessionStore:
    return current_app.extensions[SESSION_STORE_KEY]


def get_password_hasher() -> PasswordHasher:
    return current_app.extensions[PASSWORD_HASHER_KEY]


def hash_password(password):
    return get_password_hasher().hash(password)


def verify_password(hashed, password):
    return get_password_hasher().verify(hashed, password)


def create_session(user_id, email, role, company_id) -> str:
    ttl = current_app.config.get("SESSION_TTL_MINUTES", 720)
    expires_at = datetime.utcnow() + timedelta(minutes=ttl)
    session_id = get_session_store().create(
        SessionData(user_id, email, role, company_id, expires_at)
    )
    payload = {"sid": session_id, "sub": user_id, "exp": expires_at}
    return jwt.encode(
        payload,
        current_app.config["SECRET_KEY"],
        algorithm=current_app.config.get("JWT_ALGORITHM", "HS256"),
    )


def bearer_token(req=None):
    header = (req or request).headers.get("Authorization", "")
    if not header.startswith("Bearer "):
        return None
    token = header[len("Bearer "):].strip()
    if not token or token.lower() in ("null", "undefined"):
        return None
    return token


def _session_id(token):
    try:
        claims = jwt.decode(
            token,
            current_app.config["SECRET_KEY"],
            algorithms=[current_app.config.get("JWT_ALGORITHM", "HS256")],
        )
    except jwt.InvalidTokenError as e:
        current_app.logger.debug("Rejected bearer token: %s", e)
        return None
    return claims.get("sid")


def get_session(req=None) -> Optional[SessionData]:
    token = bearer_token(req)
    if not token:
        return None
    session_id = _session_id(token)
    if not session_id:
        return None
    return get_session_store().get(session_id)


def destroy_session(token) -> None:
    session_id = _session_id(token)
    if session_id:
        get_session_store().destroy(session_id)
