from functools import wraps

from flask import g, current_app

from schemas.enums import ADMIN_ROLES, UserRole
from utils.auth_utils import get_session
from utils.errors import AuthenticationError, AuthorizationError


def _load_session():
    if g.get("session") is None:
        session = get_session()
        if session is None:
            current_app.logger.debug("Auth failed: missing, invalid or expired token")
            raise AuthenticationError("Authentication required")
        g.session = session
    return g.session


def token_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        _load_session()
        return f(*args, **kwargs)
    return decorated


def role_required(allowed_roles, message="Access denied"):
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            session = _load_session()
            if session.role not in allowed_roles:
                raise AuthorizationError(message)
            return f(*args, **kwargs)
        return decorated_function
    return decorator


super_admin_required = role_required((UserRole.SUPER_ADMIN.value,), "Super admin access required")
company_admin_required = role_required(ADMIN_ROLES, "Admin access required")


def company_scope_required(param="company_id"):
    """Path-level check: the URL's company id must be the caller's, unless SUPER_ADMIN."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            session = _load_session()
            if session.role != UserRole.SUPER_ADMIN.value and kwargs.get(param) != session.company_id:
                raise AuthorizationError("Access to this company is not allowed")
            return f(*args, **kwargs)
        return decorated_function
    return decorator
