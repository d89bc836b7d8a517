from flask import g

import storage
from schemas.enums import ADMIN_ROLES, UserRole
from utils.errors import AuthorizationError, ValidationError


def current_session():
    return g.get("session")


def is_super_admin(session=None):
    session = session or current_session()
    return bool(session) and session.role == UserRole.SUPER_ADMIN.value


def is_admin(session=None):
    session = session or current_session()
    return bool(session) and session.role in ADMIN_ROLES


def get_company_id_for_request(requested_company_id=None):
    """
    SUPER_ADMIN can pass company_id.
    Others always get their own company_id.
    """
    session = current_session()
    if not session:
        return None
    if session.role == UserRole.SUPER_ADMIN.value:
        return requested_company_id or session.company_id
    return session.company_id


def require_company_id(requested_company_id=None):
    company_id = get_company_id_for_request(requested_company_id)
    if not company_id:
        if is_super_admin():
            raise ValidationError("companyId is required")
        raise AuthorizationError("User not associated with a company")
    return company_id


def resolve_employee(session=None):
    """The Employee record linked to the session's user (same company, same email)."""
    session = session or current_session()
    if not session or not session.company_id:
        return None
    cached = g.get("employee")
    if cached is not None and cached.email.lower() == session.email.lower():
        return cached
    employee = storage.employees.get_by_email(session.company_id, session.email)
    g.employee = employee
    return employee


def require_employee(session=None):
    employee = resolve_employee(session)
    if employee is None:
        raise ValidationError("User has no associated employee record")
    return employee
