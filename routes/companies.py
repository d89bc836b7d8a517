from flask import Blueprint, current_app, g

import storage
from models import db
from schemas.company import CompanyCreate, CompanyUpdate, UserCreate
from schemas.enums import ADMIN_ROLES, UserRole
from utils.auth_utils import hash_password
from utils.decorators import (
    token_required, super_admin_required, company_admin_required, company_scope_required,
)
from utils.errors import AuthorizationError, NotFoundError, ValidationError
from utils.responses import ok, serialize_all
from utils.validators import parse_body

companies_bp = Blueprint("companies", __name__)


def _create_user(email, password, name, role, company_id, **extra):
    if storage.users.get_by_email(email):
        raise ValidationError("Email already exists")
    return storage.users.create(
        email=email.lower(),
        password=hash_password(password),
        name=name,
        role=role,
        company_id=company_id,
        **extra,
    )


# =========================================================
# COMPANIES
# =========================================================
@companies_bp.route("/companies", methods=["GET"])
@super_admin_required
def list_companies():
    return ok(serialize_all(storage.companies.all()))


@companies_bp.route("/companies/<company_id>", methods=["GET"])
@token_required
@company_scope_required("company_id")
def get_company(company_id):
    company = storage.companies.get(company_id)
    if not company:
        raise NotFoundError("Company not found")
    return ok(company.to_dict())


@companies_bp.route("/companies", methods=["POST"])
@super_admin_required
def create_company():
    data = parse_body(CompanyCreate)
    if storage.companies.get_by_email(data.email):
        raise ValidationError("Company email already exists")

    company = storage.companies.create(
        name=data.name,
        email=data.email.lower(),
        status=data.status,
        plan=data.plan,
        max_employees=data.max_employees,
    )
    if data.admin:
        _create_user(data.admin.email, data.admin.password, data.admin.name, UserRole.COMPANY_ADMIN.value, company.id)
    db.session.commit()

    current_app.logger.info("Company %s onboarded", company.id)
    return ok(company.to_dict(), 201)


@companies_bp.route("/companies/<company_id>", methods=["PATCH"])
@super_admin_required
def update_company(company_id):
    fields = parse_body(CompanyUpdate).fields_set(not_null=("status", "plan", "max_employees"))
    company = storage.companies.update(company_id, **fields)
    if not company:
        raise NotFoundError("Company not found")
    db.session.commit()
    return ok(company.to_dict())


@companies_bp.route("/companies/<company_id>/users", methods=["GET"])
@company_admin_required
@company_scope_required("company_id")
def list_company_users(company_id):
    return ok(serialize_all(storage.users.get_by_company(company_id)))


# =========================================================
# USERS
# =========================================================
@companies_bp.route("/users", methods=["POST"])
@company_admin_required
def create_user():
    data = parse_body(UserCreate)
    session = g.session

    if data.role in ADMIN_ROLES and session.role != UserRole.SUPER_ADMIN.value:
        raise AuthorizationError("Only super admins can create admin users")

    role, company_id = data.role, data.company_id
    if session.role == UserRole.COMPANY_ADMIN.value:
        role, company_id = UserRole.EMPLOYEE.value, session.company_id

    if role != UserRole.SUPER_ADMIN.value:
        if not company_id:
            raise ValidationError("companyId is required")
        if not storage.companies.get(company_id):
            raise NotFoundError("Company not found")
    else:
        company_id = None

    user = _create_user(
        data.email, data.password, data.name, role, company_id,
        department=data.department, position=data.position, status=data.status,
    )
    db.session.commit()
    current_app.logger.info("User %s created with role %s", user.id, role)
    return ok(user.to_dict(), 201)
