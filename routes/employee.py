from flask import Blueprint, current_app, g

import storage
from models import db
from schemas.employee import EmployeeCreate, EmployeeUpdate
from utils.decorators import token_required, company_admin_required
from utils.errors import NotFoundError, ValidationError
from utils.policy import enforce
from utils.responses import ok, serialize_all
from utils.scoping import is_super_admin, require_company_id
from utils.validators import parse_body

employee_bp = Blueprint("employee", __name__)

NOT_NULL = ("first_name", "last_name", "email", "phone", "status", "join_date")


def _get_employee(employee_id):
    employee = storage.employees.get(employee_id)
    if not employee:
        raise NotFoundError("Employee not found")
    enforce(g.session, "tenant:read", employee)
    return employee


def _check_manager(company_id, manager_id, employee_id=None):
    if not manager_id:
        return
    if manager_id == employee_id:
        raise ValidationError("An employee cannot report to themselves")
    manager = storage.employees.get(manager_id)
    if manager is None or manager.company_id != company_id:
        raise ValidationError("Reporting manager must belong to the same company")


# -----------------------------
# LIST / GET
# -----------------------------
@employee_bp.route("", methods=["GET"])
@token_required
def list_employees():
    if is_super_admin(g.session):
        return ok(serialize_all(storage.employees.all()))
    return ok(serialize_all(storage.employees.get_by_company(require_company_id())))


@employee_bp.route("/<employee_id>", methods=["GET"])
@token_required
def get_employee(employee_id):
    return ok(_get_employee(employee_id).to_dict())


# -----------------------------
# CREATE
# -----------------------------
@employee_bp.route("", methods=["POST"])
@company_admin_required
def create_employee():
    data = parse_body(EmployeeCreate)
    company_id = require_company_id(data.company_id)
    if not storage.companies.get(company_id):
        raise NotFoundError("Company not found")
    _check_manager(company_id, data.reporting_manager_id)

    fields = data.columns(exclude=("company_id",))
    fields["email"] = fields["email"].lower()
    employee = storage.employees.create(company_id=company_id, **fields)
    db.session.commit()
    current_app.logger.info("Employee %s created in company %s", employee.id, company_id)
    return ok(employee.to_dict(), 201)


# -----------------------------
# UPDATE (companyId never changes)
# -----------------------------
@employee_bp.route("/<employee_id>", methods=["PUT"])
@company_admin_required
def update_employee(employee_id):
    employee = _get_employee(employee_id)
    enforce(g.session, "tenant:write", employee)
    fields = parse_body(EmployeeUpdate).fields_set(not_null=NOT_NULL)
    if "reporting_manager_id" in fields:
        _check_manager(employee.company_id, fields["reporting_manager_id"], employee.id)
    if "email" in fields:
        fields["email"] = fields["email"].lower()

    for key, value in fields.items():
        setattr(employee, key, value)
    db.session.commit()
    return ok(employee.to_dict())


# -----------------------------
# DELETE
# -----------------------------
@employee_bp.route("/<employee_id>", methods=["DELETE"])
@company_admin_required
def delete_employee(employee_id):
    employee = _get_employee(employee_id)
    enforce(g.session, "tenant:write", employee)
    storage.employees.delete(employee.id)
    db.session.commit()
    current_app.logger.info("Employee %s deleted", employee_id)
    return ok({"success": True})
