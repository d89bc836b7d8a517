from flask import Blueprint, g

import storage
from models import db
from schemas.employee import AttendanceCreate, AttendanceUpdate
from schemas.enums import UserRole
from utils.decorators import token_required, company_admin_required
from utils.errors import AuthorizationError, NotFoundError, ValidationError
from utils.policy import enforce
from utils.responses import ok, serialize_all
from utils.scoping import is_super_admin, require_company_id, resolve_employee
from utils.validators import parse_body

attendance_bp = Blueprint("attendance", __name__)


def _get_record(record_id):
    record = storage.attendance.get(record_id)
    if not record:
        raise NotFoundError("Attendance record not found")
    enforce(g.session, "tenant:write", record)
    return record


@attendance_bp.route("", methods=["GET"])
@token_required
def list_records():
    session = g.session
    if is_super_admin(session):
        return ok(serialize_all(storage.attendance.all()))
    company_id = require_company_id()
    if session.role == UserRole.EMPLOYEE.value:
        # employees only see their own rows
        me = resolve_employee(session)
        if me is None:
            return ok([])
        return ok(serialize_all(storage.attendance.get_by_employee(me.id)))
    return ok(serialize_all(storage.attendance.get_by_company(company_id)))


@attendance_bp.route("/employee/<employee_id>", methods=["GET"])
@token_required
def list_employee_records(employee_id):
    employee = storage.employees.get(employee_id)
    if not employee:
        raise NotFoundError("Employee not found")
    enforce(g.session, "tenant:read", employee)
    if g.session.role == UserRole.EMPLOYEE.value:
        me = resolve_employee(g.session)
        if me is None or me.id != employee.id:
            raise AuthorizationError("Access denied")
    return ok(serialize_all(storage.attendance.get_by_employee(employee.id)))


@attendance_bp.route("", methods=["POST"])
@token_required
def create_record():
    session = g.session
    data = parse_body(AttendanceCreate)
    company_id = require_company_id(data.company_id)

    employee = storage.employees.get(data.employee_id)
    if employee is None or employee.company_id != company_id:
        raise ValidationError("Employee not found in this company")
    if session.role == UserRole.EMPLOYEE.value:
        me = resolve_employee(session)
        if me is None or me.id != employee.id:
            raise AuthorizationError("You can only record your own attendance")
    if data.shift_id:
        shift = storage.shifts.get(data.shift_id)
        if shift is None or shift.company_id != company_id:
            raise ValidationError("Unknown shift")

    record = storage.attendance.create(company_id=company_id, **data.columns(exclude=("company_id",)))
    if record.duration is None:
        record.recalc_duration()
    db.session.commit()
    return ok(record.to_dict(), 201)


@attendance_bp.route("/<record_id>", methods=["PUT"])
@company_admin_required
def update_record(record_id):
    record = _get_record(record_id)
    fields = parse_body(AttendanceUpdate).fields_set(not_null=("date", "status"))
    for key, value in fields.items():
        setattr(record, key, value)
    if "duration" not in fields and ("check_in" in fields or "check_out" in fields):
        record.recalc_duration()
    db.session.commit()
    return ok(record.to_dict())


@attendance_bp.route("/<record_id>", methods=["DELETE"])
@company_admin_required
def delete_record(record_id):
    record = _get_record(record_id)
    storage.attendance.delete(record.id)
    db.session.commit()
    return ok({"success": True})
