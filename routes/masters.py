"""
Company master data.

All eight masters share the same rules, so the routes are registered from
one table instead of being written out eight times:

    GET     /<resource>        caller's company (SUPER_ADMIN: every company)
    POST    /<resource>        company admin; companyId from the session
    PUT     /<resource>/<id>   company admin; owner company only
    DELETE  /<resource>/<id>   company admin; owner company only
"""
from flask import Blueprint, g

import storage
from models import db
from schemas import masters as schemas
from utils.decorators import token_required, company_admin_required
from utils.errors import NotFoundError
from utils.policy import enforce
from utils.responses import ok, serialize_all
from utils.scoping import is_super_admin, require_company_id
from utils.validators import parse_body

masters_bp = Blueprint("masters", __name__)

# url segment -> (repository, create schema, update schema, label, admin-only reads)
MASTERS = {
    "departments": (storage.departments, schemas.DepartmentCreate, schemas.DepartmentUpdate, "Department", False),
    "designations": (storage.designations, schemas.DesignationCreate, schemas.DesignationUpdate, "Designation", False),
    "roles-levels": (storage.roles_levels, schemas.RoleLevelCreate, schemas.RoleLevelUpdate, "Role level", False),
    "ctc-components": (storage.ctc_components, schemas.CtcComponentCreate, schemas.CtcComponentUpdate, "CTC component", True),
    "shifts": (storage.shifts, schemas.ShiftCreate, schemas.ShiftUpdate, "Shift", False),
    "holidays": (storage.holidays, schemas.HolidayCreate, schemas.HolidayUpdate, "Holiday", False),
    "leave-types": (storage.leave_types, schemas.LeaveTypeCreate, schemas.LeaveTypeUpdate, "Leave type", False),
    "expense-types": (storage.expense_types, schemas.ExpenseTypeCreate, schemas.ExpenseTypeUpdate, "Expense type", False),
}


def _load(repo, label, record_id):
    record = repo.get(record_id)
    if not record:
        raise NotFoundError("%s not found" % label)
    enforce(g.session, "tenant:write", record)
    return record


def register_master(resource, repo, create_schema, update_schema, label, admin_reads):
    endpoint = resource.replace("-", "_")
    required = tuple(name for name, field in create_schema.model_fields.items() if field.is_required())
    read_guard = company_admin_required if admin_reads else token_required

    @read_guard
    def list_records():
        if is_super_admin(g.session):
            return ok(serialize_all(repo.all()))
        return ok(serialize_all(repo.get_by_company(require_company_id())))

    @company_admin_required
    def create_record():
        data = parse_body(create_schema)
        company_id = require_company_id(data.company_id)
        if not storage.companies.get(company_id):
            raise NotFoundError("Company not found")
        record = repo.create(company_id=company_id, **data.columns(exclude=("company_id",)))
        db.session.commit()
        return ok(record.to_dict(), 201)

    @company_admin_required
    def update_record(record_id):
        record = _load(repo, label, record_id)
        for key, value in parse_body(update_schema).fields_set(not_null=required).items():
            setattr(record, key, value)
        db.session.commit()
        return ok(record.to_dict())

    @company_admin_required
    def delete_record(record_id):
        record = _load(repo, label, record_id)
        repo.delete(record.id)
        db.session.commit()
        return ok({"success": True})

    masters_bp.add_url_rule("/%s" % resource, "list_%s" % endpoint, list_records, methods=["GET"])
    masters_bp.add_url_rule("/%s" % resource, "create_%s" % endpoint, create_record, methods=["POST"])
    masters_bp.add_url_rule("/%s/<record_id>" % resource, "update_%s" % endpoint, update_record, methods=["PUT"])
    masters_bp.add_url_rule("/%s/<record_id>" % resource, "delete_%s" % endpoint, delete_record, methods=["DELETE"])


for _resource, _config in MASTERS.items():
    register_master(_resource, *_config)
