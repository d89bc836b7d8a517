from flask import Blueprint, g

from schemas.payroll import PayrollGenerate, PayrollReject
from services import payroll as payroll_service
from utils.decorators import token_required, company_admin_required
from utils.responses import ok, serialize_all
from utils.scoping import require_company_id
from utils.validators import parse_body

payroll_bp = Blueprint("payroll_bp", __name__)


@payroll_bp.get("")
@token_required
def list_payroll():
    return ok(serialize_all(payroll_service.list_payroll(g.session)))


@payroll_bp.post("/generate")
@company_admin_required
def generate_payroll():
    data = parse_body(PayrollGenerate)
    company_id = require_company_id(data.company_id)
    records = payroll_service.generate_payroll(
        g.session, company_id, data.month, data.year, data.employee_ids
    )
    return ok({
        "message": "Generated %d payroll records" % len(records),
        "payrolls": serialize_all(records),
    }, 201)


@payroll_bp.get("/<payroll_id>")
@company_admin_required
def get_payroll(payroll_id):
    return ok(payroll_service.get_payroll(g.session, payroll_id).to_dict())


@payroll_bp.put("/<payroll_id>/approve")
@company_admin_required
def approve_payroll(payroll_id):
    return ok(payroll_service.approve_payroll(g.session, payroll_id).to_dict())


@payroll_bp.put("/<payroll_id>/reject")
@company_admin_required
def reject_payroll(payroll_id):
    data = parse_body(PayrollReject)
    return ok(payroll_service.reject_payroll(g.session, payroll_id, data.reason).to_dict())


@payroll_bp.put("/<payroll_id>/publish")
@company_admin_required
def publish_payroll(payroll_id):
    return ok(payroll_service.publish_payroll(g.session, payroll_id).to_dict())


@payroll_bp.get("/<payroll_id>/items")
@company_admin_required
def list_payroll_items(payroll_id):
    return ok(serialize_all(payroll_service.list_items(g.session, payroll_id)))


@payroll_bp.delete("/<payroll_id>")
@company_admin_required
def delete_payroll(payroll_id):
    payroll_service.delete_payroll(g.session, payroll_id)
    return "", 204
