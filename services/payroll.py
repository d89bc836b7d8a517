import calendar
from datetime import date, datetime

from flask import current_app

import storage
from models import db
from schemas.enums import PayrollItemType, PayrollStatus, UserRole
from utils.errors import NotFoundError, StateTransitionError, ValidationError
from utils.policy import enforce
from utils.scoping import resolve_employee

EARNING_TYPES = ("earning", "payable")
DEDUCTION_TYPES = ("deduction", "deductable")


def _get_payroll(session, payroll_id):
    payroll = storage.payroll_records.get(payroll_id)
    if payroll is None:
        raise NotFoundError("Payroll record not found")
    enforce(session, "tenant:write", payroll)
    return payroll


def _monthly_components(employee):
    for entry in employee.ctc or []:
        if not isinstance(entry, dict) or entry.get("frequency") != "monthly":
            continue
        try:
            amount = float(entry.get("amount") or 0)
        except (TypeError, ValueError):
            continue
        kind = (entry.get("type") or "earning").lower()
        if kind in DEDUCTION_TYPES:
            yield PayrollItemType.DEDUCTION.value, entry.get("component") or "Deduction", amount
        elif kind in EARNING_TYPES:
            yield PayrollItemType.EARNING.value, entry.get("component") or "Earning", amount


def list_payroll(session):
    if session.role == UserRole.EMPLOYEE.value:
        # employees only ever see their own published payslips
        me = resolve_employee(session)
        if me is None:
            return []
        return [p for p in storage.payroll_records.get_by_employee(me.id)
                if p.payslip_published and p.company_id == session.company_id]
    if session.role == UserRole.SUPER_ADMIN.value and not session.company_id:
        return storage.payroll_records.all()
    return storage.payroll_records.get_by_company(session.company_id)


def get_payroll(session, payroll_id):
    return _get_payroll(session, payroll_id)


def list_items(session, payroll_id):
    payroll = _get_payroll(session, payroll_id)
    return storage.payroll_items.get_by_payroll(payroll.id)


def generate_payroll(session, company_id, month, year, employee_ids):
    """Create one pending record per employee for the period; existing periods are skipped."""
    working_days = calendar.monthrange(year, month)[1]
    start = date(year, month, 1)
    end = date(year, month, working_days)

    generated = []
    for employee_id in dict.fromkeys(employee_ids):
        employee = storage.employees.get(employee_id)
        if employee is None or employee.company_id != company_id:
            continue
        if storage.payroll_records.get_by_employee_and_period(employee_id, month, year):
            continue

        present_days = storage.attendance.count_present(employee_id, start, end)
        components = list(_monthly_components(employee))
        gross = round(sum(a for t, _, a in components if t == PayrollItemType.EARNING.value), 2)
        deductions = round(sum(a for t, _, a in components if t == PayrollItemType.DEDUCTION.value), 2)

        record = storage.payroll_records.create(
            company_id=company_id,
            employee_id=employee_id,
            month=month,
            year=year,
            status=PayrollStatus.PENDING.value,
            working_days=working_days,
            present_days=present_days,
            absent_days=max(working_days - present_days, 0),
            paid_leave_days=0,
            overtime_hours=0,
            gross_pay=gross,
            total_deductions=deductions,
            net_pay=round(gross - deductions, 2),
        )
        for item_type, name, amount in components:
            storage.payroll_items.create(payroll_id=record.id, type=item_type, name=name, amount=amount)
        generated.append(record)

    db.session.commit()
    current_app.logger.info(
        "Generated %d payroll records for %02d/%d (company %s)", len(generated), month, year, company_id
    )
    return generated


def approve_payroll(session, payroll_id):
    payroll = _get_payroll(session, payroll_id)
    if payroll.status == PayrollStatus.APPROVED.value:
        raise StateTransitionError("Payroll already approved")
    payroll.status = PayrollStatus.APPROVED.value
    payroll.approved_by = session.user_id
    payroll.approved_at = datetime.utcnow()
    payroll.rejection_reason = None
    db.session.commit()
    current_app.logger.info("Payroll %s approved by %s", payroll.id, session.user_id)
    return payroll


def reject_payroll(session, payroll_id, reason):
    payroll = _get_payroll(session, payroll_id)
    if not reason:
        raise ValidationError("Rejection reason is required")
    payroll.status = PayrollStatus.REJECTED.value
    payroll.rejection_reason = reason
    db.session.commit()
    current_app.logger.info("Payroll %s rejected", payroll.id)
    return payroll


def publish_payroll(session, payroll_id):
    payroll = _get_payroll(session, payroll_id)
    if payroll.status != PayrollStatus.APPROVED.value:
        raise StateTransitionError("Only approved payroll can be published")
    payroll.payslip_published = True
    payroll.payslip_published_at = datetime.utcnow()
    db.session.commit()
    current_app.logger.info("Payslip for payroll %s published", payroll.id)
    return payroll


def delete_payroll(session, payroll_id):
    payroll = _get_payroll(session, payroll_id)
    if payroll.status == PayrollStatus.APPROVED.value or payroll.payslip_published:
        raise StateTransitionError("Cannot delete approved or published payroll")
    storage.payroll_records.delete(payroll.id)
    db.session.commit()
    return True
