"""
Expense claim lifecycle.

    draft -> pending_approval -> approved -> disbursed
                             \-> rejected

Every function loads the claim, runs the policy check, validates the
transition and commits once. Item changes lock the claim row and
recompute its total inside the same transaction.
"""
from datetime import datetime

from flask import current_app

import storage
from models import db
from schemas.enums import ClaimStatus
from utils.errors import NotFoundError, StateTransitionError, ValidationError, AuthorizationError
from utils.policy import enforce
from utils.scoping import is_admin, is_super_admin, resolve_employee, require_employee


def _get_claim(claim_id, lock=False):
    claim = storage.expense_claims.get_for_update(claim_id) if lock else storage.expense_claims.get(claim_id)
    if claim is None:
        raise NotFoundError("Expense claim not found")
    return claim


def _get_item(item_id):
    item = storage.expense_claim_items.get(item_id)
    if item is None:
        raise NotFoundError("Expense claim item not found")
    return item


def recalculate_claim_total(claim_id):
    """Set claim.total_amount to the SQL sum of its items, under a row lock."""
    claim = _get_claim(claim_id, lock=True)
    claim.total_amount = round(storage.expense_claim_items.sum_for_claim(claim_id), 2)
    db.session.flush()
    return claim


def next_claim_number(company_id, year):
    seq = storage.expense_claims.count_for_year(company_id, year) + 1
    while True:
        number = "EXP-%d-%03d" % (year, seq)
        if not storage.expense_claims.claim_number_exists(company_id, number):
            return number
        seq += 1


# =========================================================
# READ
# =========================================================
def list_claims(session, view=None, employee_id=None, status=None):
    if view == "manager":
        manager = require_employee(session)
        claims = storage.expense_claims.get_by_manager(manager.id, session.company_id)
        # the approval queue unless the caller asks for another status
        status = status or ClaimStatus.PENDING_APPROVAL.value
    elif view == "employee" or employee_id:
        me = require_employee(session)
        target = employee_id or me.id
        if target != me.id and not is_admin(session):
            raise AuthorizationError("Not authorized to view other employees' claims")
        claims = storage.expense_claims.get_by_employee(target)
    elif is_super_admin(session):
        claims = storage.expense_claims.all()
    elif is_admin(session):
        claims = storage.expense_claims.get_by_company(session.company_id)
    else:
        me = require_employee(session)
        claims = storage.expense_claims.get_by_employee(me.id)

    if not is_super_admin(session):
        claims = [c for c in claims if c.company_id == session.company_id]
    if status:
        claims = [c for c in claims if c.status == status]
    return claims


def get_claim(session, claim_id):
    claim = _get_claim(claim_id)
    enforce(session, "claim:view", claim, resolve_employee(session),
            message="Not authorized to access this claim")
    return claim


def list_items(session, claim_id):
    claim = _get_claim(claim_id)
    enforce(session, "claim:view", claim, resolve_employee(session),
            message="Not authorized to access this claim")
    return storage.expense_claim_items.get_by_claim(claim.id)


# =========================================================
# WRITE
# =========================================================
def create_claim(session, data):
    """
    companyId always comes from the session; employeeId defaults to the
    caller's own record and only a company admin may file for someone else.
    """
    me = require_employee(session)
    employee_id = data.employee_id or me.id
    if employee_id != me.id:
        if not is_admin(session):
            raise AuthorizationError("Not authorized to create claims for other employees")
        target = storage.employees.get(employee_id)
        if target is None or target.company_id != session.company_id:
            raise NotFoundError("Employee not found")

    claim_number = data.claim_number or next_claim_number(session.company_id, data.year)
    claim = storage.expense_claims.create(
        company_id=session.company_id,
        employee_id=employee_id,
        claim_number=claim_number,
        month=data.month,
        year=data.year,
        total_amount=0,
        status=ClaimStatus.DRAFT.value,
    )
    db.session.commit()
    current_app.logger.info("Expense claim %s created for employee %s", claim.id, employee_id)
    return claim


def update_claim(session, claim_id, data):
    claim = _get_claim(claim_id)
    enforce(session, "claim:update", claim, resolve_employee(session),
            message="Not authorized to update this claim")
    if not is_admin(session) and claim.status != ClaimStatus.DRAFT.value:
        raise StateTransitionError("Can only update draft claims")

    fields = data.fields_set(not_null=("month", "year", "claim_number"))
    # the total is derived from items, never taken from the body
    fields.pop("total_amount", None)
    for key, value in fields.items():
        setattr(claim, key, value)
    db.session.commit()
    return claim


def delete_claim(session, claim_id):
    claim = _get_claim(claim_id)
    enforce(session, "claim:delete", claim, resolve_employee(session),
            message="Not authorized to delete this claim")
    if claim.status != ClaimStatus.DRAFT.value:
        raise StateTransitionError("Can only delete draft claims")
    storage.expense_claims.delete(claim.id)
    db.session.commit()
    current_app.logger.info("Expense claim %s deleted", claim_id)
    return True


def submit_claim(session, claim_id):
    claim = _get_claim(claim_id, lock=True)
    enforce(session, "claim:submit", claim, resolve_employee(session),
            message="Not authorized to submit this claim")
    if claim.status != ClaimStatus.DRAFT.value:
        raise StateTransitionError("Can only submit draft claims")
    if not storage.expense_claim_items.get_by_claim(claim.id):
        raise StateTransitionError("Cannot submit empty claim. Add expense items first.")

    claim.status = ClaimStatus.PENDING_APPROVAL.value
    claim.submitted_at = datetime.utcnow()
    db.session.commit()
    current_app.logger.info("Expense claim %s submitted", claim.id)
    return claim


def _review(session, claim_id, verb, new_status, remarks):
    claim = _get_claim(claim_id, lock=True)
    enforce(session, "tenant:write", claim, message="Not authorized to %s this claim" % verb)
    if claim.status != ClaimStatus.PENDING_APPROVAL.value:
        raise StateTransitionError("Can only %s claims that are pending approval" % verb)

    reviewer = resolve_employee(session)
    if reviewer is None:
        raise AuthorizationError("User has no associated employee record")
    if claim.employee is None:
        raise NotFoundError("Employee not found")
    enforce(session, "claim:review", claim, reviewer,
            message="Only the reporting manager can %s this claim" % verb)

    claim.status = new_status
    claim.manager_reviewed_by = reviewer.id
    claim.manager_reviewed_at = datetime.utcnow()
    claim.manager_remarks = remarks
    db.session.commit()
    current_app.logger.info("Expense claim %s %s by %s", claim.id, new_status, reviewer.id)
    return claim


def approve_claim(session, claim_id, remarks=None):
    return _review(session, claim_id, "approve", ClaimStatus.APPROVED.value, remarks or None)


def reject_claim(session, claim_id, remarks=None):
    return _review(session, claim_id, "reject", ClaimStatus.REJECTED.value, remarks or "Rejected by manager")


def disburse_claim(session, claim_id):
    claim = _get_claim(claim_id, lock=True)
    enforce(session, "claim:disburse", claim, message="Not authorized to disburse this claim")
    if claim.status != ClaimStatus.APPROVED.value:
        raise StateTransitionError("Only approved claims can be disbursed")

    claim.status = ClaimStatus.DISBURSED.value
    claim.admin_disbursed_by = session.user_id
    claim.admin_disbursed_at = datetime.utcnow()
    db.session.commit()
    current_app.logger.info("Expense claim %s disbursed by %s", claim.id, session.user_id)
    return claim


# =========================================================
# ITEMS
# =========================================================
def _lock_for_items(session, claim_id):
    claim = _get_claim(claim_id, lock=True)
    enforce(session, "claim:items", claim, resolve_employee(session),
            message="Not authorized to modify this claim")
    if not is_admin(session) and claim.status != ClaimStatus.DRAFT.value:
        raise StateTransitionError("Can only change items of draft claims")
    return claim


def _check_expense_type(claim, expense_type_id):
    expense_type = storage.expense_types.get(expense_type_id)
    if expense_type is None or expense_type.company_id != claim.company_id:
        raise ValidationError("Unknown expense type")
    return expense_type


def add_item(session, claim_id, data):
    claim = _lock_for_items(session, claim_id)
    _check_expense_type(claim, data.expense_type_id)
    item = storage.expense_claim_items.create(claim_id=claim.id, **data.columns())
    recalculate_claim_total(claim.id)
    db.session.commit()
    return item


def update_item(session, item_id, data):
    item = _get_item(item_id)
    claim = _lock_for_items(session, item.claim_id)
    fields = data.fields_set(not_null=("expense_type_id", "date", "amount"))
    if "expense_type_id" in fields:
        _check_expense_type(claim, fields["expense_type_id"])
    for key, value in fields.items():
        setattr(item, key, value)
    recalculate_claim_total(claim.id)
    db.session.commit()
    return item


def delete_item(session, item_id):
    item = _get_item(item_id)
    claim = _lock_for_items(session, item.claim_id)
    storage.expense_claim_items.delete(item.id)
    recalculate_claim_total(claim.id)
    db.session.commit()
    return True
