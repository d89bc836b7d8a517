from flask import Blueprint, g, request

from schemas.expense import (
    ExpenseClaimCreate, ExpenseClaimUpdate, ExpenseClaimReview,
    ExpenseClaimItemCreate, ExpenseClaimItemUpdate,
)
from services import expense_claims as claims
from utils.decorators import token_required, company_admin_required
from utils.responses import ok, serialize_all
from utils.validators import parse_body

expense_claims_bp = Blueprint("expense_claims", __name__)


# =========================================================
# CLAIMS
# =========================================================
@expense_claims_bp.route("/expense-claims", methods=["GET"])
@token_required
def list_claims():
    rows = claims.list_claims(
        g.session,
        view=request.args.get("view"),
        employee_id=request.args.get("employeeId"),
        status=request.args.get("status"),
    )
    return ok(serialize_all(rows))


@expense_claims_bp.route("/expense-claims/<claim_id>", methods=["GET"])
@token_required
def get_claim(claim_id):
    return ok(claims.get_claim(g.session, claim_id).to_dict())


@expense_claims_bp.route("/expense-claims", methods=["POST"])
@token_required
def create_claim():
    claim = claims.create_claim(g.session, parse_body(ExpenseClaimCreate))
    return ok(claim.to_dict(), 201)


@expense_claims_bp.route("/expense-claims/<claim_id>", methods=["PATCH"])
@token_required
def update_claim(claim_id):
    claim = claims.update_claim(g.session, claim_id, parse_body(ExpenseClaimUpdate))
    return ok(claim.to_dict())


@expense_claims_bp.route("/expense-claims/<claim_id>", methods=["DELETE"])
@token_required
def delete_claim(claim_id):
    claims.delete_claim(g.session, claim_id)
    return ok({"success": True})


# -----------------------------
# Lifecycle
# -----------------------------
@expense_claims_bp.route("/expense-claims/<claim_id>/submit", methods=["POST"])
@token_required
def submit_claim(claim_id):
    return ok(claims.submit_claim(g.session, claim_id).to_dict())


@expense_claims_bp.route("/expense-claims/<claim_id>/approve", methods=["POST"])
@token_required
def approve_claim(claim_id):
    review = parse_body(ExpenseClaimReview)
    return ok(claims.approve_claim(g.session, claim_id, review.remarks).to_dict())


@expense_claims_bp.route("/expense-claims/<claim_id>/reject", methods=["POST"])
@token_required
def reject_claim(claim_id):
    review = parse_body(ExpenseClaimReview)
    return ok(claims.reject_claim(g.session, claim_id, review.remarks).to_dict())


@expense_claims_bp.route("/expense-claims/<claim_id>/disburse", methods=["POST"])
@company_admin_required
def disburse_claim(claim_id):
    return ok(claims.disburse_claim(g.session, claim_id).to_dict())


# =========================================================
# ITEMS
# =========================================================
@expense_claims_bp.route("/expense-claims/<claim_id>/items", methods=["GET"])
@token_required
def list_items(claim_id):
    return ok(serialize_all(claims.list_items(g.session, claim_id)))


@expense_claims_bp.route("/expense-claims/<claim_id>/items", methods=["POST"])
@token_required
def add_item(claim_id):
    item = claims.add_item(g.session, claim_id, parse_body(ExpenseClaimItemCreate))
    return ok(item.to_dict(), 201)


@expense_claims_bp.route("/expense-claim-items/<item_id>", methods=["PATCH"])
@token_required
def update_item(item_id):
    item = claims.update_item(g.session, item_id, parse_body(ExpenseClaimItemUpdate))
    return ok(item.to_dict())


@expense_claims_bp.route("/expense-claim-items/<item_id>", methods=["DELETE"])
@token_required
def delete_item(item_id):
    claims.delete_item(g.session, item_id)
    return ok({"success": True})
