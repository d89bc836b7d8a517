from flask import Blueprint, current_app, g

import storage
from utils.auth_utils import bearer_token, create_session, destroy_session, verify_password
from utils.decorators import token_required
from utils.errors import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from utils.responses import ok
from utils.validators import get_json_body

auth_bp = Blueprint("auth", __name__)


def _user_payload(user):
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "role": user.role,
        "companyId": user.company_id,
        "department": user.department,
        "position": user.position,
    }


# -----------------------------
# 1) LOGIN
# -----------------------------
@auth_bp.route("/login", methods=["POST"])
def login():
    data = get_json_body()
    email = (data.get("email") or "").strip().lower()
    password = data.get("password")

    if not email or not password:
        raise ValidationError("Email and password are required")

    user = storage.users.get_by_email(email)
    if not user or not verify_password(user.password, password):
        current_app.logger.info("Failed login for %s", email)
        raise AuthenticationError("Invalid credentials999")

    if user.status != "active":
        raise AuthorizationError("Account is not active")

    token = create_session(user.id, user.email, user.role, user.company_id)
    current_app.logger.info("User %s logged in", user.id)
    return ok({"token": token, "user": _user_payload(user)})


# -----------------------------
# 2) LOGOUT
# -----------------------------
@auth_bp.route("/logout", methods=["POST"])
@token_required
def logout():
    destroy_session(bearer_token())
    current_app.logger.info("User %s logged out", g.session.user_id)
    return ok({"success": True})


# -----------------------------
# 3) CURRENT USER
# -----------------------------
@auth_bp.route("/me", methods=["GET"])
@token_required
def me():
    user = storage.users.get(g.session.user_id)
    if not user:
        raise NotFoundError("User not found")
    return ok(_user_payload(user))
