from flask import Blueprint, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from models import db
from utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health():
    try:
        db.session.execute(text("SELECT 1"))
        database = "up"
    except SQLAlchemyError:
        current_app.logger.exception("Health check: database unreachable")
        database = "down"
    return ok({"status": "up", "database": database})
