import click
from flask import Flask, jsonify
from flask_cors import CORS
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError
from werkzeug.exceptions import HTTPException

from config import Config
from models import db
from utils.auth_utils import init_auth, get_session_store
from utils.errors import ConflictError, HRMSError
from utils.middleware import init_middleware, get_request_id
from utils.responses import fail
from utils.validators import pydantic_details

# Import Blueprints
from routes.auth import auth_bp
from routes.companies import companies_bp
from routes.masters import masters_bp
from routes.employee import employee_bp
from routes.attendance import attendance_bp
from routes.expense_claims import expense_claims_bp
from routes.payroll import payroll_bp
from routes.workflows import workflows_bp
from routes.health import health_bp


def register_error_handlers(app):
    @app.errorhandler(HRMSError)
    def handle_hrms_error(e):
        db.session.rollback()
        return fail(e.message, e.status_code, details=e.details)

    @app.errorhandler(SchemaValidationError)
    def handle_schema_error(e):
        db.session.rollback()
        return fail("Invalid request data", 400, details=pydantic_details(e))

    @app.errorhandler(StaleDataError)
    def handle_stale(e):
        app.logger.warning("Concurrent modification (request %s): %s", get_request_id(), e)
        return handle_hrms_error(ConflictError("The record was modified by another request, please retry"))

    @app.errorhandler(IntegrityError)
    def handle_integrity(e):
        db.session.rollback()
        app.logger.warning("Integrity error (request %s): %s", get_request_id(), e.orig)
        return fail("Conflicting record", 409)

    @app.errorhandler(HTTPException)
    def handle_http(e):
        return fail(e.description, e.code)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        db.session.rollback()
        app.logger.exception("Unhandled error (request %s)", get_request_id())
        return fail("Internal server error", 500)


def register_commands(app):
    @app.cli.command("seed")
    @click.option("--demo/--no-demo", default=None, help="Also create the demo company.")
    def seed_command(demo):
        """Create the super admin and, optionally, a demo company."""
        from seed_hrms import seed
        if demo is None:
            demo = app.config.get("SEED_DEMO_DATA", False)
        summary = seed(demo=demo)
        click.echo("Seeded: %s" % ", ".join("%s=%s" % kv for kv in summary.items()))

    @app.cli.command("purge-sessions")
    def purge_sessions_command():
        """Drop expired login sessions from the session store."""
        removed = get_session_store().purge_expired()
        click.echo("Purged %d expired sessions" % removed)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize Extensions
    CORS(app, resources={r"/api/*": {
        "origins": app.config.get("CORS_ORIGINS", "*"),
        "allow_headers": ["Content-Type", "Authorization"],
        "methods": ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    }})
    db.init_app(app)
    init_auth(app)
    init_middleware(app)

    # Register Blueprints
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(companies_bp, url_prefix="/api")
    app.register_blueprint(masters_bp, url_prefix="/api")
    app.register_blueprint(employee_bp, url_prefix="/api/employees")
    app.register_blueprint(attendance_bp, url_prefix="/api/attendance-records")
    app.register_blueprint(expense_claims_bp, url_prefix="/api")
    app.register_blueprint(payroll_bp, url_prefix="/api/payroll")
    app.register_blueprint(workflows_bp, url_prefix="/api/workflows")
    app.register_blueprint(health_bp, url_prefix="/api")

    register_error_handlers(app)
    register_commands(app)

    @app.route("/")
    def home():
        return jsonify({"message": "HRMS Multi-Tenant API", "version": "1.0.0"})

    with app.app_context():
        db.create_all()

    return app


if __name__ == "__main__":
    app = create_app()
    if app.config.get("SEED_DEMO_DATA"):
        from seed_hrms import seed
        with app.app_context():
            seed(demo=True)
    app.run(debug=True, port=5000)
