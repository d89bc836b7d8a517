"""
Seed the database with the platform super admin and, optionally, a demo
tenant (admin, manager, employee, a department and an expense type).

    flask --app app seed --demo
    python seed_hrms.py
"""
from datetime import date

from flask import current_app

import storage
from models import db
from schemas.enums import UserRole
from utils.auth_utils import hash_password

DEMO_PASSWORD = "123456"
DEMO_COMPANY_EMAIL = "contact@democorp.com"


def _ensure_user(email, name, role, company_id, password):
    user = storage.users.get_by_email(email)
    if user:
        return user, False
    user = storage.users.create(
        email=email,
        password=hash_password(password),
        name=name,
        role=role,
        company_id=company_id,
    )
    return user, True


def _ensure_employee(company_id, first_name, last_name, email, manager_id=None, ctc=None):
    employee = storage.employees.get_by_email(company_id, email)
    if employee:
        return employee
    return storage.employees.create(
        company_id=company_id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone="9000000000",
        reporting_manager_id=manager_id,
        join_date=date(2024, 1, 1),
        ctc=ctc or [],
    )


def seed_super_admin():
    cfg = current_app.config
    _, created = _ensure_user(
        cfg["SUPER_ADMIN_EMAIL"], "Super Admin", UserRole.SUPER_ADMIN.value, None, cfg["SUPER_ADMIN_PASSWORD"]
    )
    return created


def seed_demo_company():
    company = storage.companies.get_by_email(DEMO_COMPANY_EMAIL)
    if company is None:
        company = storage.companies.create(name="Demo Corp", email=DEMO_COMPANY_EMAIL, plan="premium")

    _ensure_user("admin@democorp.com", "Demo Admin", UserRole.COMPANY_ADMIN.value, company.id, DEMO_PASSWORD)
    _ensure_user("manager@democorp.com", "Maya Manager", UserRole.EMPLOYEE.value, company.id, DEMO_PASSWORD)
    _ensure_user("employee@democorp.com", "Eli Employee", UserRole.EMPLOYEE.value, company.id, DEMO_PASSWORD)

    salary = [
        {"component": "Basic", "amount": 30000, "frequency": "monthly", "type": "earning"},
        {"component": "HRA", "amount": 12000, "frequency": "monthly", "type": "earning"},
        {"component": "PF", "amount": 1800, "frequency": "monthly", "type": "deduction"},
    ]
    manager = _ensure_employee(company.id, "Maya", "Manager", "manager@democorp.com", ctc=salary)
    _ensure_employee(company.id, "Eli", "Employee", "employee@democorp.com", manager_id=manager.id, ctc=salary)

    if not storage.departments.get_by_company(company.id):
        storage.departments.create(company_id=company.id, name="Engineering")
    if not storage.expense_types.get_by_company(company.id):
        storage.expense_types.create(company_id=company.id, code="TRV", name="Travel", bill_mandatory=True)
    return company


def seed(demo=False):
    summary = {"super_admin_created": seed_super_admin()}
    if demo:
        summary["demo_company"] = seed_demo_company().id
    db.session.commit()
    current_app.logger.info("Seed finished: %s", summary)
    return summary


if __name__ == "__main__":
    from app import create_app

    app = create_app()
    with app.app_context():
        print(seed(demo=True))
