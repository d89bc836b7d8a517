"""
Shared fixtures: a fresh app on an in-memory database per test, plus a
seeded two-company world with login helpers.
"""
from datetime import date
from types import SimpleNamespace

import pytest

import storage
from app import create_app
from config import TestingConfig
from models import db
from utils.auth_utils import hash_password

PASSWORD = "secret123"


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _user(email, name, role, company_id=None, status="active"):
    return storage.users.create(
        email=email, password=hash_password(PASSWORD), name=name,
        role=role, company_id=company_id, status=status,
    )


def _employee(company_id, first, email, manager_id=None, ctc=None):
    return storage.employees.create(
        company_id=company_id, first_name=first, last_name="Test", email=email,
        phone="5550100", join_date=date(2024, 1, 15),
        reporting_manager_id=manager_id, ctc=ctc or [],
    )


@pytest.fixture
def world(app):
    """
    Acme: admin, manager M, employee E (reports to M), peer P (reports to M),
    other manager O (nobody reports to O).
    Globex: admin and one employee.
    """
    salary = [
        {"component": "Basic", "amount": 20000, "frequency": "monthly", "type": "earning"},
        {"component": "HRA", "amount": 5000, "frequency": "monthly", "type": "payable"},
        {"component": "PF", "amount": 1500, "frequency": "monthly", "type": "deduction"},
        {"component": "Bonus", "amount": 60000, "frequency": "annual", "type": "earning"},
    ]
    with app.app_context():
        acme = storage.companies.create(name="Acme", email="hr@acme.example.com")
        globex = storage.companies.create(name="Globex", email="hr@globex.example.com")

        _user("root@hrms.example.com", "Root", "SUPER_ADMIN")
        _user("admin@acme.example.com", "Acme Admin", "COMPANY_ADMIN", acme.id)
        _user("manager@acme.example.com", "Mona", "EMPLOYEE", acme.id)
        _user("emp@acme.example.com", "Eddie", "EMPLOYEE", acme.id)
        _user("peer@acme.example.com", "Pat", "EMPLOYEE", acme.id)
        _user("other@acme.example.com", "Otto", "EMPLOYEE", acme.id)
        _user("inactive@acme.example.com", "Ina", "EMPLOYEE", acme.id, status="inactive")
        _user("admin@globex.example.com", "Globex Admin", "COMPANY_ADMIN", globex.id)
        _user("emp@globex.example.com", "Gina", "EMPLOYEE", globex.id)

        manager = _employee(acme.id, "Mona", "manager@acme.example.com")
        employee = _employee(acme.id, "Eddie", "emp@acme.example.com", manager.id, ctc=salary)
        peer = _employee(acme.id, "Pat", "peer@acme.example.com", manager.id)
        other = _employee(acme.id, "Otto", "other@acme.example.com")
        globex_employee = _employee(globex.id, "Gina", "emp@globex.example.com")

        acme_travel = storage.expense_types.create(company_id=acme.id, code="TRV", name="Travel")
        globex_travel = storage.expense_types.create(company_id=globex.id, code="TRV", name="Travel")
        db.session.commit()

        return SimpleNamespace(
            acme_id=acme.id,
            globex_id=globex.id,
            manager_id=manager.id,
            employee_id=employee.id,
            peer_id=peer.id,
            other_id=other.id,
            globex_employee_id=globex_employee.id,
            acme_travel_id=acme_travel.id,
            globex_travel_id=globex_travel.id,
        )


def login(client, email, password=PASSWORD):
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.get_json()
    return {"Authorization": "Bearer %s" % resp.get_json()["token"]}


@pytest.fixture
def auth(client, world):
    """auth("emp@acme.example.com") -> Authorization headers for that user."""
    cache = {}

    def _auth(email):
        if email not in cache:
            cache[email] = login(client, email)
        return cache[email]
    return _auth


@pytest.fixture
def make_claim(client, world, auth):
    """Create a draft claim for the Acme employee with the given item amounts."""
    def _make(amounts=(), email="emp@acme.example.com", month=10, year=2025):
        headers = auth(email)
        resp = client.post("/api/expense-claims", json={"month": month, "year": year}, headers=headers)
        assert resp.status_code == 201, resp.get_json()
        claim = resp.get_json()
        for amount in amounts:
            item = client.post(
                "/api/expense-claims/%s/items" % claim["id"],
                json={"expenseTypeId": world.acme_travel_id, "date": "2025-10-03", "amount": amount},
                headers=headers,
            )
            assert item.status_code == 201, item.get_json()
        return claim["id"]
    return _make
