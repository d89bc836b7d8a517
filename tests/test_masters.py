"""
Tests for companies, users and the company master tables.
"""
import pytest


class TestCompanies:
    def test_super_admin_onboards_company_with_admin(self, client, world, auth):
        root = auth("root@hrms.example.com")
        resp = client.post("/api/companies", json={
            "name": "Umbrella", "email": "hr@umbrella.example.com", "plan": "premium", "maxEmployees": 10,
            "admin": {"name": "Alice", "email": "alice@umbrella.example.com", "password": "welcome1"},
        }, headers=root)

        assert resp.status_code == 201
        company = resp.get_json()
        assert company["maxEmployees"] == 10

        login = client.post("/api/auth/login", json={"email": "alice@umbrella.example.com", "password": "welcome1"})
        assert login.status_code == 200
        assert login.get_json()["user"]["role"] == "COMPANY_ADMIN"
        assert login.get_json()["user"]["companyId"] == company["id"]

    def test_duplicate_company_email(self, client, world, auth):
        resp = client.post("/api/companies", json={"name": "Acme 2", "email": "hr@acme.example.com"},
                           headers=auth("root@hrms.example.com"))

        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Company email already exists"

    def test_company_admin_cannot_list_companies(self, client, world, auth):
        resp = client.get("/api/companies", headers=auth("admin@acme.example.com"))

        assert resp.status_code == 403
        assert resp.get_json()["error"] == "Super admin access required"

    def test_patch_only_touches_status_plan_limit(self, client, world, auth):
        resp = client.patch("/api/companies/%s" % world.acme_id, json={
            "status": "suspended", "name": "Renamed", "email": "x@y.example.com",
        }, headers=auth("root@hrms.example.com"))

        body = resp.get_json()
        assert body["status"] == "suspended"
        assert body["name"] == "Acme"
        assert body["email"] == "hr@acme.example.com"

    def test_patch_unknown_company_is_404(self, client, world, auth):
        resp = client.patch("/api/companies/missing", json={"plan": "basic"}, headers=auth("root@hrms.example.com"))
        assert resp.status_code == 404


class TestUsers:
    def test_company_admin_creates_employee_user_in_own_company(self, client, world, auth):
        resp = client.post("/api/users", json={
            "email": "new@acme.example.com", "password": "welcome1", "name": "New",
            "role": "EMPLOYEE", "companyId": world.globex_id,
        }, headers=auth("admin@acme.example.com"))

        assert resp.status_code == 201
        assert resp.get_json()["companyId"] == world.acme_id
        assert resp.get_json()["role"] == "EMPLOYEE"
        assert "password" not in resp.get_json()

    def test_company_admin_cannot_create_admins(self, client, world, auth):
        resp = client.post("/api/users", json={
            "email": "boss@acme.example.com", "password": "welcome1", "name": "Boss", "role": "COMPANY_ADMIN",
        }, headers=auth("admin@acme.example.com"))

        assert resp.status_code == 403
        assert resp.get_json()["error"] == "Only super admins can create admin users"

    def test_duplicate_email(self, client, world, auth):
        resp = client.post("/api/users", json={
            "email": "emp@acme.example.com", "password": "welcome1", "name": "Dup",
        }, headers=auth("admin@acme.example.com"))

        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Email already exists"

    def test_list_company_users(self, client, world, auth):
        users = client.get("/api/companies/%s/users" % world.acme_id, headers=auth("admin@acme.example.com")).get_json()

        assert {u["email"] for u in users} >= {"admin@acme.example.com", "emp@acme.example.com"}
        assert all("password" not in u for u in users)

    def test_employee_cannot_list_company_users(self, client, world, auth):
        resp = client.get("/api/companies/%s/users" % world.acme_id, headers=auth("emp@acme.example.com"))
        assert resp.status_code == 403


class TestMasters:
    @pytest.mark.parametrize("path,payload,changes", [
        ("/api/departments", {"name": "Ops"}, {"description": "Operations"}),
        ("/api/designations", {"name": "Engineer"}, {"name": "Senior Engineer"}),
        ("/api/roles-levels", {"role": "Engineer", "level": "L2"}, {"level": "L3"}),
        ("/api/ctc-components", {"name": "Basic", "type": "payable"}, {"isStandard": True}),
        ("/api/shifts", {"name": "Day", "startTime": "09:00", "endTime": "18:00"}, {"endTime": "17:30"}),
        ("/api/holidays", {"name": "New Year", "date": "2026-01-01"}, {"description": "Office closed"}),
        ("/api/leave-types", {"code": "CL", "name": "Casual", "maxDays": 12}, {"carryForward": True}),
        ("/api/expense-types", {
            "code": "FOOD", "name": "Meals",
            "roleLevelLimits": [{"roleLevelId": "rl-1", "limitAmount": 500, "limitUnit": "per_day"}],
        }, {"billMandatory": True}),
    ])
    def test_crud(self, client, world, auth, path, payload, changes):
        admin = auth("admin@acme.example.com")

        resp = client.post(path, json=payload, headers=admin)
        assert resp.status_code == 201, resp.get_json()
        record = resp.get_json()
        assert record["companyId"] == world.acme_id

        resp = client.put("%s/%s" % (path, record["id"]), json=changes, headers=admin)
        assert resp.status_code == 200
        for key, value in changes.items():
            assert resp.get_json()[key] == value

        assert record["id"] in [r["id"] for r in client.get(path, headers=admin).get_json()]

        assert client.delete("%s/%s" % (path, record["id"]), headers=admin).get_json() == {"success": True}
        assert client.put("%s/%s" % (path, record["id"]), json=changes, headers=admin).status_code == 404

    def test_expense_type_limits_keep_camel_case(self, client, world, auth):
        resp = client.post("/api/expense-types", json={
            "code": "CAB", "name": "Cab",
            "roleLevelLimits": [{"roleLevelId": "rl-9", "limitAmount": 12, "limitUnit": "per_km"}],
        }, headers=auth("admin@acme.example.com"))

        limit = resp.get_json()["roleLevelLimits"][0]
        assert limit["roleLevelId"] == "rl-9"
        assert limit["limitUnit"] == "per_km"

    def test_employee_reads_but_cannot_write(self, client, world, auth):
        emp = auth("emp@acme.example.com")

        assert client.get("/api/departments", headers=emp).status_code == 200
        resp = client.post("/api/departments", json={"name": "Shadow IT"}, headers=emp)
        assert resp.status_code == 403
        assert resp.get_json()["error"] == "Admin access required"

    def test_ctc_components_read_is_admin_only(self, client, world, auth):
        assert client.get("/api/ctc-components", headers=auth("emp@acme.example.com")).status_code == 403
        assert client.get("/api/ctc-components", headers=auth("admin@acme.example.com")).status_code == 200

    def test_super_admin_must_name_company(self, client, world, auth):
        root = auth("root@hrms.example.com")

        assert client.post("/api/departments", json={"name": "Legal"}, headers=root).status_code == 400
        resp = client.post("/api/departments", json={"name": "Legal", "companyId": world.globex_id}, headers=root)
        assert resp.status_code == 201
        assert resp.get_json()["companyId"] == world.globex_id

    def test_super_admin_lists_every_company(self, client, world, auth):
        client.post("/api/departments", json={"name": "A"}, headers=auth("admin@acme.example.com"))
        client.post("/api/departments", json={"name": "G"}, headers=auth("admin@globex.example.com"))

        names = {d["name"] for d in client.get("/api/departments", headers=auth("root@hrms.example.com")).get_json()}
        assert names == {"A", "G"}

    def test_put_cannot_move_company(self, client, world, auth):
        admin = auth("admin@acme.example.com")
        record = client.post("/api/holidays", json={"name": "Diwali", "date": "2025-10-20"}, headers=admin).get_json()

        resp = client.put("/api/holidays/%s" % record["id"], json={"companyId": world.globex_id}, headers=admin)
        assert resp.get_json()["companyId"] == world.acme_id

    def test_invalid_shift_time(self, client, world, auth):
        resp = client.post("/api/shifts", json={"name": "Bad", "startTime": "25:00", "endTime": "18:00"},
                           headers=auth("admin@acme.example.com"))
        assert resp.status_code == 400


class TestHealth:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.get_json()["status"] == "up"
