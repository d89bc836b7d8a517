"""
Cross-company isolation: a Globex session must never reach Acme data.
"""
import pytest


@pytest.fixture
def acme_claim(make_claim):
    return make_claim([40])


class TestClaimIsolation:
    @pytest.mark.parametrize("method,path,body", [
        ("get", "/api/expense-claims/{id}", None),
        ("patch", "/api/expense-claims/{id}", {"month": 1}),
        ("delete", "/api/expense-claims/{id}", None),
        ("post", "/api/expense-claims/{id}/submit", None),
        ("post", "/api/expense-claims/{id}/approve", {}),
        ("post", "/api/expense-claims/{id}/reject", {}),
        ("post", "/api/expense-claims/{id}/disburse", None),
        ("get", "/api/expense-claims/{id}/items", None),
    ])
    @pytest.mark.parametrize("email", ["admin@globex.example.com", "emp@globex.example.com"])
    def test_foreign_claim_is_forbidden(self, client, auth, acme_claim, method, path, body, email):
        call = getattr(client, method)
        kwargs = {"headers": auth(email)}
        if body is not None:
            kwargs["json"] = body

        resp = call(path.format(id=acme_claim), **kwargs)
        assert resp.status_code == 403

    def test_foreign_item_is_forbidden(self, client, world, auth, acme_claim):
        item_id = client.get(
            "/api/expense-claims/%s/items" % acme_claim, headers=auth("emp@acme.example.com")
        ).get_json()[0]["id"]
        globex = auth("admin@globex.example.com")

        assert client.patch("/api/expense-claim-items/%s" % item_id, json={"amount": 1}, headers=globex).status_code == 403
        assert client.delete("/api/expense-claim-items/%s" % item_id, headers=globex).status_code == 403
        resp = client.post(
            "/api/expense-claims/%s/items" % acme_claim,
            json={"expenseTypeId": world.globex_travel_id, "date": "2025-10-01", "amount": 5},
            headers=globex,
        )
        assert resp.status_code == 403

    def test_foreign_claims_never_listed(self, client, auth, acme_claim):
        resp = client.get("/api/expense-claims", headers=auth("admin@globex.example.com"))
        assert resp.get_json() == []

    def test_super_admin_sees_every_company(self, client, auth, acme_claim):
        resp = client.get("/api/expense-claims", headers=auth("root@hrms.example.com"))
        assert [c["id"] for c in resp.get_json()] == [acme_claim]
        assert client.get("/api/expense-claims/%s" % acme_claim, headers=auth("root@hrms.example.com")).status_code == 200


class TestOtherEntities:
    def test_employee_records(self, client, world, auth):
        globex = auth("admin@globex.example.com")
        path = "/api/employees/%s" % world.employee_id

        assert client.get(path, headers=globex).status_code == 403
        assert client.put(path, json={"firstName": "X"}, headers=globex).status_code == 403
        assert client.delete(path, headers=globex).status_code == 403
        assert all(e["companyId"] == world.globex_id
                   for e in client.get("/api/employees", headers=globex).get_json())

    def test_update_cannot_move_employee_to_other_company(self, client, world, auth):
        resp = client.put(
            "/api/employees/%s" % world.employee_id,
            json={"companyId": world.globex_id, "phone": "5550199"},
            headers=auth("admin@acme.example.com"),
        )
        assert resp.status_code == 200
        assert resp.get_json()["companyId"] == world.acme_id
        assert resp.get_json()["phone"] == "5550199"

    def test_create_employee_ignores_company_from_body(self, client, world, auth):
        resp = client.post("/api/employees", json={
            "companyId": world.globex_id,
            "firstName": "New", "lastName": "Hire", "email": "new@acme.example.com",
            "phone": "5550142", "joinDate": "2025-01-02",
        }, headers=auth("admin@acme.example.com"))

        assert resp.status_code == 201
        assert resp.get_json()["companyId"] == world.acme_id

    def test_reporting_manager_from_other_company_is_rejected(self, client, world, auth):
        resp = client.put(
            "/api/employees/%s" % world.employee_id,
            json={"reportingManagerId": world.globex_employee_id},
            headers=auth("admin@acme.example.com"),
        )
        assert resp.status_code == 400

    def test_company_scope_on_path(self, client, world, auth):
        acme = auth("admin@acme.example.com")

        assert client.get("/api/companies/%s" % world.acme_id, headers=acme).status_code == 200
        resp = client.get("/api/companies/%s" % world.globex_id, headers=acme)
        assert resp.status_code == 403
        assert resp.get_json()["error"] == "Access to this company is not allowed"
        assert client.get("/api/companies/%s/users" % world.globex_id, headers=acme).status_code == 403

    def test_attendance_for_foreign_employee(self, client, world, auth):
        globex = auth("admin@globex.example.com")
        resp = client.get("/api/attendance-records/employee/%s" % world.employee_id, headers=globex)
        assert resp.status_code == 403

        resp = client.post("/api/attendance-records", json={
            "employeeId": world.employee_id, "date": "2025-10-01", "status": "present",
        }, headers=globex)
        assert resp.status_code == 400

    def test_master_records(self, client, world, auth):
        created = client.post(
            "/api/departments", json={"name": "Finance"}, headers=auth("admin@acme.example.com")
        ).get_json()
        globex = auth("admin@globex.example.com")

        assert client.put("/api/departments/%s" % created["id"], json={"name": "X"}, headers=globex).status_code == 403
        assert client.delete("/api/departments/%s" % created["id"], headers=globex).status_code == 403
        assert client.get("/api/departments", headers=globex).get_json() == []
