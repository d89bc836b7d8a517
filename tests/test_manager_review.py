"""
Tests for reporting-manager review and the manager/employee claim views.
"""


def _submitted(client, auth, make_claim, amounts=(100,), email="emp@acme.example.com"):
    claim_id = make_claim(amounts, email=email)
    resp = client.post("/api/expense-claims/%s/submit" % claim_id, headers=auth(email))
    assert resp.status_code == 200
    return claim_id


class TestReview:
    def test_other_manager_cannot_approve(self, client, world, auth, make_claim):
        claim_id = _submitted(client, auth, make_claim)
        resp = client.post("/api/expense-claims/%s/approve" % claim_id, headers=auth("other@acme.example.com"))

        assert resp.status_code == 403
        assert resp.get_json()["error"] == "Only the reporting manager can approve this claim"

    def test_peer_cannot_reject(self, client, world, auth, make_claim):
        claim_id = _submitted(client, auth, make_claim)
        resp = client.post("/api/expense-claims/%s/reject" % claim_id, headers=auth("peer@acme.example.com"))

        assert resp.status_code == 403
        assert resp.get_json()["error"] == "Only the reporting manager can reject this claim"

    def test_owner_cannot_approve_own_claim(self, client, world, auth, make_claim):
        claim_id = _submitted(client, auth, make_claim)
        resp = client.post("/api/expense-claims/%s/approve" % claim_id, headers=auth("emp@acme.example.com"))
        assert resp.status_code == 403

    def test_company_admin_without_employee_record_cannot_approve(self, client, world, auth, make_claim):
        claim_id = _submitted(client, auth, make_claim)
        resp = client.post("/api/expense-claims/%s/approve" % claim_id, headers=auth("admin@acme.example.com"))

        assert resp.status_code == 403
        assert resp.get_json()["error"] == "User has no associated employee record"

    def test_reject_uses_default_remark(self, client, world, auth, make_claim):
        claim_id = _submitted(client, auth, make_claim)
        resp = client.post("/api/expense-claims/%s/reject" % claim_id, headers=auth("manager@acme.example.com"))

        body = resp.get_json()
        assert resp.status_code == 200
        assert body["status"] == "rejected"
        assert body["managerRemarks"] == "Rejected by manager"
        assert body["managerReviewedBy"] == world.manager_id

    def test_rejected_claim_cannot_be_approved(self, client, world, auth, make_claim):
        mgr = auth("manager@acme.example.com")
        claim_id = _submitted(client, auth, make_claim)
        client.post("/api/expense-claims/%s/reject" % claim_id, json={"remarks": "no receipt"}, headers=mgr)

        resp = client.post("/api/expense-claims/%s/approve" % claim_id, headers=mgr)
        assert resp.status_code == 400


class TestViews:
    def test_manager_view_lists_team_pending_claims(self, client, world, auth, make_claim):
        pending = _submitted(client, auth, make_claim)
        make_claim([5])  # draft, not in the queue
        peer_pending = _submitted(client, auth, make_claim, email="peer@acme.example.com")

        resp = client.get("/api/expense-claims?view=manager", headers=auth("manager@acme.example.com"))

        ids = {c["id"] for c in resp.get_json()}
        assert resp.status_code == 200
        assert ids == {pending, peer_pending}

    def test_manager_view_with_status_filter(self, client, world, auth, make_claim):
        draft = make_claim([5])
        _submitted(client, auth, make_claim)

        resp = client.get("/api/expense-claims?view=manager&status=draft", headers=auth("manager@acme.example.com"))
        assert [c["id"] for c in resp.get_json()] == [draft]

    def test_manager_view_is_empty_for_manager_without_reports(self, client, world, auth, make_claim):
        _submitted(client, auth, make_claim)
        resp = client.get("/api/expense-claims?view=manager", headers=auth("other@acme.example.com"))
        assert resp.get_json() == []

    def test_manager_can_read_report_claim(self, client, world, auth, make_claim):
        claim_id = make_claim([5])
        assert client.get("/api/expense-claims/%s" % claim_id, headers=auth("manager@acme.example.com")).status_code == 200
        assert client.get("/api/expense-claims/%s" % claim_id, headers=auth("other@acme.example.com")).status_code == 403

    def test_employee_sees_only_own_claims(self, client, world, auth, make_claim):
        mine = make_claim([5])
        make_claim([5], email="peer@acme.example.com")

        resp = client.get("/api/expense-claims", headers=auth("emp@acme.example.com"))
        assert [c["id"] for c in resp.get_json()] == [mine]

    def test_employee_cannot_list_other_employee_claims(self, client, world, auth):
        resp = client.get(
            "/api/expense-claims?employeeId=%s" % world.peer_id, headers=auth("emp@acme.example.com")
        )
        assert resp.status_code == 403
        assert resp.get_json()["error"] == "Not authorized to view other employees' claims"

    def test_admin_sees_company_claims(self, client, world, auth, make_claim):
        make_claim([5])
        make_claim([5], email="peer@acme.example.com")

        resp = client.get("/api/expense-claims", headers=auth("admin@acme.example.com"))
        assert len(resp.get_json()) == 2
