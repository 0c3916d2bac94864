"""API tests for /api/assignments."""


def test_assign(client):
    res = client.post("/api/assignments", json={"tool_id": "T1", "employee_id": "E1"})
    assert res.status_code == 200
    data = res.json()
    assert data["ok"] is True
    assert data["tool"]["assigned_to"] == "E1"
    assert data["tool"]["assigned_on"] == "2025-06-01"


def test_assign_with_date(client):
    res = client.post("/api/assignments", json={"tool_id": "T1", "employee_id": "E1", "assigned_on": "2025-05-02"})
    assert res.json()["tool"]["assigned_on"] == "2025-05-02"


def test_assign_twice_conflict(client):
    client.post("/api/assignments", json={"tool_id": "T1", "employee_id": "E1"})
    res = client.post("/api/assignments", json={"tool_id": "T1", "employee_id": "E1"})
    assert res.status_code == 409
    data = res.json()
    assert data["ok"] is False
    assert data["code"] == "already_assigned_same"
    assert "already assigned to employee E1" in data["error"]


def test_assign_overdue(client):
    res = client.post("/api/assignments", json={"tool_id": "T2", "employee_id": "E1"})
    assert res.status_code == 409
    assert "overdue" in res.json()["error"]


def test_assign_unknown_tool(client):
    res = client.post("/api/assignments", json={"tool_id": "T99", "employee_id": "E1"})
    assert res.status_code == 404
    assert res.json()["code"] == "tool_not_found"


def test_assign_malformed_ids(client):
    res = client.post("/api/assignments", json={"tool_id": "X1", "employee_id": "E1"})
    assert res.status_code == 422


def test_reassign(client):
    res = client.post("/api/assignments/reassign", json={"tool_id": "T3", "employee_id": "E3"})
    assert res.status_code == 200
    assert res.json()["tool"]["assigned_to"] == "E3"


def test_reassign_never_assigned(client):
    res = client.post("/api/assignments/reassign", json={"tool_id": "T1", "employee_id": "E3"})
    assert res.status_code == 409
    assert res.json()["code"] == "not_assigned"


def test_unassign(client):
    res = client.post("/api/assignments/unassign", json={"tool_id": "T3"})
    assert res.status_code == 200
    assert res.json()["tool"]["assigned_to"] is None
    res = client.post("/api/assignments/unassign", json={"tool_id": "T3"})
    assert res.status_code == 409
    assert "not currently assigned" in res.json()["error"]


def test_save_assignment(client):
    res = client.put("/api/assignments/T1", json={"employee_id": "E2"})
    assert res.status_code == 200
    assert res.json()["tool"]["assigned_to"] == "E2"

    res = client.put("/api/assignments/T1", json={"employee_id": None})
    assert res.status_code == 200
    assert res.json()["tool"]["assigned_to"] is None

    assert client.get("/api/tools/T1").json()["assigned_on"] is None


def test_save_assignment_unknown_tool(client):
    res = client.put("/api/assignments/T99", json={"employee_id": "E1"})
    assert res.status_code == 404


def test_assignment_visible_in_listing(client):
    client.post("/api/assignments", json={"tool_id": "T1", "employee_id": "E1"})
    res = client.get("/api/tools", params={"filter": "assigned", "search": "alice"})
    assert [t["id"] for t in res.json()["data"]] == ["T1"]
