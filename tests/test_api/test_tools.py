"""API tests for /api/tools."""


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_list_tools(client):
    res = client.get("/api/tools", params={"page": 1, "page_size": 1, "sort_by": "type"})
    assert res.status_code == 200
    data = res.json()
    assert len(data["data"]) == 1
    assert data["data"][0]["id"] == "T1"
    assert data["pagination"] == {
        "current": 1,
        "page_size": 1,
        "total": 3,
        "total_pages": 3,
        "has_next": True,
        "has_previous": False,
    }


def test_list_tools_filter_and_search(client):
    res = client.get("/api/tools", params={"filter": "assigned", "search": "bob"})
    assert res.status_code == 200
    assert [t["id"] for t in res.json()["data"]] == ["T3"]


def test_list_tools_desc(client):
    res = client.get("/api/tools", params={"sort_by": "calibration_due_date", "sort_order": "desc"})
    assert [t["id"] for t in res.json()["data"]] == ["T1", "T3", "T2"]


def test_list_tools_invalid_page(client):
    res = client.get("/api/tools", params={"page": 0})
    assert res.status_code == 422
    assert "Page number" in res.json()["detail"]


def test_list_tools_invalid_page_size(client):
    res = client.get("/api/tools", params={"page_size": 1001})
    assert res.status_code == 422


def test_list_tools_invalid_filter(client):
    res = client.get("/api/tools", params={"filter": "broken"})
    assert res.status_code == 422


def test_list_tools_unknown_sort_field(client):
    res = client.get("/api/tools", params={"sort_by": "colour"})
    assert res.status_code == 422


def test_all_tools(client):
    res = client.get("/api/tools/all", params={"filter": "available"})
    assert res.status_code == 200
    assert [t["id"] for t in res.json()] == ["T1", "T2"]


def test_search_tools(client):
    assert client.get("/api/tools/search", params={"q": ""}).json() == []
    res = client.get("/api/tools/search", params={"q": "pneumatic"})
    assert [t["id"] for t in res.json()] == ["T2"]


def test_get_tool(client):
    res = client.get("/api/tools/T3")
    assert res.status_code == 200
    data = res.json()
    assert data["assigned_to"] == "E2"
    assert data["assigned_on"] == "2025-01-10"
    assert data["calibration_due_date"] == "2030-06-30"


def test_get_tool_not_found(client):
    res = client.get("/api/tools/T999")
    assert res.status_code == 404


def test_tool_calibration(client):
    res = client.get("/api/tools/T2/calibration")
    assert res.status_code == 200
    assert res.json()["label"] == "overdue"
    assert client.get("/api/tools/T999/calibration").status_code == 404
