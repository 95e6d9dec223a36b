"""Integration tests for dashboard routes. The test clock's today is 2024-06-15."""

from datetime import date

from fastapi.testclient import TestClient

from maintrack.adapters.sqlite.repos import SQLiteEquipmentRepo


def _add_computer(client: TestClient, headers, eid: str, name: str) -> None:
    resp = client.post(
        "/api/equipment",
        json={
            "id": eid,
            "name": name,
            "os": "Windows 10",
            "type": "Desktop CPU",
            "common_failure_points": "Fans",
        },
        headers=headers,
    )
    assert resp.status_code == 201, resp.text


def _set_next_date(db_path: str, eid: str, next_date: date) -> None:
    repo = SQLiteEquipmentRepo(db_path)
    item = repo.get_by_id(eid)
    assert item is not None
    repo.save(item.model_copy(update={"next_maintenance_date": next_date}))


def test_alerts(client: TestClient, tech_headers):
    _add_computer(client, tech_headers, "CPU001", "Accounting-PC01")
    _add_computer(client, tech_headers, "CPU002", "Design-PC01")
    _add_computer(client, tech_headers, "CPU003", "Reception-PC")
    client.put(
        "/api/equipment/CPU001", json={"next_maintenance_date": "2024-06-01"}, headers=tech_headers
    )
    client.put(
        "/api/equipment/CPU002", json={"next_maintenance_date": "2024-06-20"}, headers=tech_headers
    )
    client.put(
        "/api/equipment/CPU003", json={"next_maintenance_date": "2024-12-01"}, headers=tech_headers
    )
    ticket = client.post(
        "/api/tickets",
        json={
            "pc_id": "CPU003",
            "pc_name": "Reception-PC",
            "user_name": "Laura",
            "date": "2024-06-14",
            "assigned_engineer": "Ana",
            "maintenance_type": "corrective",
            "problem_description": "Screen flickers",
            "actions_taken": "None yet",
        },
        headers=tech_headers,
    ).json()

    resp = client.get("/api/dashboard/alerts", headers=tech_headers)
    assert resp.status_code == 200
    alerts = resp.json()

    assert [a["kind"] for a in alerts] == ["ticket", "overdue", "upcoming"]
    assert alerts[0]["message"] == "Pending corrective maintenance for Reception-PC"
    assert alerts[0]["ticket_id"] == ticket["id"]
    assert alerts[1]["asset_id"] == "CPU001"
    assert alerts[1]["message"] == "Preventive maintenance overdue for Accounting-PC01 (due 2024-06-01)"
    assert alerts[2]["asset_id"] == "CPU002"
    assert alerts[2]["due_date"] == "2024-06-20"


def test_closed_tickets_not_alerted(client: TestClient, tech_headers):
    ticket = client.post(
        "/api/tickets",
        json={
            "pc_id": "CPU003",
            "pc_name": "Reception-PC",
            "user_name": "Laura",
            "date": "2024-06-14",
            "assigned_engineer": "Ana",
            "maintenance_type": "preventive",
            "problem_description": "Yearly check",
            "actions_taken": "Done",
        },
        headers=tech_headers,
    ).json()
    client.put(f"/api/tickets/{ticket['id']}", json={"status": "closed"}, headers=tech_headers)

    assert client.get("/api/dashboard/alerts", headers=tech_headers).json() == []


def test_summary(client: TestClient, viewer_headers, tech_headers, db_path):
    _add_computer(client, tech_headers, "CPU001", "Accounting-PC01")
    _add_computer(client, tech_headers, "CPU002", "Design-PC01")
    _set_next_date(db_path, "CPU001", date(2024, 1, 1))

    resp = client.get("/api/dashboard/summary", headers=viewer_headers)
    assert resp.status_code == 200
    assert resp.json() == {
        "equipment_count": 2,
        "peripheral_count": 0,
        "open_tickets": 0,
        "overdue_assets": 1,
        "upcoming_assets": 0,
    }


def test_monthly_counts(client: TestClient, tech_headers):
    _add_computer(client, tech_headers, "CPU001", "Accounting-PC01")
    client.post(
        "/api/peripherals",
        json={"id": "PRN001", "name": "Printer", "type": "Laser", "common_failure_points": "Jams"},
        headers=tech_headers,
    )
    for day, kind in [("2024-01-15", "preventive"), ("2024-01-20", "corrective")]:
        client.post(
            "/api/equipment/CPU001/maintenance",
            json={"date": day, "technician": "Ana", "description": "Work", "kind": kind},
            headers=tech_headers,
        )
    client.post(
        "/api/peripherals/PRN001/maintenance",
        json={"date": "2024-03-02", "technician": "Ana", "description": "Rollers"},
        headers=tech_headers,
    )
    client.post(
        "/api/equipment/CPU001/maintenance",
        json={"date": "2023-12-31", "technician": "Ana", "description": "Old"},
        headers=tech_headers,
    )

    resp = client.get("/api/dashboard/monthly-counts", headers=tech_headers)
    assert resp.status_code == 200
    rows = resp.json()
    assert len(rows) == 12
    assert rows[0] == {
        "month": 1,
        "label": "Jan",
        "preventive": 1,
        "corrective": 1,
        "peripherals": 0,
    }
    assert rows[2]["peripherals"] == 1
    assert rows[2]["preventive"] == 0

    rows_2023 = client.get("/api/dashboard/monthly-counts?year=2023", headers=tech_headers).json()
    assert rows_2023[11]["preventive"] == 1


def test_dashboard_requires_auth(client: TestClient):
    assert client.get("/api/dashboard/summary").status_code == 401
