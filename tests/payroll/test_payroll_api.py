from __future__ import annotations


def test_payroll_requires_month(client):
    resp = client.get("/api/payroll")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_payroll_rejects_malformed_month(client):
    resp = client.get("/api/payroll?month=2025-13")

    assert resp.status_code == 400


def test_payroll_end_to_end_over_http(client):
    resp = client.post("/api/settings", json={"standard_hours": 9, "slab_hours": 6})
    assert resp.status_code == 200

    resp = client.post("/api/employees", json={"name": "Ravi", "salary": 900})
    assert resp.status_code == 201
    emp = resp.get_json()["employee_id"]

    for day in range(1, 21):
        resp = client.post("/api/attendance", json={"employee_id": emp, "work_date": f"2025-01-{day:02d}", "time_in": "09:00", "time_out": "18:00"})
        assert resp.status_code == 201

    resp = client.post("/api/advances", json={"employee_id": emp, "amount": 2000, "date": "2025-01-15"})
    assert resp.status_code == 201

    resp = client.get("/api/payroll?month=2025-01")
    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body) == 1
    assert body[0]["salary_earned"] == 18000
    assert body[0]["final_payable"] == 16000
    assert body[0]["status"] == "Unpaid"


def test_duplicate_attendance_is_conflict(client):
    emp = client.post("/api/employees", json={"name": "A", "salary": 800}).get_json()["employee_id"]

    first = client.post("/api/attendance", json={"employee_id": emp, "work_date": "2025-01-02", "worked_hours": 8})
    second = client.post("/api/attendance", json={"employee_id": emp, "work_date": "2025-01-02", "worked_hours": 8})

    assert first.status_code == 201
    assert second.status_code == 409


def test_payslip_endpoint(client):
    emp = client.post("/api/employees", json={"name": "A", "salary": 800}).get_json()["employee_id"]
    client.post("/api/attendance", json={"employee_id": emp, "work_date": "2025-01-05", "worked_hours": 8, "sunday_mode": True})

    resp = client.get(f"/api/payroll/{emp}/payslip?month=2025-01")
    missing = client.get("/api/payroll/999/payslip?month=2025-01")

    assert resp.status_code == 200
    assert resp.get_json()["days"][0]["mode"] == "Sunday"
    assert resp.get_json()["statement"]["final_payable"] == 800
    assert missing.status_code == 404


def test_payslip_requires_month(client):
    emp = client.post("/api/employees", json={"name": "A", "salary": 800}).get_json()["employee_id"]

    resp = client.get(f"/api/payroll/{emp}/payslip")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
