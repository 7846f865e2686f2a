def _mark(client, employee_id, day, **extra):
    payload = {"employee_id": employee_id, "work_date": day, "worked_hours": 8}
    payload.update(extra)
    return client.post("/api/attendance", json=payload)


def test_list_filters_by_month_and_employee(client, container, employee_id):
    other = container.employee_service.create(name="B", salary=850)
    _mark(client, employee_id, "2025-01-02")
    _mark(client, employee_id, "2025-02-02")
    _mark(client, other, "2025-01-03")

    january = client.get("/api/attendance?month=2025-01").get_json()
    mine = client.get(f"/api/attendance?month=2025-01&employee_id={employee_id}").get_json()
    everything = client.get("/api/attendance").get_json()

    assert [r["work_date"] for r in january] == ["2025-01-02", "2025-01-03"]
    assert [r["employee_id"] for r in mine] == [employee_id]
    assert len(everything) == 3


def test_list_rejects_malformed_month(client):
    assert client.get("/api/attendance?month=2025-1").status_code == 400


def test_update_recomputes_hours_and_parses_flags(client, employee_id):
    aid = _mark(client, employee_id, "2025-01-02", worked_hours=None, time_in="09:00", time_out="17:00").get_json()["attendance_id"]

    resp = client.put(f"/api/attendance/{aid}", json={"time_out": "19:00", "slab_mode": "on", "employee_id": 999})

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["worked_hours"] == 10
    assert body["slab_mode"] is True
    assert body["employee_id"] == employee_id


def test_update_onto_occupied_date_is_conflict(client, employee_id):
    first = _mark(client, employee_id, "2025-01-02").get_json()["attendance_id"]
    _mark(client, employee_id, "2025-01-03")

    resp = client.put(f"/api/attendance/{first}", json={"work_date": "2025-01-03"})

    assert resp.status_code == 409
    assert resp.get_json()["success"] is False


def test_update_and_delete_unknown_record(client):
    assert client.put("/api/attendance/42", json={"worked_hours": 8}).status_code == 404
    assert client.delete("/api/attendance/42").status_code == 404


def test_delete(client, employee_id):
    aid = _mark(client, employee_id, "2025-01-02").get_json()["attendance_id"]

    first = client.delete(f"/api/attendance/{aid}")
    second = client.delete(f"/api/attendance/{aid}")

    assert first.status_code == 200
    assert second.status_code == 404
