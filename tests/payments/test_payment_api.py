def _pay(client, employee_id, month="2025-01", **extra):
    payload = {"employee_id": employee_id, "salary_month": month, "amount": 1000, "date": "2025-02-01"}
    payload.update(extra)
    return client.post("/api/payments", json=payload)


def test_create_and_filter_by_salary_month(client, employee_id):
    created = _pay(client, employee_id, proof="slip.jpg")
    _pay(client, employee_id, month="2025-02")

    rows = client.get("/api/payments?salary_month=2025-01").get_json()

    assert created.status_code == 201
    assert created.get_json()["date"] == "2025-02-01"
    assert [(r["salary_month"], r["proof"]) for r in rows] == [("2025-01", "slip.jpg")]


def test_list_rejects_malformed_month(client):
    assert client.get("/api/payments?salary_month=2025-13").status_code == 400


def test_create_for_unknown_employee(client):
    resp = _pay(client, 404)

    assert resp.status_code == 400


def test_update_and_delete(client, employee_id):
    pid = _pay(client, employee_id).get_json()["payment_id"]

    updated = client.put(f"/api/payments/{pid}", json={"salary_month": "2025-02", "payment_id": 9})
    deleted = client.delete(f"/api/payments/{pid}")

    assert updated.status_code == 200
    assert updated.get_json()["salary_month"] == "2025-02"
    assert updated.get_json()["payment_id"] == pid
    assert deleted.status_code == 200
    assert client.put(f"/api/payments/{pid}", json={"amount": 10}).status_code == 404
    assert client.delete(f"/api/payments/{pid}").status_code == 404
