def test_get_defaults_then_update(client):
    defaults = client.get("/api/settings").get_json()

    resp = client.post("/api/settings", json={"standard_hours": 9})

    assert defaults == {"standard_hours": 8.5, "slab_hours": 6.0}
    assert resp.status_code == 200
    assert client.get("/api/settings").get_json() == {"standard_hours": 9, "slab_hours": 6.0}


def test_update_rejects_zero_hours(client):
    resp = client.post("/api/settings", json={"slab_hours": 0})

    assert resp.status_code == 400
    assert client.get("/api/settings").get_json()["slab_hours"] == 6.0
