def test_get_series(client):
    res = client.get("/series/")
    assert res.status_code == 200
    assert res.json()[0] == {"month": "Jan", "value": 1200000.0}

def test_add_update_remove_row(client):
    # Add
    res = client.post("/series/rows")
    assert res.status_code == 201
    assert res.json() == {"month": "M7", "value": 0.0}

    # Update label and value
    res = client.patch("/series/rows/6", json={"month": "Jul", "value": "2600000"})
    assert res.status_code == 200
    assert res.json() == {"month": "Jul", "value": 2600000.0}

    # Non-numeric value falls back to 0
    res = client.patch("/series/rows/6", json={"value": "lots"})
    assert res.json() == {"month": "Jul", "value": 0.0}

    # Remove
    res = client.delete("/series/rows/0")
    assert res.status_code == 200
    assert [p["month"] for p in res.json()] == ["Feb", "Mar", "Apr", "May", "Jun", "Jul"]

def test_missing_row_is_404(client):
    assert client.patch("/series/rows/99", json={"value": 1}).status_code == 404
    assert client.delete("/series/rows/99").status_code == 404

def test_replace_and_reset(client):
    res = client.put("/series/", json={"points": [{"month": "Only", "value": ""}]})
    assert res.status_code == 200
    assert res.json() == [{"month": "Only", "value": 0.0}]

    res = client.post("/series/reset")
    assert len(res.json()) == 6
