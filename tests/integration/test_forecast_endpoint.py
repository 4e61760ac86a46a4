def test_root(client):
    res = client.get("/")
    assert res.status_code == 200

def test_forecast_for_default_session(client):
    res = client.get("/forecast/")
    assert res.status_code == 200
    data = res.json()

    points = data["points"]
    assert len(points) == 10
    assert points[0] == {"month": "Jan", "actual": 1200000.0, "predicted": 1223810}
    assert points[-1] == {"month": "Future 4", "predicted": 3178095}
    assert all("actual" not in p for p in points[6:])
    assert data["fit"]["slope"] > 0

def test_forecast_after_series_edits(client):
    client.put("/series/", json={"points": [{"month": "Q1", "value": 10}, {"month": "Q2", "value": 20}]})

    data = client.get("/forecast/").json()
    assert [p["predicted"] for p in data["points"]] == [10, 20, 30, 40, 50, 60]

    client.delete("/series/rows/1")
    data = client.get("/forecast/").json()
    assert data["points"] == [{"month": "Q1", "actual": 10.0}]
    assert "fit" not in data

def test_forecast_empty_series(client):
    client.put("/series/", json={"points": []})
    data = client.get("/forecast/").json()
    assert data == {"points": []}

def test_stateless_forecast(client):
    res = client.post("/forecast/", json={"points": [
        {"month": "a", "value": 5}, {"month": "b", "value": 5}, {"month": "c", "value": 5},
    ]})
    assert res.status_code == 200
    points = res.json()["points"]
    assert len(points) == 7
    assert all(p["predicted"] == 5 for p in points)

def test_stateless_forecast_does_not_touch_session(client):
    client.post("/forecast/", json={"points": [{"month": "x", "value": 1}]})
    assert len(client.get("/series/").json()) == 6

def test_out_of_range_values_are_rejected_and_chart_still_renders(client):
    huge = [{"month": m, "value": 1.7e308} for m in "abc"]

    assert client.post("/forecast/", json={"points": huge}).status_code == 422
    assert client.put("/series/", json={"points": huge}).status_code == 422
    assert client.patch("/series/rows/0", json={"value": -1e308}).status_code == 422

    data = client.get("/forecast/").json()
    assert len(data["points"]) == 10
    assert data["points"][0] == {"month": "Jan", "actual": 1200000.0, "predicted": 1223810}

def test_forecast_at_value_bound(client):
    flat = [{"month": m, "value": 1e15} for m in "abc"]
    res = client.post("/forecast/", json={"points": flat})
    assert res.status_code == 200
    assert all(p["predicted"] == 10 ** 15 for p in res.json()["points"])
