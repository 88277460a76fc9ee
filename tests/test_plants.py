BASIL = {
    "name": "Basil",
    "species": "Ocimum basilicum",
    "age": "2 months",
    "planting_date": "2026-08-01",
    "location": "balcony",
    "health_status": "good",
    "image_url": "data:image/png;base64,iVBORw0KGgo=",
    "category": "indoor",
}


def test_create_plant_returns_id(client):
    r = client.post("/api/plants", json={"name": "Basil", "species": "Ocimum basilicum", "category": "indoor"})
    assert r.status_code == 200
    assert r.json() == {"id": 1}

    plants = client.get("/api/plants").json()
    assert len(plants) == 1
    assert plants[0]["id"] == 1
    assert plants[0]["name"] == "Basil"
    assert plants[0]["age"] is None


def test_plant_round_trip(client):
    plant_id = client.post("/api/plants", json=BASIL).json()["id"]

    [plant] = client.get("/api/plants").json()
    for key, value in BASIL.items():
        assert plant[key] == value
    assert plant["id"] == plant_id
    assert plant["created_at"] is not None
    assert plant["last_care"] is None


def test_plants_newest_first(client):
    first = client.post("/api/plants", json={"name": "Mango"}).json()["id"]
    second = client.post("/api/plants", json={"name": "Orchid"}).json()["id"]

    ids = [p["id"] for p in client.get("/api/plants").json()]
    assert ids == [second, first]


def test_growth_logs_oldest_first(client):
    plant_id = client.post("/api/plants", json={"name": "Tomato"}).json()["id"]

    client.post(f"/api/plants/{plant_id}/growth", json={"height": 10.5, "leaf_count": 4, "health_score": 7, "note": "week 1"})
    client.post(f"/api/plants/{plant_id}/growth", json={"height": 14.0, "leaf_count": 9, "health_score": 8, "note": "week 2"})

    logs = client.get(f"/api/plants/{plant_id}/growth").json()
    assert [log["note"] for log in logs] == ["week 1", "week 2"]
    assert logs[0]["height"] == 10.5
    assert logs[0]["leaf_count"] == 4
    assert logs[0]["plant_id"] == plant_id
    assert logs[0]["created_at"] is not None


def test_growth_logs_are_per_plant(client):
    a = client.post("/api/plants", json={"name": "A"}).json()["id"]
    b = client.post("/api/plants", json={"name": "B"}).json()["id"]
    client.post(f"/api/plants/{a}/growth", json={"height": 1})

    assert len(client.get(f"/api/plants/{a}/growth").json()) == 1
    assert client.get(f"/api/plants/{b}/growth").json() == []


def test_numeric_values_for_text_columns_are_stored_as_text(client):
    client.post("/api/plants", json={"name": "Basil", "age": 3, "location": 12.5})

    [plant] = client.get("/api/plants").json()
    assert plant["age"] == "3"
    assert plant["location"] == "12.5"


def test_unusable_number_is_generic_failure(client):
    plant_id = client.post("/api/plants", json={"name": "Tomato"}).json()["id"]

    r = client.post(f"/api/plants/{plant_id}/growth", json={"height": "tall"})
    assert r.status_code == 500
    assert r.text == "Internal Server Error"
    assert client.get(f"/api/plants/{plant_id}/growth").json() == []


def test_delete_plant_only_removes_diary(client):
    plant_id = client.post("/api/plants", json={"name": "Lemon"}).json()["id"]
    client.post(f"/api/plants/{plant_id}/growth", json={"height": 3})
    client.post("/api/diary", json={"plant_id": plant_id, "content": "new leaf", "type": "growth"})
    client.post("/api/expenses", json={"plant_id": plant_id, "type": "water", "amount": 5000})
    client.post("/api/reminders", json={"plant_id": plant_id, "title": "Water", "time": "2026-10-20T07:00"})

    r = client.delete(f"/api/plants/{plant_id}")
    assert r.json() == {"success": True}

    assert client.get("/api/plants").json() == []
    assert client.get(f"/api/diary/{plant_id}").json() == []
    # 成長記録・支出・リマインダーは残る
    assert len(client.get(f"/api/plants/{plant_id}/growth").json()) == 1
    assert [e["plant_id"] for e in client.get("/api/expenses").json()] == [plant_id]
    assert [r["plant_id"] for r in client.get("/api/reminders").json()] == [plant_id]


def test_delete_missing_plant_still_succeeds(client):
    assert client.delete("/api/plants/999").json() == {"success": True}
