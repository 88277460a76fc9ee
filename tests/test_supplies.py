from models.supply import Supply
from scripts.seed_supplies import SUPPLIES, seed_supplies


def test_supplies_empty_by_default(client):
    assert client.get("/api/supplies").json() == []


def test_supplies_lists_catalogue(client, db_session):
    db_session.add(Supply(name="Dầu neem", category="pesticide", price=65000, usage_guide="5ml/1L"))
    db_session.commit()

    [supply] = client.get("/api/supplies").json()
    assert supply["name"] == "Dầu neem"
    assert supply["price"] == 65000
    assert supply["usage_guide"] == "5ml/1L"
    assert supply["store_url"] is None


def test_seed_supplies_is_idempotent(client, db_session):
    assert seed_supplies(db_session) == len(SUPPLIES)
    assert seed_supplies(db_session) == 0

    assert len(client.get("/api/supplies").json()) == len(SUPPLIES)
