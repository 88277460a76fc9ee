import os
import tempfile

# db.database が import 時にエンジンを作るので、その前にテスト用DBへ向ける
_TMP_DIR = tempfile.mkdtemp(prefix="nongtritue-test-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_TMP_DIR, "test.db")

import pytest
from fastapi.testclient import TestClient

from db.database import Base, engine, SessionLocal
from main import app


@pytest.fixture()
def client():
    # テストごとに空のDBから始める（startup で create_all される）
    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def db_session(client):
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
