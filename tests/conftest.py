import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.data.database import Base, get_db, init_db, make_engine
from app.main import create_app


@pytest.fixture
def engine():
    eng = make_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def register(client):
    def _register(name="Budi", email="budi@example.com", password="rahasia"):
        resp = client.post(
            "/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert resp.status_code == 200, resp.text
        return resp.json()["id"]

    return _register


@pytest.fixture
def add_product(client):
    def _add(user_id, name="Kopi", price="25000.00", category="food", **extra):
        body = {
            "name": name,
            "price": price,
            "image_url": f"https://img.example.com/{name}.png",
            "user_id": user_id,
            "category": category,
        }
        body.update(extra)
        resp = client.post("/products", json=body)
        assert resp.status_code == 200, resp.text
        return resp.json()["id"]

    return _add
