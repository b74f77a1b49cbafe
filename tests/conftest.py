import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mktrading.core.database import Store, get_db, init_db
from mktrading.main import app
from mktrading.services.user_service import UserService


def _memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def _override_get_db(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def engine():
    engine = _memory_engine()
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def blank_engine():
    """In-memory database with no tables"""
    engine = _memory_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def store(session_factory):
    db = session_factory()
    yield Store(db)
    db.close()


@pytest.fixture
def client(session_factory):
    _override_get_db(session_factory)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_engine(monkeypatch):
    """Point the module-level engine, startup sessions and request sessions at a test engine"""
    def point_at(engine):
        factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        monkeypatch.setattr("mktrading.core.database.engine", engine)
        monkeypatch.setattr("mktrading.main.SessionLocal", factory)
        monkeypatch.setattr("mktrading.manage.SessionLocal", factory)
        _override_get_db(factory)
        return factory

    yield point_at
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client, store):
    UserService(store).create("admin", "secret")
    response = client.post("/api/login", json={"username": "admin", "password": "secret"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
