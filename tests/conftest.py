import pytest
from fastapi.testclient import TestClient

from cityhall.config import Settings
from cityhall.db.session import init_db
from cityhall.main import create_app
from cityhall.models.enums import UserRole
from cityhall.models.user import User
from cityhall.utils.security import hash_password

PASSWORD = "password123"


@pytest.fixture(scope="session")
def password_hash():
    return hash_password(PASSWORD)


@pytest.fixture()
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path/'test.db'}",
        SECRET_KEY="test-secret",
        APP_ENV="test",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture()
def app(settings):
    app = create_app(settings)
    init_db(app.state.database)
    yield app
    app.state.database.dispose()


@pytest.fixture()
def db(app):
    s = app.state.database.session()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def make_user(db, password_hash):
    """Insert a user directly, skipping the per-call bcrypt cost of registration."""
    counter = {"n": 0}

    def _make(role=UserRole.SECRETARY, department=None, is_active=True, email=None, **kw):
        counter["n"] += 1
        user = User(
            email=email or f"user{counter['n']}@mairie-lyon.fr",
            password_hash=password_hash,
            first_name=kw.get("first_name", "Jean"),
            last_name=kw.get("last_name", f"Dupont{counter['n']}"),
            role=role,
            department=department,
            is_active=is_active,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make
