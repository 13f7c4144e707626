"""
Shared fixtures. DATABASE_URL is pointed at in-memory SQLite before the app is imported,
so the app's engine never touches a file database during tests.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PASSWORD_SCHEME"] = "bcrypt"
os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from quizbank.database import Base, engine, init_db, make_engine
from quizbank.main import app


@pytest.fixture
def db():
    """Session on a private in-memory database (not shared with the app)."""
    eng = make_engine("sqlite://")
    init_db(bind=eng)
    session = sessionmaker(autocommit=False, autoflush=False, bind=eng)()
    try:
        yield session
    finally:
        session.close()
        eng.dispose()


@pytest.fixture
def client():
    """TestClient with startup (table creation) and shutdown run; tables dropped afterwards."""
    with TestClient(app) as c:
        yield c
    Base.metadata.drop_all(bind=engine)
