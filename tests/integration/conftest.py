from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_pagination_config
from app.db.base import Base
from app.db.models.role import Role
from app.db.models.user import User
from app.db.seed import seed_defaults
from app.db.session import get_db
from app.main import app
from app.utils.pagination import PaginationConfig


@pytest.fixture(scope="function")
def engine():
    eng = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    try:
        yield eng
    finally:
        Base.metadata.drop_all(eng)
        eng.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
    db = TestingSessionLocal()
    seed_defaults(db)
    try:
        yield db
    finally:
        db.rollback()
        db.close()


@pytest.fixture(scope="function")
def client(db_session) -> Generator[TestClient, None, None]:
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_pagination_config] = lambda: PaginationConfig()
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def set_pagination(client) -> Callable[..., None]:
    def _set(*, skip: bool, default_limit: int, max_limit: int) -> None:
        cfg = PaginationConfig(skip_pagination_enabled=skip, default_limit=default_limit, max_limit=max_limit)
        app.dependency_overrides[get_pagination_config] = lambda: cfg

    return _set


@pytest.fixture
def make_user(db_session) -> Callable[..., User]:
    counter = {"n": 0}

    def _make(email: str | None = None) -> User:
        counter["n"] += 1
        user = User(first_name="Test", last_name=f"User{counter['n']}", email=email or f"user{counter['n']}@example.com")
        db_session.add(user)
        db_session.commit()
        return user

    return _make


@pytest.fixture
def make_role(db_session) -> Callable[[str], Role]:
    def _make(name: str) -> Role:
        role = Role(name=name, guard_name="api")
        db_session.add(role)
        db_session.commit()
        return role

    return _make
