# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from devoverflow.core.security import create_access_token, hash_password
from devoverflow.core.settings import Settings
from devoverflow.db.session import Base, enable_sqlite_foreign_keys
from devoverflow.db.session import get_db as app_get_session
from devoverflow.main import app as fastapi_app
from devoverflow.models import Answer, Question, User
from devoverflow.services import answers as answer_service
from devoverflow.services import questions as question_service

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "correct-horse-battery"

_EMAIL_COUNTER = count(1)
_TEST_SETTINGS_INSTANCE = Settings()
# Hash once; bcrypt is deliberately slow.
_TEST_PASSWORD_HASH = hash_password(TEST_PASSWORD)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    # Let SQLAlchemy own BEGIN so SAVEPOINTs nest inside the per-test transaction.
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection: Any, _record: Any) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        join_transaction_mode="create_savepoint",
    )
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Provide a Settings instance aligned with runtime configuration."""
    return _TEST_SETTINGS_INSTANCE


def make_user(db: Session, name: str, **fields: Any) -> User:
    """Persist a user with the shared test password."""
    user = User(
        name=name,
        email=fields.pop("email", f"user{next(_EMAIL_COUNTER)}@example.com"),
        password_hash=_TEST_PASSWORD_HASH,
        **fields,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_question(
    db: Session,
    author: User,
    title: str = "How do I reverse a list in Python?",
    tags: list[str] | None = None,
    **fields: Any,
) -> Question:
    """Create a question through the service so interactions are logged."""
    question = question_service.create_question(
        db,
        author,
        title=title,
        content="I have a list of integers and need it in reverse order.",
        tags=tags if tags is not None else ["python"],
    )
    if fields:
        for key, value in fields.items():
            setattr(question, key, value)
        db.commit()
        db.refresh(question)
    return question


def auth_headers(user: User) -> dict[str, str]:
    token = create_access_token(user.id, name=user.name, email=user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def test_user(db_session: Session) -> User:
    """Create and return a persisted test user."""
    return make_user(db_session, "Test User", email="test@example.com", username="tester")


@pytest.fixture()
def other_user(db_session: Session) -> User:
    """Create and return a second persisted user."""
    return make_user(db_session, "Other User", email="other@example.com", username="other")


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return auth_headers(test_user)


@pytest.fixture()
def other_auth_token(other_user: User) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return auth_headers(other_user)


@pytest.fixture()
def test_question(db_session: Session, test_user: User) -> Question:
    """A question asked by the primary user, tagged python and fastapi."""
    return make_question(db_session, test_user, tags=["python", "fastapi"])


@pytest.fixture()
def test_answer(db_session: Session, other_user: User, test_question: Question) -> Answer:
    """An answer from the secondary user on ``test_question``."""
    return answer_service.create_answer(
        db_session,
        other_user,
        test_question,
        "Use reversed() or slice with [::-1].",
    )
