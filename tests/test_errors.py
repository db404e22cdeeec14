# tests/test_errors.py
"""Tests for the centralized exception handlers."""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from devoverflow.core import errors
from devoverflow.core.settings import settings


@pytest.fixture()
def error_app() -> FastAPI:
    app = FastAPI()
    errors.register_exception_handlers(app)

    @app.get("/unique")
    async def unique() -> None:
        raise IntegrityError("INSERT INTO tag", {}, Exception("UNIQUE constraint failed: tag.name"))

    @app.get("/foreign-key")
    async def foreign_key() -> None:
        raise IntegrityError("INSERT INTO answer", {}, Exception("FOREIGN KEY constraint failed"))

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("kaboom")

    @app.get("/teapot")
    async def teapot() -> None:
        raise HTTPException(status_code=418, detail="I'm a teapot")

    @app.get("/items/{item_id}")
    async def item(item_id: int) -> dict[str, int]:
        return {"item_id": item_id}

    return app


@pytest.fixture()
def error_client(error_app: FastAPI):
    with TestClient(error_app, raise_server_exceptions=False) as test_client:
        yield test_client


def test_http_exception_shape(error_client) -> None:
    response = error_client.get("/teapot")

    assert response.status_code == 418
    assert response.json() == {"status": "fail", "detail": "I'm a teapot"}


def test_unique_violation_is_conflict(error_client, monkeypatch) -> None:
    monkeypatch.setattr(settings, "environment", "production")
    response = error_client.get("/unique")

    assert response.status_code == 409
    assert response.json() == {"status": "fail", "detail": errors.UNIQUE_VIOLATION}


def test_other_constraint_violation_is_bad_request(error_client, monkeypatch) -> None:
    monkeypatch.setattr(settings, "environment", "development")
    response = error_client.get("/foreign-key")

    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == errors.CONSTRAINT_VIOLATION
    assert body["error"] == "FOREIGN KEY constraint failed"


def test_unhandled_error_is_generic_in_production(error_client, monkeypatch) -> None:
    monkeypatch.setattr(settings, "environment", "production")
    response = error_client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"status": "error", "detail": "Something went wrong"}


def test_unhandled_error_is_verbose_in_development(error_client, monkeypatch) -> None:
    monkeypatch.setattr(settings, "environment", "development")
    response = error_client.get("/boom")

    assert response.status_code == 500
    assert response.json()["error"] == "RuntimeError: kaboom"


def test_validation_errors_hidden_in_production(error_client, monkeypatch) -> None:
    monkeypatch.setattr(settings, "environment", "production")
    response = error_client.get("/items/not-a-number")

    assert response.status_code == 422
    assert response.json() == {"status": "fail", "detail": "Invalid request data"}


def test_validation_errors_listed_outside_production(error_client, monkeypatch) -> None:
    monkeypatch.setattr(settings, "environment", "development")
    response = error_client.get("/items/not-a-number")

    body = response.json()
    assert body["detail"] == "Invalid request data"
    assert body["errors"][0]["loc"] == ["path", "item_id"]


def test_store_unique_violation_through_app(client, test_user, monkeypatch) -> None:
    """Skipping the signup pre-check lets the unique index reject the email."""
    from devoverflow.api.v1.endpoints import auth as auth_endpoints

    monkeypatch.setattr(settings, "environment", "production")
    monkeypatch.setattr(auth_endpoints, "get_user_by_email", lambda db, email: None)

    response = client.post(
        "/api/v1/auth/signup",
        json={
            "name": "Duplicate",
            "email": "test@example.com",
            "password": "password-123",
            "passwordConfirm": "password-123",
        },
    )

    assert response.status_code == 409
    assert response.json() == {"status": "fail", "detail": errors.UNIQUE_VIOLATION}
