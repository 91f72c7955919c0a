from __future__ import annotations

import re
from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from snippetbox.app import CONTAINER_KEY, create_app
from snippetbox.infrastructure.container import Container
from snippetbox.infrastructure.db import Database
from snippetbox.shared.config import AppConfig, DatabaseConfig, SecurityConfig, SessionConfig

CSRF_RX = re.compile(r'name="csrf_token" value="([^"]+)"')


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "app.log"))


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        secret_key="test",
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'snippetbox.db'}"),
        session=SessionConfig(cleanup_interval=0),
        security=SecurityConfig(cookie_secure=False),
    )


@pytest.fixture()
def database(config: AppConfig) -> Iterator[Database]:
    db = Database(config.database)
    db.init_schema()
    yield db
    db.dispose()


@pytest.fixture()
def app(config: AppConfig) -> Iterator[Flask]:
    flask_app = create_app(config)
    flask_app.config.update(TESTING=True)
    yield flask_app
    flask_app.extensions[CONTAINER_KEY].database.dispose()


@pytest.fixture()
def container(app: Flask) -> Container:
    return app.extensions[CONTAINER_KEY]


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def csrf_token_from(client: FlaskClient, path: str) -> str:
    response = client.get(path)
    match = CSRF_RX.search(response.get_data(as_text=True))
    assert match, f"no csrf token rendered on {path}"
    return match.group(1)


def signup(
    client: FlaskClient,
    *,
    name: str = "Ann",
    email: str = "ann@example.com",
    password: str = "longenough12",
):
    token = csrf_token_from(client, "/user/signup")
    return client.post(
        "/user/signup",
        data={"name": name, "email": email, "password": password, "csrf_token": token},
    )


def login(client: FlaskClient, *, email: str = "ann@example.com", password: str = "longenough12"):
    token = csrf_token_from(client, "/user/login")
    return client.post(
        "/user/login",
        data={"email": email, "password": password, "csrf_token": token},
    )
