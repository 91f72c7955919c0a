from __future__ import annotations

from datetime import UTC, datetime, timedelta

from flask import Flask
from flask.testing import FlaskClient

from conftest import login, signup
from snippetbox.app import CONTAINER_KEY, create_app
from snippetbox.infrastructure.container import Container
from snippetbox.infrastructure.db import Database
from snippetbox.infrastructure.sessions import SessionBag, SqlAlchemySessionStore
from snippetbox.shared.config import AppConfig


def test_pop_flash_returns_message_once() -> None:
    bag = SessionBag()
    bag.put_flash("Snippet successfully created!")

    assert bag.pop_flash() == "Snippet successfully created!"
    assert bag.pop_flash() == ""
    assert bag.modified is True


def test_reading_does_not_mark_bag_modified() -> None:
    bag = SessionBag({"flash": "hi"}, token="abc")
    assert bag.authenticated_user_id is None
    assert bag.get("flash") == "hi"
    assert bag.modified is False
    assert bag.accessed is True


def test_authenticated_user_accessors() -> None:
    bag = SessionBag()
    assert bag.authenticated_user_id is None

    bag.set_authenticated_user(7)
    assert bag.authenticated_user_id == 7
    assert bag["authenticatedUserID"] == 7

    bag.clear_authenticated_user()
    assert bag.authenticated_user_id is None


def test_authenticated_user_ignores_non_integer_values() -> None:
    bag = SessionBag({"authenticatedUserID": "7"}, token="abc")
    assert bag.authenticated_user_id is None


def test_csrf_token_is_stable_per_session() -> None:
    bag = SessionBag()
    token = bag.csrf_token
    assert len(token) >= 32
    assert bag.csrf_token == token


def test_renew_token_preserves_contents_and_invalidates_old_token() -> None:
    invalidated: list[str] = []
    bag = SessionBag(
        {"flash": "x", "authenticatedUserID": 3},
        token="old-token",
        deadline=datetime.now(UTC),
        invalidate=invalidated.append,
    )

    bag.renew_token()

    assert bag.token and bag.token != "old-token"
    assert bag.deadline is None
    assert dict(bag) == {"flash": "x", "authenticatedUserID": 3}
    assert invalidated == ["old-token"]
    assert bag.modified is True


def test_store_round_trip(database: Database) -> None:
    store = SqlAlchemySessionStore(database)
    expiry = datetime.now(UTC) + timedelta(hours=1)
    store.commit("tok", {"flash": "hello", "authenticatedUserID": 1}, expiry)

    found = store.find("tok")
    assert found is not None
    data, stored_expiry = found
    assert data == {"flash": "hello", "authenticatedUserID": 1}
    assert abs((stored_expiry - expiry).total_seconds()) < 1

    store.commit("tok", {"flash": "updated"}, expiry)
    assert store.find("tok")[0] == {"flash": "updated"}  # type: ignore[index]

    store.delete("tok")
    assert store.find("tok") is None


def test_store_ignores_and_purges_expired_sessions(database: Database) -> None:
    store = SqlAlchemySessionStore(database)
    past = datetime.now(UTC) - timedelta(seconds=1)
    store.commit("stale", {"flash": "old"}, past)
    store.commit("stale-2", {"flash": "old"}, past)
    store.commit("fresh", {"flash": "new"}, datetime.now(UTC) + timedelta(hours=1))

    assert store.find("stale") is None
    assert store.delete_expired() == 1
    assert store.find("fresh") is not None


def test_unknown_cookie_starts_empty_session(client: FlaskClient) -> None:
    client.set_cookie("session", "not-a-real-token")
    response = client.get("/")
    assert response.status_code == 200
    assert "Logout" not in response.get_data(as_text=True)


def test_session_cookie_attributes(client: FlaskClient) -> None:
    response = client.get("/user/login")
    cookie = response.headers["Set-Cookie"]

    assert cookie.startswith("session=")
    assert "HttpOnly" in cookie
    assert "SameSite=Lax" in cookie
    assert "Expires=" in cookie


def test_login_and_logout_rotate_token(client: FlaskClient, container: Container) -> None:
    signup(client)
    client.get("/user/login")
    before = client.get_cookie("session").value

    response = login(client)
    assert response.status_code == 303
    after_login = client.get_cookie("session").value

    assert after_login != before
    assert container.session_store.find(before) is None
    data, _ = container.session_store.find(after_login)  # type: ignore[misc]
    assert isinstance(data["authenticatedUserID"], int)

    create_page = client.get("/snippet/create").get_data(as_text=True)
    token = create_page.split('name="csrf_token" value="')[1].split('"')[0]
    response = client.post("/user/logout", data={"csrf_token": token})
    assert response.status_code == 303
    after_logout = client.get_cookie("session").value

    assert after_logout != after_login
    assert container.session_store.find(after_login) is None
    data, _ = container.session_store.find(after_logout)  # type: ignore[misc]
    assert "authenticatedUserID" not in data


def test_session_survives_a_new_application_instance(
    app: Flask, client: FlaskClient, config: AppConfig
) -> None:
    signup(client)
    login(client)
    token = client.get_cookie("session").value

    restarted = create_app(config)
    with restarted.test_client() as other:
        other.set_cookie("session", token)
        response = other.get("/snippet/create")
    assert response.status_code == 200
    restarted.extensions[CONTAINER_KEY].database.dispose()


def test_issued_csrf_token_does_not_create_one() -> None:
    bag = SessionBag()
    assert bag.issued_csrf_token == ""
    assert bag.modified is False

    token = bag.csrf_token
    assert bag.issued_csrf_token == token
