"""Integration tests for the notification, auth and settings endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from cornerstone.application.use_cases.notifications import create_notification
from cornerstone.application.use_cases.users import create_user
from cornerstone.infrastructure.database import SessionLocal
from cornerstone.infrastructure.security import create_access_token
from main import create_app

NOTIFICATION_FIELDS = {
    "id",
    "owner_id",
    "title",
    "body",
    "category",
    "link_href",
    "link_label",
    "read_at",
    "created_at",
}


@pytest.fixture()
def client():
    """Return a test client bound to a clean application instance."""

    with TestClient(create_app()) as test_client:
        yield test_client


def _auth_headers(user_id: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token({'sub': user_id})}"}


def _create(owner_id: str, title: str, **fields) -> str:
    with SessionLocal() as session:
        result = create_notification(session, owner_id=owner_id, title=title, **fields)
    assert result.error is None
    return result.id


def test_login_then_read_notifications(client: TestClient) -> None:
    """A token issued by /auth/token resolves the principal for the list."""

    with SessionLocal() as session:
        user = create_user(
            session, name="Dana Ops", email="dana@example.com", password="Secret123!"
        )
    notification_id = _create(user.id, "Invoice overdue", link_href="/finance/123")

    login = client.post(
        "/auth/token",
        data={"username": "dana@example.com", "password": "Secret123!"},
    )
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['access_token']}"}

    response = client.get("/notifications/", headers=headers)

    assert response.status_code == 200
    payload = response.json()
    assert payload["error"] is None
    (item,) = payload["items"]
    assert set(item) == NOTIFICATION_FIELDS
    assert item["id"] == notification_id
    assert item["body"] is None
    assert item["read_at"] is None

    me = client.get("/users/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["email"] == "dana@example.com"


def test_login_rejects_wrong_password(client: TestClient) -> None:
    with SessionLocal() as session:
        create_user(session, name="Dana", email="dana@example.com", password="Secret123!")

    response = client.post(
        "/auth/token", data={"username": "dana@example.com", "password": "nope"}
    )

    assert response.status_code == 401


def test_anonymous_caller_gets_empty_list_and_text_errors(client: TestClient) -> None:
    listed = client.get("/notifications/")
    read_one = client.post("/notifications/some-id/read")
    read_all = client.post("/notifications/read-all")

    assert listed.status_code == 200
    assert listed.json() == {"items": [], "error": None}
    assert read_one.status_code == 200
    assert read_one.json() == {"error": "Unauthorized"}
    assert read_all.status_code == 200
    assert read_all.json() == {"error": "Unauthorized"}


def test_invalid_token_is_treated_as_anonymous(client: TestClient) -> None:
    response = client.post(
        "/notifications/read-all", headers={"Authorization": "Bearer garbage"}
    )

    assert response.json() == {"error": "Unauthorized"}


def test_mark_read_endpoints(client: TestClient, make_user) -> None:
    owner = make_user("u@example.com")
    intruder = make_user("v@example.com")
    first = _create(owner, "First")
    _create(owner, "Second")

    foreign = client.post(f"/notifications/{first}/read", headers=_auth_headers(intruder))
    assert foreign.json() == {"error": None}
    items = client.get("/notifications/", headers=_auth_headers(owner)).json()["items"]
    assert all(item["read_at"] is None for item in items)

    own = client.post(f"/notifications/{first}/read", headers=_auth_headers(owner))
    assert own.json() == {"error": None}
    items = client.get("/notifications/", headers=_auth_headers(owner)).json()["items"]
    assert {item["title"]: item["read_at"] is not None for item in items} == {
        "First": True,
        "Second": False,
    }

    client.post("/notifications/read-all", headers=_auth_headers(owner))
    items = client.get("/notifications/", headers=_auth_headers(owner)).json()["items"]
    assert all(item["read_at"] is not None for item in items)


def test_profile_requires_authentication(client: TestClient) -> None:
    assert client.get("/users/me").status_code == 401


def test_inactive_user_is_not_a_principal(client: TestClient, make_user) -> None:
    user_id = make_user("off@example.com", is_active=False)
    _create(user_id, "Hidden")

    response = client.get("/notifications/", headers=_auth_headers(user_id))

    assert response.json() == {"items": [], "error": None}


def test_appearance_settings(client: TestClient, make_user) -> None:
    headers = _auth_headers(make_user("u@example.com"))

    assert client.get("/settings/appearance", headers=headers).json() == {
        "theme": "dark",
        "density": "compact",
    }

    updated = client.put("/settings/appearance", json={"theme": "system"}, headers=headers)
    assert updated.status_code == 200
    assert updated.json() == {"theme": "system", "density": "compact"}

    invalid = client.put("/settings/appearance", json={"density": "cozy"}, headers=headers)
    assert invalid.status_code == 422


def test_audit_log_listing(client: TestClient, make_user) -> None:
    from cornerstone.application.use_cases.audit import log_audit

    actor = make_user("u@example.com")
    with SessionLocal() as session:
        log_audit(session, actor, "invoice_issued", "invoice", "inv-1")
        log_audit(session, None, "payment_received", "payment_received", "pay-1")

    assert client.get("/audit-logs/").status_code == 401

    response = client.get(
        "/audit-logs/", params={"action": "invoice_issued"}, headers=_auth_headers(actor)
    )
    assert response.status_code == 200
    (entry,) = response.json()
    assert entry["entity_id"] == "inv-1"
    assert entry["actor_id"] == actor


def test_recorded_audit_entries_are_attributed_to_the_caller(
    client: TestClient, make_user
) -> None:
    from cornerstone.application.use_cases.audit import list_audit_entries

    actor = make_user("u@example.com")
    payload = {
        "action": "vendor_payout_paid",
        "entity_type": "vendor_payout",
        "entity_id": "vp-1",
        "meta": {"amount": 300},
    }

    assert client.post("/audit-logs/", json=payload).status_code == 401

    response = client.post("/audit-logs/", json=payload, headers=_auth_headers(actor))
    assert response.status_code == 204

    with SessionLocal() as session:
        (entry,) = list_audit_entries(session)
    assert entry.actor_id == actor
    assert entry.entity_id == "vp-1"
    assert entry.meta == {"amount": 300}


def test_audit_writer_without_principal_records_no_actor(session) -> None:
    from cornerstone.application.use_cases.audit import list_audit_entries
    from cornerstone.interfaces.api.dependencies import get_audit_writer

    audit = get_audit_writer(db=session, principal=None)
    audit("requirement_fulfilled", "requirement", "r-1")

    (entry,) = list_audit_entries(session)
    assert entry.actor_id is None
    assert entry.entity_id == "r-1"
