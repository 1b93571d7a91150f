"""Tests for the owner-scoped notification operations."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from cornerstone.application.use_cases.notifications import (
    UNAUTHORIZED,
    create_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    notify_invoice_overdue,
)
from cornerstone.infrastructure.repositories import NotificationRepository


def _read_at(session, owner_id, notification_id):
    session.expire_all()
    result = list_notifications(session, owner_id)
    return next(item.read_at for item in result.items if item.id == notification_id)


def test_create_list_mark_read_round_trip(session, make_user):
    """A created row is listed unread, then read, and only for its owner."""

    owner = make_user("u@example.com")
    other = make_user("v@example.com")

    created = create_notification(
        session, owner_id=owner, title="Invoice overdue", link_href="/finance/123"
    )
    assert created.error is None
    assert created.id

    listed = list_notifications(session, owner)
    assert listed.error is None
    assert len(listed.items) == 1
    row = listed.items[0]
    assert row.id == created.id
    assert row.read_at is None
    assert row.body is None
    assert row.category is None
    assert row.link_label is None
    assert row.link_href == "/finance/123"

    assert mark_notification_read(session, owner, created.id).ok

    assert _read_at(session, owner, created.id) is not None
    assert list_notifications(session, other).items == ()


def test_list_without_principal_is_empty_not_an_error(session, make_user, insert_notifications):
    insert_notifications(make_user("u@example.com"), 3)

    result = list_notifications(session, None)

    assert result.items == ()
    assert result.error is None


def test_list_is_capped_and_newest_first(session, make_user, insert_notifications):
    owner = make_user("u@example.com")
    ids = insert_notifications(owner, 55)

    items = list_notifications(session, owner).items

    assert len(items) == 50
    assert items[0].id == ids[-1]
    assert all(a.created_at >= b.created_at for a, b in zip(items, items[1:]))
    assert ids[0] not in {item.id for item in items}


def test_list_reports_store_failure_as_text(session, make_user, monkeypatch):
    owner = make_user("u@example.com")

    def _fail(self, owner_id):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(NotificationRepository, "list_for_owner", _fail)

    result = list_notifications(session, owner)

    assert result.items == ()
    assert result.error == "database is locked"


def test_mark_read_is_idempotent(session, make_user, insert_notifications):
    owner = make_user("u@example.com")
    (notification_id,) = insert_notifications(owner, 1)

    assert mark_notification_read(session, owner, notification_id).ok
    first = _read_at(session, owner, notification_id)
    assert mark_notification_read(session, owner, notification_id).ok
    second = _read_at(session, owner, notification_id)

    assert first is not None
    assert second == first


def test_mark_read_on_someone_elses_row_looks_like_success(
    session, make_user, insert_notifications
):
    owner = make_user("x@example.com")
    intruder = make_user("y@example.com")
    (notification_id,) = insert_notifications(owner, 1)

    result = mark_notification_read(session, intruder, notification_id)

    assert result.ok
    assert _read_at(session, owner, notification_id) is None


def test_mark_read_on_unknown_row_looks_like_success(session, make_user):
    owner = make_user("u@example.com")

    assert mark_notification_read(session, owner, "does-not-exist").ok


@pytest.mark.parametrize(
    "operation",
    [
        lambda session: mark_notification_read(session, None, "any"),
        lambda session: mark_all_notifications_read(session, None),
    ],
)
def test_mutations_require_a_principal(session, operation):
    assert operation(session).error == UNAUTHORIZED


def test_mark_all_read_only_touches_unread_rows_of_the_caller(
    session, make_user, insert_notifications
):
    owner = make_user("u@example.com")
    other = make_user("v@example.com")
    already_read = insert_notifications(owner, 2, read=True)
    insert_notifications(owner, 3)
    insert_notifications(other, 2)

    before = {item.id: item.read_at for item in list_notifications(session, owner).items}
    assert mark_all_notifications_read(session, owner).ok
    session.expire_all()
    after = {item.id: item.read_at for item in list_notifications(session, owner).items}

    assert all(read_at is not None for read_at in after.values())
    for notification_id in already_read:
        assert after[notification_id] == before[notification_id]
    assert all(item.read_at is None for item in list_notifications(session, other).items)


def test_mark_all_read_twice_gives_the_same_read_set(
    session, make_user, insert_notifications
):
    owner = make_user("u@example.com")
    insert_notifications(owner, 4)

    mark_all_notifications_read(session, owner)
    session.expire_all()
    first = {item.id: item.read_at for item in list_notifications(session, owner).items}
    mark_all_notifications_read(session, owner)
    session.expire_all()
    second = {item.id: item.read_at for item in list_notifications(session, owner).items}

    assert first == second


def test_create_normalizes_blank_optional_fields(session, make_user):
    owner = make_user("u@example.com")

    created = create_notification(
        session, owner_id=owner, title="  Heads up ", body="", link_label="Open"
    )
    (row,) = list_notifications(session, owner).items

    assert row.id == created.id
    assert row.title == "Heads up"
    assert row.body is None
    assert row.link_label == "Open"
    assert row.link_href is None


def test_create_rejects_blank_title(session, make_user):
    result = create_notification(session, owner_id=make_user("u@example.com"), title=" ")

    assert result.id is None
    assert result.error


def test_invoice_overdue_notification(session, make_user):
    owner = make_user("u@example.com")

    result = notify_invoice_overdue(session, owner_id=owner, invoice_id="inv-7")
    (row,) = list_notifications(session, owner).items

    assert row.id == result.id
    assert row.title == "Invoice overdue"
    assert row.category == "invoice_overdue"
    assert row.link_href == "/finance/invoice/inv-7/print"
    assert row.link_label == "View invoice"
