import pytest

from app.core.enums import NotificationType
from app.modules.notifications.service import NotificationService
from tests.conftest import API


@pytest.fixture
def inbox(db, users):
    service = NotificationService(db)
    bob_id = users["bob"]["id"]
    return [
        service.notify(bob_id, NotificationType.SYSTEM, "Welcome", "Hello Bob"),
        service.notify(bob_id, NotificationType.MENTION, "Mentioned", "Alice mentioned you", link="/tasks/1"),
    ]


def test_recipient_lists_and_counts(client, users, inbox):
    bob = users["bob"]
    response = client.get(f"{API}/notifications", headers=bob["headers"])
    assert len(response.json()["data"]) == 2
    response = client.get(f"{API}/notifications/unread-count", headers=bob["headers"])
    assert response.json()["data"] == {"count": 2}
    assert client.get(f"{API}/notifications", headers=users["alice"]["headers"]).json()["data"] == []


def test_mark_read_and_read_all(client, users, inbox):
    bob = users["bob"]
    response = client.put(f"{API}/notifications/{inbox[0].id}/read", headers=bob["headers"])
    assert response.status_code == 200
    assert response.json()["data"]["is_read"] is True
    assert client.get(f"{API}/notifications/unread-count", headers=bob["headers"]).json()["data"]["count"] == 1

    response = client.put(f"{API}/notifications/read-all", headers=bob["headers"])
    assert response.json()["data"] == {"updated": 1}
    unread = client.get(f"{API}/notifications", params={"unread_only": True}, headers=bob["headers"]).json()["data"]
    assert unread == []


@pytest.mark.parametrize("name", ["alice", "admin"])
def test_others_cannot_touch_notifications_even_admin(client, users, inbox, name):
    headers = users[name]["headers"]
    target = inbox[0].id
    assert client.put(f"{API}/notifications/{target}/read", headers=headers).status_code == 403
    assert client.delete(f"{API}/notifications/{target}", headers=headers).status_code == 403


def test_recipient_deletes(client, db, users, inbox):
    bob = users["bob"]
    assert client.delete(f"{API}/notifications/{inbox[1].id}", headers=bob["headers"]).status_code == 200
    assert [row["id"] for row in db.rows("notifications")] == [inbox[0].id]


def test_missing_notification_is_404(client, users):
    assert client.put(f"{API}/notifications/nope/read", headers=users["bob"]["headers"]).status_code == 404
