"""End-to-end tests for the notification inbox."""

from askit.domain.value import Role
from tests.harness import create_client_fixture, register, update_user

client = create_client_fixture()


def _answered_question(client):
    """Alice asks, bob answers: alice gets one notification."""
    alice = register(client, "alice")
    bob = register(client, "bob")
    question_id = client.post(
        "/api/questions",
        json={
            "title": "Where do notifications come from?",
            "description": "Trying to understand the inbox behaviour.",
            "tags": ["meta"],
        },
        headers=alice["headers"],
    ).json()["data"]["id"]
    client.post(
        f"/api/questions/{question_id}/answers",
        json={"content": "From activity on your content."},
        headers=bob["headers"],
    )
    return alice, bob


class TestInbox:
    def test_answer_notification_and_mark_read(self, client):
        # Arrange
        alice, _ = _answered_question(client)

        # Act
        inbox = client.get("/api/notifications", headers=alice["headers"]).json()["data"]

        # Assert
        (notification,) = inbox["notifications"]
        assert notification["type"] == "question_answered"
        assert notification["is_read"] is False
        assert notification["url"].startswith("/questions/")

        # Act
        read = client.put(
            f"/api/notifications/{notification['id']}/read", headers=alice["headers"]
        )
        count = client.get("/api/notifications/unread-count", headers=alice["headers"])

        # Assert
        assert read.json()["data"]["is_read"] is True
        assert count.json()["data"]["count"] == 0

    def test_read_all_and_unread_filter(self, client):
        alice, _ = _answered_question(client)

        marked = client.put("/api/notifications/read-all", headers=alice["headers"])
        unread = client.get(
            "/api/notifications", params={"unread_only": True}, headers=alice["headers"]
        ).json()["data"]

        assert marked.json()["data"]["count"] == 1
        assert unread["notifications"] == []
        assert unread["pagination"]["total"] == 0

    def test_unread_filter_accepts_camel_case(self, client):
        alice, _ = _answered_question(client)
        client.put("/api/notifications/read-all", headers=alice["headers"])

        camel = client.get(
            "/api/notifications", params={"unreadOnly": "true"}, headers=alice["headers"]
        ).json()["data"]
        everything = client.get("/api/notifications", headers=alice["headers"]).json()["data"]

        assert camel["notifications"] == []
        assert camel["pagination"]["total"] == 0
        assert len(everything["notifications"]) == 1

    def test_cannot_touch_someone_elses_notification(self, client):
        alice, bob = _answered_question(client)
        notification_id = client.get(
            "/api/notifications", headers=alice["headers"]
        ).json()["data"]["notifications"][0]["id"]

        response = client.delete(
            f"/api/notifications/{notification_id}", headers=bob["headers"]
        )

        assert response.status_code == 403

    def test_delete_all(self, client):
        alice, _ = _answered_question(client)

        deleted = client.delete("/api/notifications", headers=alice["headers"])
        inbox = client.get("/api/notifications", headers=alice["headers"]).json()["data"]

        assert deleted.json()["data"]["count"] == 1
        assert inbox["notifications"] == []

    def test_purge_is_admin_only(self, client):
        alice, bob = _answered_question(client)
        update_user(client, bob["id"], role=Role.ADMIN)

        refused = client.delete("/api/notifications/purge", headers=alice["headers"])
        purged = client.delete(
            "/api/notifications/purge", params={"days_old": 7}, headers=bob["headers"]
        )

        assert refused.status_code == 403
        assert purged.status_code == 200
        # Alice's notification is unread and recent, so it stays
        assert purged.json()["data"] == {"removed": 0, "days_old": 7}
