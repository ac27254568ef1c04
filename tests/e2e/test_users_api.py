"""End-to-end tests for user profiles, admin moderation and health."""

from askit.domain.value import Role
from tests.harness import create_client_fixture, register, update_user

client = create_client_fixture()


class TestProfiles:
    def test_public_profile_with_stats(self, client):
        # Arrange
        alice = register(client, "alice")
        client.post(
            "/api/questions",
            json={
                "title": "What makes a good profile?",
                "description": "Asking for a friend who is writing one.",
                "tags": ["meta"],
            },
            headers=alice["headers"],
        )

        # Act
        profile = client.get("/api/users/alice")
        stats = client.get(f"/api/users/{alice['id']}/stats")

        # Assert
        assert profile.status_code == 200
        data = profile.json()["data"]
        assert data["user"]["username"] == "alice"
        assert "email" not in data["user"]
        assert data["question_count"] == 1
        assert len(data["recent_questions"]) == 1
        assert stats.json()["data"]["question_count"] == 1

    def test_unknown_username(self, client):
        response = client.get("/api/users/nobody")

        assert response.status_code == 404
        assert response.json()["success"] is False


class TestAdministration:
    def test_user_list_is_admin_only(self, client):
        alice = register(client, "alice")
        admin = register(client, "boss")
        update_user(client, admin["id"], role=Role.ADMIN)

        refused = client.get("/api/users", headers=alice["headers"])
        listed = client.get("/api/users", params={"sort": "username"}, headers=admin["headers"])

        assert refused.status_code == 403
        assert [u["username"] for u in listed.json()["data"]["users"]] == ["alice", "boss"]

    def test_ban_then_unban(self, client):
        alice = register(client, "alice")
        admin = register(client, "boss")
        update_user(client, admin["id"], role=Role.ADMIN)

        banned = client.put(
            f"/api/users/{alice['id']}/ban", json={"is_banned": True}, headers=admin["headers"]
        )
        blocked = client.get("/api/auth/me", headers=alice["headers"])
        unbanned = client.put(
            f"/api/users/{alice['id']}/ban", json={"isBanned": False}, headers=admin["headers"]
        )

        assert banned.json()["data"]["is_banned"] is True
        assert blocked.status_code == 403
        assert unbanned.json()["data"]["is_banned"] is False

    def test_admin_cannot_be_deleted(self, client):
        admin = register(client, "boss")
        other_admin = register(client, "root")
        update_user(client, admin["id"], role=Role.ADMIN)
        update_user(client, other_admin["id"], role=Role.ADMIN)

        response = client.delete(f"/api/users/{other_admin['id']}", headers=admin["headers"])

        assert response.status_code == 400
        assert response.json()["message"] == "Cannot delete an admin user"

    def test_change_role(self, client):
        alice = register(client, "alice")
        admin = register(client, "boss")
        update_user(client, admin["id"], role=Role.ADMIN)

        response = client.put(
            f"/api/users/{alice['id']}/role", json={"role": "admin"}, headers=admin["headers"]
        )

        assert response.json()["data"]["role"] == "admin"


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["environment"] == "test"
