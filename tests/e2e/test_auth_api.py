"""End-to-end tests for authentication."""

from tests.harness import create_client_fixture, register, update_user

client = create_client_fixture()


class TestRegisterAndLogin:
    def test_register_sets_cookie_and_returns_token(self, client):
        # Act
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "email": "alice@example.com", "password": "Secret123"},
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["user"]["username"] == "alice"
        assert body["data"]["user"]["reputation"] == 0
        assert "password_hash" not in body["data"]["user"]
        assert response.cookies.get("token") == body["data"]["token"]

    def test_weak_password_rejected(self, client):
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "email": "alice@example.com", "password": "password"},
        )

        assert response.status_code == 400
        assert "uppercase" in response.json()["message"]

    def test_duplicate_email_rejected(self, client):
        register(client, "alice")

        response = client.post(
            "/api/auth/register",
            json={"username": "alice2", "email": "alice@example.com", "password": "Secret123"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "User with this email already exists"

    def test_login(self, client):
        register(client, "alice")

        ok = client.post(
            "/api/auth/login", json={"email": "alice@example.com", "password": "Secret123"}
        )
        wrong = client.post(
            "/api/auth/login", json={"email": "alice@example.com", "password": "Secret999"}
        )

        assert ok.status_code == 200
        assert ok.json()["data"]["token"]
        assert wrong.status_code == 401
        assert wrong.json()["message"] == "Invalid credentials"

    def test_banned_user_cannot_login(self, client):
        alice = register(client, "alice")
        update_user(client, alice["id"], is_banned=True)

        response = client.post(
            "/api/auth/login", json={"email": "alice@example.com", "password": "Secret123"}
        )

        assert response.status_code == 403


class TestCurrentUser:
    def test_me_with_bearer_token(self, client):
        alice = register(client, "alice")
        update_user(client, alice["id"], reputation=60)

        response = client.get("/api/auth/me", headers=alice["headers"])

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["user"]["id"] == alice["id"]
        assert data["capabilities"]["can_vote"] is True
        assert data["capabilities"]["can_comment"] is True
        assert data["capabilities"]["can_create_tags"] is False

    def test_me_with_cookie(self, client):
        alice = register(client, "alice")
        client.cookies.set("token", alice["token"])

        response = client.get("/api/auth/me")

        assert response.status_code == 200
        assert response.json()["data"]["user"]["username"] == "alice"

    def test_me_without_token(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401

    def test_me_with_garbage_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token"

    def test_banned_user_token_stops_working(self, client):
        alice = register(client, "alice")
        update_user(client, alice["id"], is_banned=True)

        response = client.get("/api/auth/me", headers=alice["headers"])

        assert response.status_code == 403


class TestProfileAndPassword:
    def test_update_profile(self, client):
        alice = register(client, "alice")

        response = client.put(
            "/api/auth/profile",
            json={"bio": "I like tests", "username": "alice_b"},
            headers=alice["headers"],
        )

        assert response.status_code == 200
        assert response.json()["data"]["bio"] == "I like tests"
        assert response.json()["data"]["username"] == "alice_b"

    def test_username_taken(self, client):
        alice = register(client, "alice")
        register(client, "bob")

        response = client.put(
            "/api/auth/profile", json={"username": "bob"}, headers=alice["headers"]
        )

        assert response.status_code == 400

    def test_change_password(self, client):
        alice = register(client, "alice")

        changed = client.put(
            "/api/auth/change-password",
            json={"current_password": "Secret123", "new_password": "Better456"},
            headers=alice["headers"],
        )
        login = client.post(
            "/api/auth/login", json={"email": "alice@example.com", "password": "Better456"}
        )

        assert changed.status_code == 200
        assert login.status_code == 200

    def test_logout_clears_cookie(self, client):
        client.post(
            "/api/auth/register",
            json={"username": "alice", "email": "alice@example.com", "password": "Secret123"},
        )

        response = client.post("/api/auth/logout")

        assert response.status_code == 200
        assert 'token=""' in response.headers["set-cookie"]
