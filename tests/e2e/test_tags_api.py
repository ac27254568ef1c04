"""End-to-end tests for tag endpoints."""

from askit.domain.value import Role
from tests.harness import create_client_fixture, register, update_user

client = create_client_fixture()


def _ask(client, author, tags):
    response = client.post(
        "/api/questions",
        json={
            "title": "A question that needs tags",
            "description": "Some description that is long enough.",
            "tags": tags,
        },
        headers=author["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestTagEndpoints:
    def test_create_tag_needs_reputation(self, client):
        alice = register(client, "alice")
        payload = {"name": "fastapi", "description": "Web framework", "color": "#009688"}

        refused = client.post("/api/tags", json=payload, headers=alice["headers"])
        update_user(client, alice["id"], reputation=100)
        created = client.post("/api/tags", json=payload, headers=alice["headers"])

        assert refused.status_code == 403
        assert created.status_code == 201
        assert created.json()["data"]["color"] == "#009688"

    def test_popular_and_search_are_not_shadowed_by_id_route(self, client):
        alice = register(client, "alice")
        _ask(client, alice, ["python", "pytest"])
        _ask(client, alice, ["python"])

        popular = client.get("/api/tags/popular").json()["data"]["tags"]
        found = client.get("/api/tags/search", params={"q": "py"}).json()["data"]["tags"]

        assert popular[0]["name"] == "python"
        assert popular[0]["question_count"] == 2
        assert {t["name"] for t in found} == {"python", "pytest"}

    def test_get_tag_with_recent_questions(self, client):
        alice = register(client, "alice")
        question = _ask(client, alice, ["python"])
        tag_id = question["tags"][0]["id"]

        response = client.get(f"/api/tags/{tag_id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["tag"]["name"] == "python"
        assert [q["id"] for q in data["recent_questions"]] == [question["id"]]

    def test_tag_in_use_cannot_be_deleted(self, client):
        alice = register(client, "alice")
        question = _ask(client, alice, ["python"])
        tag_id = question["tags"][0]["id"]

        response = client.delete(f"/api/tags/{tag_id}", headers=alice["headers"])

        assert response.status_code == 400
        assert "used by 1 questions" in response.json()["message"]

    def test_official_flag_is_admin_only(self, client):
        alice = register(client, "alice")
        admin = register(client, "admin")
        update_user(client, admin["id"], role=Role.ADMIN)
        tag_id = _ask(client, alice, ["python"])["tags"][0]["id"]

        refused = client.put(f"/api/tags/{tag_id}/official", headers=alice["headers"])
        marked = client.put(
            f"/api/tags/{tag_id}/official",
            json={"is_official": True},
            headers=admin["headers"],
        )

        assert refused.status_code == 403
        assert marked.json()["data"]["is_official"] is True

    def test_invalid_color_rejected(self, client):
        alice = register(client, "alice")
        update_user(client, alice["id"], reputation=100)

        response = client.post(
            "/api/tags", json={"name": "colors", "color": "red"}, headers=alice["headers"]
        )

        assert response.status_code == 400

    def test_deleted_tag_name_can_be_created_again(self, client):
        # Arrange
        alice = register(client, "alice")
        update_user(client, alice["id"], reputation=100)
        first = client.post("/api/tags", json={"name": "reborn"}, headers=alice["headers"])
        client.delete(f"/api/tags/{first.json()['data']['id']}", headers=alice["headers"])

        # Act
        again = client.post("/api/tags", json={"name": "reborn"}, headers=alice["headers"])
        duplicate = client.post("/api/tags", json={"name": "reborn"}, headers=alice["headers"])

        # Assert
        assert again.status_code == 201
        assert again.json()["data"]["id"] != first.json()["data"]["id"]
        assert duplicate.status_code == 400
        assert duplicate.json()["message"] == "Tag already exists"
