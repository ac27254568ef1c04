"""End-to-end tests for the ask / vote / answer / accept flow."""

from tests.harness import create_client_fixture, register, update_user

client = create_client_fixture()

QUESTION = {
    "title": "How do I mock fetch in Jest?",
    "description": "My component calls fetch on mount and the tests hit the network.",
    "tags": ["javascript", "Testing"],
}


class TestQuestionAnswerFlow:
    """A full thread from asking to accepting, across two users."""

    def test_full_flow(self, client):
        # Arrange
        alice = register(client, "alice")
        bob = register(client, "bob")
        update_user(client, bob["id"], reputation=20)

        # Act - ask
        response = client.post("/api/questions", json=QUESTION, headers=alice["headers"])

        # Assert
        assert response.status_code == 201
        question = response.json()["data"]
        assert [t["name"] for t in question["tags"]] == ["javascript", "testing"]
        assert question["author"]["username"] == "alice"
        question_id = question["id"]

        # Act - bob upvotes
        response = client.post(
            f"/api/questions/{question_id}/vote",
            json={"vote_type": "upvote"},
            headers=bob["headers"],
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["data"] == {"vote_count": 1, "user_vote": "upvote"}

        inbox = client.get("/api/notifications", headers=alice["headers"]).json()["data"]
        assert inbox["unread_count"] == 1
        assert inbox["notifications"][0]["type"] == "question_voted"

        # Act - the same vote again retracts it
        response = client.post(
            f"/api/questions/{question_id}/vote",
            json={"voteType": "upvote"},
            headers=bob["headers"],
        )

        # Assert
        assert response.json()["data"] == {"vote_count": 0, "user_vote": None}

        # Act - bob answers
        response = client.post(
            f"/api/questions/{question_id}/answers",
            json={"content": "Use jest.spyOn(global, 'fetch') in a beforeEach."},
            headers=bob["headers"],
        )

        # Assert
        assert response.status_code == 201
        answer_id = response.json()["data"]["id"]

        # Act - a second answer by bob is refused
        response = client.post(
            f"/api/questions/{question_id}/answers",
            json={"content": "Or mock the whole module with jest.mock."},
            headers=bob["headers"],
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "already answered" in response.json()["message"]

        # Act - alice accepts
        response = client.put(f"/api/answers/{answer_id}/accept", headers=alice["headers"])

        # Assert
        assert response.status_code == 200
        assert response.json()["data"]["is_accepted"] is True

        thread = client.get(f"/api/questions/{question_id}").json()["data"]
        assert thread["question"]["accepted_answer_id"] == answer_id
        assert thread["question"]["answer_count"] == 1
        assert thread["answers"][0]["is_accepted"] is True

        bob_inbox = client.get("/api/notifications", headers=bob["headers"]).json()["data"]
        assert bob_inbox["notifications"][0]["type"] == "answer_accepted"


class TestVotingRules:
    def test_low_reputation_cannot_vote(self, client):
        alice = register(client, "alice")
        newbie = register(client, "newbie")
        question_id = client.post(
            "/api/questions", json=QUESTION, headers=alice["headers"]
        ).json()["data"]["id"]

        response = client.post(
            f"/api/questions/{question_id}/vote",
            json={"vote_type": "upvote"},
            headers=newbie["headers"],
        )

        assert response.status_code == 403
        assert "15 reputation" in response.json()["message"]

    def test_self_vote_is_forbidden(self, client):
        alice = register(client, "alice")
        update_user(client, alice["id"], reputation=100)
        question_id = client.post(
            "/api/questions", json=QUESTION, headers=alice["headers"]
        ).json()["data"]["id"]

        response = client.post(
            f"/api/questions/{question_id}/vote",
            json={"vote_type": "downvote"},
            headers=alice["headers"],
        )

        assert response.status_code == 403

    def test_viewer_sees_own_vote(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        update_user(client, bob["id"], reputation=20)
        question_id = client.post(
            "/api/questions", json=QUESTION, headers=alice["headers"]
        ).json()["data"]["id"]
        client.post(
            f"/api/questions/{question_id}/vote",
            json={"vote_type": "downvote"},
            headers=bob["headers"],
        )

        as_bob = client.get(f"/api/questions/{question_id}", headers=bob["headers"])
        anonymous = client.get(f"/api/questions/{question_id}")

        assert as_bob.json()["data"]["question"]["user_vote"] == "downvote"
        assert anonymous.json()["data"]["question"]["user_vote"] is None
        assert anonymous.json()["data"]["question"]["vote_count"] == -1


class TestQuestionManagement:
    def test_only_author_can_edit(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        question_id = client.post(
            "/api/questions", json=QUESTION, headers=alice["headers"]
        ).json()["data"]["id"]

        forbidden = client.put(
            f"/api/questions/{question_id}",
            json={"title": "Hijacked question title"},
            headers=bob["headers"],
        )
        allowed = client.put(
            f"/api/questions/{question_id}",
            json={"title": "How do I mock fetch in Vitest?"},
            headers=alice["headers"],
        )

        assert forbidden.status_code == 403
        assert allowed.status_code == 200
        assert allowed.json()["data"]["title"] == "How do I mock fetch in Vitest?"

    def test_closed_question_rejects_answers(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        question_id = client.post(
            "/api/questions", json=QUESTION, headers=alice["headers"]
        ).json()["data"]["id"]

        closed = client.put(
            f"/api/questions/{question_id}/close",
            json={"is_closed": True},
            headers=alice["headers"],
        )
        answer = client.post(
            f"/api/questions/{question_id}/answers",
            json={"content": "Too late to answer this one."},
            headers=bob["headers"],
        )

        assert closed.json()["data"]["is_closed"] is True
        assert answer.status_code == 400

    def test_deleted_question_is_gone(self, client):
        alice = register(client, "alice")
        question_id = client.post(
            "/api/questions", json=QUESTION, headers=alice["headers"]
        ).json()["data"]["id"]

        deleted = client.delete(f"/api/questions/{question_id}", headers=alice["headers"])
        response = client.get(f"/api/questions/{question_id}")

        assert deleted.status_code == 200
        assert response.status_code == 404

    def test_list_and_search(self, client):
        alice = register(client, "alice")
        client.post("/api/questions", json=QUESTION, headers=alice["headers"])

        listed = client.get("/api/questions", params={"tag": "javascript"}).json()["data"]
        found = client.get("/api/questions/search", params={"q": "jest"}).json()["data"]
        missing_query = client.get("/api/questions/search")

        assert listed["pagination"]["total"] == 1
        assert found["questions"][0]["title"] == QUESTION["title"]
        assert missing_query.status_code == 400

    def test_tag_filter_with_impossible_name_matches_nothing(self, client):
        alice = register(client, "alice")
        client.post("/api/questions", json=QUESTION, headers=alice["headers"])

        response = client.get("/api/questions", params={"tag": "c++"})

        assert response.status_code == 200
        assert response.json()["data"]["questions"] == []
        assert response.json()["data"]["pagination"]["total"] == 0

    def test_unauthenticated_ask_is_rejected(self, client):
        response = client.post("/api/questions", json=QUESTION)

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "message": "Not authorized, no token",
        }

    def test_invalid_body_reports_field_errors(self, client):
        alice = register(client, "alice")

        response = client.post(
            "/api/questions",
            json={"title": "short", "description": "tiny", "tags": []},
            headers=alice["headers"],
        )

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert {"title", "description", "tags"} <= fields


class TestComments:
    def test_comment_requires_reputation_and_notifies(self, client):
        # Arrange
        alice = register(client, "alice")
        bob = register(client, "bob")
        carol = register(client, "carol")
        update_user(client, carol["id"], reputation=50)
        question_id = client.post(
            "/api/questions", json=QUESTION, headers=alice["headers"]
        ).json()["data"]["id"]
        answer_id = client.post(
            f"/api/questions/{question_id}/answers",
            json={"content": "Use jest.spyOn(global, 'fetch') in a beforeEach."},
            headers=bob["headers"],
        ).json()["data"]["id"]

        # Act
        refused = client.post(
            f"/api/answers/{answer_id}/comments",
            json={"content": "Nice one"},
            headers=alice["headers"],
        )
        added = client.post(
            f"/api/answers/{answer_id}/comments",
            json={"content": "Nice one"},
            headers=carol["headers"],
        )

        # Assert
        assert refused.status_code == 403
        assert added.status_code == 201
        comment_id = added.json()["data"]["id"]
        count = client.get("/api/notifications/unread-count", headers=bob["headers"])
        # Bob hears only about the comment
        assert count.json()["data"]["count"] == 1

        # Act - comment author removes it
        removed = client.delete(
            f"/api/answers/{answer_id}/comments/{comment_id}", headers=carol["headers"]
        )

        # Assert
        assert removed.status_code == 200
        answers = client.get(f"/api/questions/{question_id}/answers").json()["data"]
        assert answers["answers"][0]["comments"] == []
