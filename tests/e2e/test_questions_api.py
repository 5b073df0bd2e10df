"""End-to-end tests for question and answer endpoints."""

import pytest

from tests.conftest import login


async def _ask(client, title="How do I reverse a list?", tags=None):
    response = await client.post(
        "/questions",
        json={"title": title, "content": "Idiomatic way please.", "tags": tags or ["python"]},
    )
    assert response.status_code == 201
    return response.json()


class TestQuestionEndpoints:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_create_question_requires_auth(self, client):
        # Act
        response = await client.post(
            "/questions", json={"title": "Hi", "content": "Body", "tags": ["a"]}
        )

        # Assert
        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required to ask questions"}

    @pytest.mark.asyncio
    async def test_invalid_token_rejected(self, client):
        login(client, "not-a-jwt")

        response = await client.post(
            "/questions", json={"title": "Hi", "content": "Body", "tags": ["a"]}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_create_and_fetch_question(self, client, register_user):
        # Arrange
        alice, token = await register_user("Alice")
        login(client, token)

        # Act
        created = await _ask(client)
        response = await client.get(f"/questions/{created['id']}")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["question"]["title"] == "How do I reverse a list?"
        assert body["question"]["author"] == {
            "id": str(alice.id),
            "name": "Alice",
            "image": None,
        }
        assert body["question"]["views"] == 1
        assert body["question"]["vote_count"] == 0
        assert body["answers"] == []

    @pytest.mark.asyncio
    async def test_missing_fields_return_400(self, client, register_user):
        _, token = await register_user("Alice")
        login(client, token)

        response = await client.post("/questions", json={"title": "No body"})

        assert response.status_code == 400
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_too_many_tags_return_400(self, client, register_user):
        _, token = await register_user("Alice")
        login(client, token)

        response = await client.post(
            "/questions",
            json={"title": "Tags", "content": "Body", "tags": ["a", "b", "c", "d", "e", "f"]},
        )

        assert response.status_code == 400
        assert "between 1 and 5 tags" in response.json()["error"]

    @pytest.mark.asyncio
    async def test_unknown_question_returns_404(self, client):
        response = await client.get("/questions/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404
        assert "Question not found" in response.json()["error"]

    @pytest.mark.asyncio
    async def test_list_questions_paginates(self, client, register_user):
        # Arrange
        _, token = await register_user("Alice")
        login(client, token)
        for i in range(3):
            await _ask(client, title=f"Question {i}", tags=["python" if i else "rust"])

        # Act
        response = await client.get("/questions", params={"limit": 2})
        filtered = await client.get("/questions", params={"subject": "rust"})

        # Assert
        body = response.json()
        assert body["total"] == 3
        assert body["total_pages"] == 2
        assert body["current_page"] == 1
        assert len(body["questions"]) == 2
        assert [q["title"] for q in filtered.json()["questions"]] == ["Question 0"]

    @pytest.mark.asyncio
    async def test_only_author_can_edit_or_delete(self, client, register_user):
        # Arrange
        _, alice_token = await register_user("Alice")
        _, bob_token = await register_user("Bob")
        login(client, alice_token)
        question = await _ask(client)

        # Act
        login(client, bob_token)
        edit = await client.put(f"/questions/{question['id']}", json={"title": "Hijacked"})
        delete = await client.delete(f"/questions/{question['id']}")

        # Assert
        assert edit.status_code == 403
        assert delete.status_code == 403

        login(client, alice_token)
        edit = await client.put(f"/questions/{question['id']}", json={"title": "Better title"})
        assert edit.status_code == 200
        assert edit.json()["title"] == "Better title"

        delete = await client.delete(f"/questions/{question['id']}")
        assert delete.status_code == 200
        assert delete.json() == {"message": "Question deleted successfully"}
        assert (await client.get(f"/questions/{question['id']}")).status_code == 404


class TestAnswerEndpoints:
    @pytest.mark.asyncio
    async def test_answer_and_list(self, client, register_user):
        # Arrange
        _, alice_token = await register_user("Alice")
        _, bob_token = await register_user("Bob")
        login(client, alice_token)
        question = await _ask(client)

        # Act
        login(client, bob_token)
        created = await client.post(
            "/answers", json={"question_id": question["id"], "content": "Use reversed()."}
        )
        listed = await client.get("/answers", params={"question_id": question["id"]})

        # Assert
        assert created.status_code == 201
        assert created.json()["author"]["name"] == "Bob"
        assert [a["id"] for a in listed.json()["answers"]] == [created.json()["id"]]

    @pytest.mark.asyncio
    async def test_answer_requires_existing_question(self, client, register_user):
        _, token = await register_user("Bob")
        login(client, token)

        response = await client.post(
            "/answers",
            json={"question_id": "00000000-0000-0000-0000-000000000000", "content": "Hi"},
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_only_question_author_can_accept(self, client, register_user):
        """The answer's own author is refused; the question's author succeeds."""
        # Arrange
        _, alice_token = await register_user("Alice")
        _, bob_token = await register_user("Bob")
        login(client, alice_token)
        question = await _ask(client)
        login(client, bob_token)
        answer = (
            await client.post(
                "/answers", json={"question_id": question["id"], "content": "Use reversed()."}
            )
        ).json()

        # Act
        refused = await client.post(f"/answers/{answer['id']}/accept")
        login(client, alice_token)
        accepted = await client.post(f"/answers/{answer['id']}/accept")

        # Assert
        assert refused.status_code == 403
        assert accepted.status_code == 200
        assert accepted.json()["accepted"] is True

        unaccepted = await client.delete(f"/answers/{answer['id']}/accept")
        assert unaccepted.json()["accepted"] is False

    @pytest.mark.asyncio
    async def test_question_page_ranks_accepted_answer_first(self, client, register_user):
        # Arrange
        _, alice_token = await register_user("Alice")
        _, bob_token = await register_user("Bob")
        login(client, alice_token)
        question = await _ask(client)
        login(client, bob_token)
        first = (
            await client.post("/answers", json={"question_id": question["id"], "content": "One"})
        ).json()
        second = (
            await client.post("/answers", json={"question_id": question["id"], "content": "Two"})
        ).json()
        await client.post(f"/answers/{first['id']}/vote", json={"vote_type": "up"})

        # Act
        login(client, alice_token)
        await client.post(f"/answers/{second['id']}/accept")
        response = await client.get(f"/questions/{question['id']}")

        # Assert
        answers = response.json()["answers"]
        assert [a["id"] for a in answers] == [second["id"], first["id"]]
        assert response.json()["question"]["answer_count"] == 2
