# tests/v1/test_search.py
"""Tests for the global search endpoint."""

from fastapi import status

from tests.conftest import make_question


def test_search_all_kinds(client, test_question, test_answer) -> None:
    response = client.get("/api/v1/global-search", params={"query": "python"})

    assert response.status_code == status.HTTP_200_OK
    hits = response.json()["data"]
    assert {"title": test_question.title, "id": test_question.id, "type": "question"} in hits
    assert any(hit["type"] == "tag" and hit["title"] == "python" for hit in hits)


def test_search_single_type(client, db_session, test_user) -> None:
    for index in range(9):
        make_question(db_session, test_user, title=f"Webpack loader {index}")

    response = client.get("/api/v1/global-search", params={"query": "webpack", "type": "question"})

    hits = response.json()["data"]
    assert len(hits) == 8
    assert all(hit["type"] == "question" for hit in hits)


def test_search_answers_point_at_question(client, test_question, test_answer) -> None:
    response = client.get("/api/v1/global-search", params={"query": "reversed", "type": "answer"})

    hits = response.json()["data"]
    assert hits == [
        {
            "title": f'Answer containing "reversed" from question: {test_question.title}',
            "id": test_question.id,
            "type": "answer",
        }
    ]


def test_search_users(client, test_user) -> None:
    response = client.get("/api/v1/global-search", params={"query": "test", "type": "user"})

    assert response.json()["data"] == [{"title": "Test User", "id": test_user.id, "type": "user"}]


def test_search_requires_query(client) -> None:
    response = client.get("/api/v1/global-search")
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
