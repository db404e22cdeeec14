# tests/v1/test_questions.py
"""Tests for question endpoints."""

from fastapi import status

from devoverflow.models import Question, Tag
from tests.conftest import make_question

VALID_QUESTION = {
    "title": "Why does my SQLAlchemy session expire objects?",
    "content": "After commit every attribute access issues a new SELECT. Why?",
    "tags": ["sqlalchemy", "python"],
}


def test_create_question(client, db_session, test_user, auth_token) -> None:
    response = client.post("/api/v1/questions", json=VALID_QUESTION, headers=auth_token)

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()["data"]
    assert data["title"] == VALID_QUESTION["title"]
    assert data["author_id"] == test_user.id
    assert data["views"] == 0
    assert sorted(tag["name"] for tag in data["tags"]) == ["python", "sqlalchemy"]

    db_session.refresh(test_user)
    assert test_user.reputation == 5


def test_create_question_requires_auth(client) -> None:
    response = client.post("/api/v1/questions", json=VALID_QUESTION)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_create_question_validation(client, db_session, auth_token) -> None:
    bad_payloads = [
        {**VALID_QUESTION, "title": ""},
        {**VALID_QUESTION, "title": "   "},
        {**VALID_QUESTION, "content": "Too short"},
        {**VALID_QUESTION, "tags": []},
        {**VALID_QUESTION, "tags": ["a", "b", "c", "d", "e", "f"]},
        {**VALID_QUESTION, "tags": ["this-tag-is-too-long"]},
    ]
    for payload in bad_payloads:
        response = client.post("/api/v1/questions", json=payload, headers=auth_token)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    assert db_session.query(Question).count() == 0
    assert db_session.query(Tag).count() == 0


def test_list_questions(client, test_question, test_answer) -> None:
    response = client.get("/api/v1/questions", params={"page": 1, "pageSize": 5})

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["message"] == "Success"
    assert body["results"] == 1
    summary = body["data"][0]
    assert summary["id"] == test_question.id
    assert summary["answer_count"] == 1
    assert summary["upvote_count"] == 0
    assert summary["author"]["name"] == "Test User"
    assert {tag["name"] for tag in summary["tags"]} == {"python", "fastapi"}


def test_list_questions_search_query(client, db_session, test_user) -> None:
    make_question(db_session, test_user, title="Tokio runtime panics")
    make_question(db_session, test_user, title="Gradle build cache")

    response = client.get("/api/v1/questions", params={"searchQuery": "tokio"})

    assert response.json()["results"] == 1
    assert response.json()["data"][0]["title"] == "Tokio runtime panics"


def test_list_questions_rejects_bad_paging(client) -> None:
    assert client.get("/api/v1/questions", params={"page": 0}).status_code == 422
    assert client.get("/api/v1/questions", params={"pageSize": 1000}).status_code == 422


def test_top_questions(client, db_session, test_user) -> None:
    for views in (5, 50, 500, 1, 2, 3):
        make_question(db_session, test_user, title=f"Viewed {views}", views=views)

    response = client.get("/api/v1/questions/top")

    assert response.status_code == status.HTTP_200_OK
    titles = [item["title"] for item in response.json()["data"]]
    assert titles == ["Viewed 500", "Viewed 50", "Viewed 5", "Viewed 3", "Viewed 2"]


def test_get_question_detail(client, test_question, test_answer) -> None:
    response = client.get(f"/api/v1/questions/{test_question.id}")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["content"].startswith("I have a list")
    assert data["upvoter_ids"] == []
    assert data["bookmarked_by"] == []
    assert [answer["id"] for answer in data["answers"]] == [test_answer.id]


def test_get_missing_question(client) -> None:
    response = client.get("/api/v1/questions/does-not-exist")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"status": "fail", "detail": "Question not found"}


def test_edit_question_by_author(client, test_question, auth_token) -> None:
    response = client.patch(
        f"/api/v1/questions/{test_question.id}",
        json={"title": "How do I reverse a list in place?"},
        headers=auth_token,
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["title"] == "How do I reverse a list in place?"
    assert data["content"].startswith("I have a list")


def test_edit_question_title_is_trimmed_and_not_blank(client, test_question, auth_token) -> None:
    url = f"/api/v1/questions/{test_question.id}"

    blank = client.patch(url, json={"title": " \t "}, headers=auth_token)
    padded = client.patch(url, json={"title": "  Reverse a list  "}, headers=auth_token)

    assert blank.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert padded.status_code == status.HTTP_200_OK
    assert padded.json()["data"]["title"] == "Reverse a list"


def test_edit_question_by_other_user_forbidden(client, test_question, other_auth_token) -> None:
    response = client.patch(
        f"/api/v1/questions/{test_question.id}",
        json={"title": "Hijacked"},
        headers=other_auth_token,
    )

    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_delete_question(client, db_session, test_question, test_answer, auth_token) -> None:
    response = client.delete(f"/api/v1/questions/{test_question.id}", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert client.get(f"/api/v1/questions/{test_question.id}").status_code == 404
    assert db_session.query(Question).count() == 0


def test_delete_question_by_other_user_forbidden(client, test_question, other_auth_token) -> None:
    response = client.delete(f"/api/v1/questions/{test_question.id}", headers=other_auth_token)
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_increment_views(client, db_session, test_question) -> None:
    for _ in range(3):
        response = client.post(f"/api/v1/questions/views/{test_question.id}")
        assert response.status_code == status.HTTP_200_OK

    db_session.refresh(test_question)
    assert test_question.views == 3
    assert client.post("/api/v1/questions/views/missing").status_code == 404


def test_question_answers_listing(client, test_question, test_answer) -> None:
    response = client.get(
        f"/api/v1/questions/{test_question.id}/answers",
        params={"filter": "most-recent"},
    )

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["results"] == 1
    assert body["data"][0]["content"] == test_answer.content
    assert client.get("/api/v1/questions/missing/answers").status_code == 404


def test_recommended_questions(client, db_session, test_user, other_user, auth_token) -> None:
    make_question(db_session, test_user, title="My flask question", tags=["flask"])
    related = make_question(db_session, other_user, title="Flask blueprints", tags=["flask"])
    make_question(db_session, other_user, title="Vue router", tags=["vue"])

    response = client.get("/api/v1/questions/recommended", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["results"] == 1
    assert body["data"][0]["id"] == related.id


def test_recommended_questions_requires_auth(client) -> None:
    assert client.get("/api/v1/questions/recommended").status_code == 401
