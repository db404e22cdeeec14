"""Unit tests for the ORM models defined in devoverflow.models.

These tests verify basic mapping correctness: table names, composite
primary keys and the polarity constraint on vote rows.
"""

from sqlalchemy import CheckConstraint
from sqlalchemy.orm import attributes

from devoverflow.models import (
    AnswerVote,
    Question,
    QuestionTag,
    QuestionVote,
    SavedQuestion,
    TagInteraction,
    User,
)


def test_table_names():
    """Model classes expose expected __tablename__ values."""
    assert User.__tablename__ == "user_account"
    assert Question.__tablename__ == "question"
    assert QuestionVote.__tablename__ == "question_vote"
    assert AnswerVote.__tablename__ == "answer_vote"
    assert SavedQuestion.__tablename__ == "saved_question"


def test_composite_primary_keys():
    """Join rows are keyed by both sides so each pair exists at most once."""
    expected = {
        QuestionVote: {"question_id", "user_id"},
        AnswerVote: {"answer_id", "user_id"},
        SavedQuestion: {"user_id", "question_id"},
        QuestionTag: {"question_id", "tag_id"},
        TagInteraction: {"interaction_id", "tag_id"},
    }
    for model, columns in expected.items():
        assert {c.name for c in model.__table__.primary_key} == columns


def test_vote_direction_is_constrained():
    for model in (QuestionVote, AnswerVote):
        checks = [c for c in model.__table__.constraints if isinstance(c, CheckConstraint)]
        assert [str(c.sqltext) for c in checks] == ["direction IN (1, -1)"]


def test_target_id_aliases_the_votable_column():
    vote = QuestionVote(target_id="q-1", user_id="u-1", direction=1)
    assert vote.question_id == "q-1"

    vote = AnswerVote(target_id="a-1", user_id="u-1", direction=-1)
    assert vote.answer_id == "a-1"


def test_relationships_are_instrumented_attributes():
    for attr in (Question.author, Question.tags, Question.votes, Question.bookmarks):
        assert isinstance(attr, attributes.InstrumentedAttribute)
