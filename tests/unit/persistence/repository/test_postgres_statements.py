"""Unit tests for PostgreSQL statements and row mapping (no database needed)."""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy.dialects import postgresql

from twk.domain.model import Category, Vote
from twk.domain.value import CategoryId, UserId, VoteableType, VoteId
from twk.persistence.mappers import (
    category_to_dict,
    row_to_category,
    row_to_snippet,
    row_to_user,
    row_to_vote,
    user_to_dict,
    vote_to_dict,
)
from twk.persistence.repository import PostgresVoteRepository
from twk.persistence.tables import votes_table
from tests.conftest import make_user


class TestVoteInsert:
    def test_add_if_absent_ignores_conflicts(self):
        repo = PostgresVoteRepository(session=None)
        vote = Vote(
            id=VoteId(uuid4()),
            user_id=UserId(uuid4()),
            voteable_id=uuid4(),
            verdict=True,
        )

        sql = str(repo.add_if_absent_statement(vote).compile(dialect=postgresql.dialect()))

        assert "ON CONFLICT ON CONSTRAINT unique_vote DO NOTHING" in sql
        assert "RETURNING votes.id" in sql

    def test_votes_are_unique_per_user_and_item(self):
        constraint = next(
            c for c in votes_table.constraints if c.name == "unique_vote"
        )

        assert [col.name for col in constraint.columns] == [
            "user_id",
            "voteable_type",
            "voteable_id",
        ]


class TestMappers:
    """Row mapping in both directions."""

    def test_category_round_trip(self):
        category = Category(id=CategoryId(uuid4()), name="Science")

        row = category_to_dict(category)

        assert row == {"id": category.id, "name": "Science"}
        assert row_to_category({"id": str(category.id), "name": "Science"}) == category

    def test_user_round_trip_keeps_time_zone(self):
        user = make_user("kim", time_zone="Eastern Time (US & Canada)")

        row = user_to_dict(user)
        restored = row_to_user(row)

        assert row["login"] == "kim"
        assert row["time_zone"] == "Eastern Time (US & Canada)"
        assert restored.time_zone == user.time_zone
        assert restored.login == user.login

    def test_row_to_vote_accepts_string_ids(self):
        vote_id, user_id, item = uuid4(), uuid4(), uuid4()

        vote = row_to_vote(
            {
                "id": str(vote_id),
                "user_id": str(user_id),
                "voteable_type": "snippet",
                "voteable_id": str(item),
                "verdict": False,
                "created_at": datetime(2008, 1, 1, tzinfo=timezone.utc),
            }
        )

        assert vote.id == vote_id
        assert vote.voteable_id == item
        assert vote.voteable_type == VoteableType.SNIPPET

    def test_vote_to_dict_uses_enum_value(self):
        vote = Vote(
            id=VoteId(uuid4()),
            user_id=UserId(uuid4()),
            voteable_id=uuid4(),
            verdict=True,
        )

        assert vote_to_dict(vote)["voteable_type"] == "snippet"

    def test_row_to_snippet_without_category(self):
        snippet = row_to_snippet(
            {
                "id": uuid4(),
                "user_id": uuid4(),
                "category_id": None,
                "content": "Claim",
                "is_prediction": False,
                "expires_at": None,
                "created_at": datetime(2008, 1, 1, tzinfo=timezone.utc),
            }
        )

        assert snippet.category_id is None
        assert snippet.content == "Claim"
