"""Mappers for converting between database rows and domain models.

Domain models are pydantic models, so rows are mapped by hand rather than
through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from twk.domain.model import Category, Snippet, User, Vote
from twk.domain.value import (
    CategoryId,
    Login,
    SnippetId,
    UserId,
    VoteableType,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        login=Login(row["login"]),
        email=row.get("email"),
        time_zone=row.get("time_zone"),
        enabled=row.get("enabled", True),
        created_at=row["created_at"],
        last_login_at=row.get("last_login_at"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "login": user.login.root,
        "email": user.email,
        "time_zone": user.time_zone,
        "enabled": user.enabled,
        "created_at": user.created_at,
        "last_login_at": user.last_login_at,
    }


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category(id=CategoryId(_uuid(row["id"])), name=row["name"])


def category_to_dict(category: Category) -> Dict[str, Any]:
    return category.model_dump()


def row_to_snippet(row: Dict[str, Any]) -> Snippet:
    """Convert database row to Snippet domain model."""
    category_id = row.get("category_id")
    return Snippet(
        id=SnippetId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        category_id=CategoryId(_uuid(category_id)) if category_id else None,
        content=row["content"],
        is_prediction=row.get("is_prediction", False),
        expires_at=row.get("expires_at"),
        created_at=row["created_at"],
    )


def snippet_to_dict(snippet: Snippet) -> Dict[str, Any]:
    return snippet.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        voteable_type=VoteableType(row["voteable_type"]),
        voteable_id=_uuid(row["voteable_id"]),
        verdict=row["verdict"],
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    vote_dict = vote.model_dump()
    vote_dict["voteable_type"] = vote.voteable_type.value
    return vote_dict
