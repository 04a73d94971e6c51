"""Domain value objects."""

from twk.domain.value.identifiers import CategoryId, SnippetId, UserId, VoteId
from twk.domain.value.types import Login, VoteableType, VoteTally

__all__ = [
    # Identifiers
    "UserId",
    "CategoryId",
    "SnippetId",
    "VoteId",
    # Types
    "Login",
    "VoteableType",
    "VoteTally",
]
