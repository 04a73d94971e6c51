"""PostgreSQL repository implementations."""

from twk.persistence.repository.category import PostgresCategoryRepository
from twk.persistence.repository.snippet import PostgresSnippetRepository
from twk.persistence.repository.user import PostgresUserRepository
from twk.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCategoryRepository",
    "PostgresUserRepository",
    "PostgresSnippetRepository",
    "PostgresVoteRepository",
]
