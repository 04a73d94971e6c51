"""In-memory repository implementations for testing."""

from .category import InMemoryCategoryRepository
from .snippet import InMemorySnippetRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCategoryRepository",
    "InMemorySnippetRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
