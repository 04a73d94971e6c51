"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from twk.domain.repository.category import CategoryRepository
from twk.domain.repository.snippet import SnippetRepository
from twk.domain.repository.user import UserRepository
from twk.domain.repository.vote import VoteRepository

__all__ = [
    "CategoryRepository",
    "UserRepository",
    "SnippetRepository",
    "VoteRepository",
]
