"""Domain services."""

from .base import Service
from .category_service import CategoryService
from .snippet_service import SnippetService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "Service",
    "CategoryService",
    "SnippetService",
    "UserService",
    "VoteService",
]
