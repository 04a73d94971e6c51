"""Domain model entities."""

from twk.domain.model.category import Category
from twk.domain.model.snippet import Snippet
from twk.domain.model.user import User
from twk.domain.model.vote import Vote

__all__ = [
    "User",
    "Category",
    "Snippet",
    "Vote",
]
