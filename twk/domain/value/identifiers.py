"""Strongly typed identifiers for domain entities.

Using NewType keeps user, snippet and vote ids from being mixed up.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
CategoryId = NewType("CategoryId", UUID)
SnippetId = NewType("SnippetId", UUID)
VoteId = NewType("VoteId", UUID)
