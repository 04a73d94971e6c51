"""Vote entity.

Votes record whether a user believes a snippet is true or false.
Each user can cast one vote per item.
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import Field

from twk.domain.model.common import DomainModel
from twk.domain.value import UserId, VoteableType, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (checked by the vote service and backed by
      a unique constraint in storage)
    - Votes are never changed; a second vote by the same user is ignored
    - Polymorphic reference to the voteable item
    """

    id: VoteId
    user_id: UserId
    voteable_type: VoteableType = VoteableType.SNIPPET
    voteable_id: UUID
    verdict: bool  # True = "yes, this is true"
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
