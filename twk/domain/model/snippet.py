"""Snippet entity.

A snippet is a short claim or prediction that other users vote true or false.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from twk.domain.model.common import DomainModel
from twk.domain.value import CategoryId, SnippetId, UserId


class Snippet(DomainModel):
    """Snippet entity.

    Business rules:
    - Content is required and at most 1000 characters
    - A prediction must say when it expires
    """

    id: SnippetId
    user_id: UserId
    category_id: Optional[CategoryId] = None
    content: str = Field(min_length=1, max_length=1000)
    is_prediction: bool = False
    expires_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def check_prediction_expiry(self) -> "Snippet":
        if self.is_prediction and self.expires_at is None:
            raise ValueError(
                "expires_at is required: a prediction needs an expiration date"
            )
        return self
