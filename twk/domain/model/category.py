"""Category entity."""

from pydantic import Field

from twk.domain.model.common import DomainModel
from twk.domain.value import CategoryId


class Category(DomainModel):
    """Topic that snippets are filed under."""

    id: CategoryId
    name: str = Field(min_length=1, max_length=100)
