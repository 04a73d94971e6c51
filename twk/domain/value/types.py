"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import Field, computed_field, field_validator

from twk.domain.value.common import RootValueObject, ValueObject


class VoteableType(str, Enum):
    """Type of entity that can be voted on."""

    SNIPPET = "snippet"


class Login(RootValueObject[str]):
    """User login name.

    Letters, digits, underscores, dots and hyphens, 3-40 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_login(cls, v: str) -> str:
        """Validate login format."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,40}$", v):
            raise ValueError(
                "Login must be 3-40 characters: letters, digits, '_', '.' or '-'"
            )
        return v


class VoteTally(ValueObject):
    """Yes/no vote counts for one snippet.

    Percentages are truncated to whole numbers. With no votes the total is
    replaced by ``empty_total`` so both percentages come out as 0.
    """

    yes: int = Field(default=0, ge=0)
    no: int = Field(default=0, ge=0)
    empty_total: float = Field(default=0.001, gt=0)

    @computed_field
    @property
    def total(self) -> int:
        return self.yes + self.no

    def _percent(self, count: int) -> int:
        total = self.total or self.empty_total
        return int(count / total * 100)

    @computed_field
    @property
    def percent_yes(self) -> int:
        return self._percent(self.yes)

    @computed_field
    @property
    def percent_no(self) -> int:
        return self._percent(self.no)

    def chart_data(self) -> list[dict[str, int | str]]:
        """Rows for the yes/no chart list."""
        return [
            {"name": "yes", "count": self.yes},
            {"name": "no", "count": self.no},
        ]
