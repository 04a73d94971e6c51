"""Unit tests for domain value objects."""

import pytest
from pydantic import ValidationError

from twk.domain.value import Login, VoteTally


class TestVoteTally:
    """Counts and percentages."""

    def test_percentages_are_truncated(self):
        tally = VoteTally(yes=2, no=1)

        assert tally.total == 3
        assert tally.percent_yes == 66
        assert tally.percent_no == 33

    def test_empty_tally_has_zero_percentages(self):
        tally = VoteTally()

        assert tally.total == 0
        assert tally.percent_yes == 0
        assert tally.percent_no == 0

    def test_unanimous(self):
        tally = VoteTally(yes=5, no=0)

        assert tally.percent_yes == 100
        assert tally.percent_no == 0

    def test_chart_data(self):
        assert VoteTally(yes=3, no=4).chart_data() == [
            {"name": "yes", "count": 3},
            {"name": "no", "count": 4},
        ]

    def test_serializes_computed_fields(self):
        data = VoteTally(yes=1, no=1).model_dump()

        assert data["total"] == 2
        assert data["percent_yes"] == 50

    def test_negative_counts_are_rejected(self):
        with pytest.raises(ValidationError):
            VoteTally(yes=-1)

    def test_is_immutable(self):
        tally = VoteTally(yes=1)

        with pytest.raises(ValidationError):
            tally.yes = 2


class TestLogin:
    @pytest.mark.parametrize("login", ["bob", "jane.doe", "x_y-z", "a" * 40])
    def test_valid(self, login):
        assert Login(login).root == login

    @pytest.mark.parametrize("login", ["ab", "a" * 41, "has space", "semi;colon"])
    def test_invalid(self, login):
        with pytest.raises(ValidationError):
            Login(login)
