"""Tests for the chamber model."""

import pytest

from app.models import Chamber, Party, UnknownPartyError, UnknownPortfolioError, sample_chamber


class TestChamber:
    def test_sample(self):
        chamber = sample_chamber()
        assert len(chamber.parties) == 9
        assert len(chamber.portfolios) == 7
        assert chamber.total_seats == 200
        assert chamber.majority_threshold == 101

    def test_odd_total(self):
        chamber = Chamber(parties=(Party("A", 50, 0), Party("B", 51, 0)), portfolios=())
        assert chamber.majority_threshold == 51

    def test_order_kept(self):
        assert sample_chamber().party_ids[:3] == ["Targaryen", "Lannister", "Stark"]

    def test_lookup(self):
        chamber = sample_chamber()
        assert chamber.party("Stark") == Party("Stark", 30, -3)
        assert chamber.has_party("Stark")
        assert not chamber.has_party("Bolton")

    def test_unknown_party(self):
        with pytest.raises(UnknownPartyError) as exc:
            sample_chamber().party("Bolton")
        assert exc.value.party_id == "Bolton"

    def test_unknown_portfolio(self):
        with pytest.raises(UnknownPortfolioError):
            sample_chamber().require_portfolio("Master of Horse")

    def test_to_dict(self):
        data = sample_chamber().to_dict()
        assert data["parties"][0] == {"id": "Targaryen", "seats": 44, "position": 4}
        assert data["majority_threshold"] == 101


class TestValidation:
    def test_duplicate_party(self):
        with pytest.raises(ValueError):
            Chamber(parties=(Party("A", 10, 0), Party("A", 20, 1)), portfolios=())

    def test_duplicate_portfolio(self):
        with pytest.raises(ValueError):
            Chamber(parties=(Party("A", 10, 0),), portfolios=("X", "X"))

    def test_seats_positive(self):
        with pytest.raises(ValueError):
            Party("A", 0, 0)

    def test_position_range(self):
        with pytest.raises(ValueError):
            Party("A", 10, 6)
        with pytest.raises(ValueError):
            Party("A", 10, -6)
