"""Tests for portfolio proportionality scoring."""

import pytest

from app.models import Chamber, Party, sample_chamber
from helpers.proportionality import portfolio_shares, proportionality_score, seat_shares

PORTFOLIOS = tuple(f"P{i}" for i in range(10))
SMALL = Chamber(
    parties=(Party("A", 50, 0), Party("B", 30, 2), Party("C", 20, -3)),
    portfolios=PORTFOLIOS,
)


class TestShares:
    def test_seat_shares(self):
        shares = seat_shares(SMALL, ["A", "B"])
        assert shares == {"A": 50 / 80, "B": 30 / 80}

    def test_seat_shares_empty(self):
        with pytest.raises(ValueError):
            seat_shares(SMALL, [])

    def test_portfolio_shares(self):
        shares = portfolio_shares(["A", "B"], {"A": ["P0", "P1"], "B": ["P2"]}, 10)
        assert shares == {"A": 0.2, "B": 0.1}

    def test_missing_member_holds_nothing(self):
        assert portfolio_shares(["A"], {}, 10) == {"A": 0.0}

    def test_zero_portfolios_clamps_denominator(self):
        assert portfolio_shares(["A"], {"A": []}, 0) == {"A": 0.0}


class TestScore:
    def test_empty(self):
        assert proportionality_score(SMALL, [], {}) == 0

    def test_perfect(self):
        allocation = {"A": list(PORTFOLIOS[:5]), "B": list(PORTFOLIOS[5:8]), "C": list(PORTFOLIOS[8:])}
        assert proportionality_score(SMALL, ["A", "B", "C"], allocation) == 100

    def test_clamped_at_zero(self):
        assert proportionality_score(SMALL, ["A", "B"], {"A": [], "B": list(PORTFOLIOS)}) == 0

    def test_sample_coalition(self):
        chamber = sample_chamber()
        ports = chamber.portfolios
        allocation = {
            "Targaryen": list(ports[:3]),
            "Lannister": list(ports[3:6]),
            "Baratheon": list(ports[6:]),
        }
        assert proportionality_score(chamber, ["Targaryen", "Lannister", "Baratheon"], allocation) == 90

    def test_always_in_range(self):
        for split in range(11):
            allocation = {"A": list(PORTFOLIOS[:split]), "C": list(PORTFOLIOS[split:])}
            score = proportionality_score(SMALL, ["A", "C"], allocation)
            assert isinstance(score, int)
            assert 0 <= score <= 100
