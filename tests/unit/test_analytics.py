"""Tests for chamber analytics."""

from app.models import Chamber, Party, sample_chamber
from app.services.chamber import ChamberAnalytics

SMALL = Chamber(
    parties=(Party("A", 40, 0), Party("B", 30, 3), Party("C", 30, -3)),
    portfolios=("P1", "P2"),
)


class TestThresholds:
    def test_sample(self):
        assert ChamberAnalytics(sample_chamber()).thresholds() == (3, 1)

    def test_cached(self):
        analytics = ChamberAnalytics(sample_chamber())
        assert analytics.coalitions() is analytics.coalitions()


class TestCoalitions:
    def test_sample(self):
        result = ChamberAnalytics(sample_chamber()).coalitions()
        assert [c.parties for c in result] == [
            ("Targaryen", "Lannister", "Baratheon"),
            ("Targaryen", "Lannister", "Stark"),
        ]
        assert result[0].least and result[0].connected
        assert not result[1].least and not result[1].connected

    def test_lowest_surplus_first(self):
        result = ChamberAnalytics(SMALL).coalitions()
        assert [(c.parties, c.surplus) for c in result] == [(("B", "C"), 9), (("A", "B"), 19), (("A", "C"), 19)]
        assert [c.least for c in result] == [True, False, False]
        assert [c.connected for c in result] == [False, True, True]
