"""Compiled-in sample chamber. Edit here for a different scenario."""

from app.models.chamber.entities import Chamber, Party

SAMPLE_PARTIES = (
    Party("Targaryen", 44, 4),
    Party("Lannister", 36, 2),
    Party("Stark", 30, -3),
    Party("Baratheon", 22, 1),
    Party("Greyjoy", 12, -5),
    Party("Tyrell", 20, 1),
    Party("Martell", 14, -2),
    Party("Arryn", 10, 1),
    Party("Tully", 12, -1),
)

SAMPLE_PORTFOLIOS = (
    "Hand of the King/Queen",
    "Master of Coin",
    "Grand Maester",
    "Master of Laws",
    "Master of Ships",
    "Master of Whisperers",
    "Lord Commander of the Kingsguard",
)


def sample_chamber() -> Chamber:
    return Chamber(parties=SAMPLE_PARTIES, portfolios=SAMPLE_PORTFOLIOS)
