"""Chamber domain models - parties, portfolios and the sample chamber."""

from app.models.chamber.entities import Chamber, Party, WinningCoalition
from app.models.chamber.sample import SAMPLE_PARTIES, SAMPLE_PORTFOLIOS, sample_chamber

__all__ = [
    "Chamber",
    "Party",
    "WinningCoalition",
    "SAMPLE_PARTIES",
    "SAMPLE_PORTFOLIOS",
    "sample_chamber",
]
