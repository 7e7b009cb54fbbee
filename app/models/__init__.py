"""Models package - entities for all domains."""

from app.models.chamber import Chamber, Party, sample_chamber
from app.models.common import BaseEntity, NotFoundError, UnknownPartyError, UnknownPortfolioError
from app.models.formation import CoalitionType, FormationSnapshot, Refusal

__all__ = [
    # Common
    "BaseEntity",
    "NotFoundError",
    "UnknownPartyError",
    "UnknownPortfolioError",
    # Chamber
    "Chamber",
    "Party",
    "sample_chamber",
    # Formation
    "CoalitionType",
    "FormationSnapshot",
    "Refusal",
]
