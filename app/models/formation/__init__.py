"""Formation domain models - labels, refusals and snapshots."""

from app.models.formation.entities import (
    REFUSAL_MESSAGES,
    CoalitionType,
    FormationSnapshot,
    Refusal,
)

__all__ = [
    "CoalitionType",
    "FormationSnapshot",
    "Refusal",
    "REFUSAL_MESSAGES",
]
