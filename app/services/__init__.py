"""Services package - service class exports."""

from app.services.chamber.analytics import ChamberAnalytics
from app.services.formation.session import FormationSession

__all__ = [
    "ChamberAnalytics",
    "FormationSession",
]
