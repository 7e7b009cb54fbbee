"""Chamber services."""

from app.services.chamber.analytics import ChamberAnalytics

__all__ = ["ChamberAnalytics"]
