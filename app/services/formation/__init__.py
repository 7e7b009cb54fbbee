"""Formation services."""

from app.services.formation.session import FormationSession

__all__ = ["FormationSession"]
