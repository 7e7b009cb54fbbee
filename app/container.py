"""Dependency container - holds the chamber and its analytics."""

from loguru import logger

from app.models.chamber import Chamber, sample_chamber
from app.services.chamber.analytics import ChamberAnalytics
from app.services.formation.session import FormationSession
from settings.logging import setup_logging


class Container:
    """Application container - the chamber is immutable, so it is shared.

    Formation sessions are never held here; each caller owns its own.
    """

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, chamber: Chamber | None = None) -> None:
        """Configure logging and initialize all dependencies. Call once at app startup."""
        if self._initialized:
            if chamber is not None and chamber != self.chamber:
                logger.warning("Container already initialized, ignoring new chamber (use reinit)")
            return

        setup_logging()

        self.chamber = chamber or sample_chamber()
        self.chamber_analytics = ChamberAnalytics(self.chamber)
        logger.info(
            "Chamber ready: {} parties, {} seats, majority {}",
            len(self.chamber.parties),
            self.chamber.total_seats,
            self.chamber.majority_threshold,
        )

        self._initialized = True

    def reinit(self, chamber: Chamber | None = None) -> None:
        """Drop current dependencies and initialize again."""
        self._initialized = False
        self.init(chamber)

    def new_session(self) -> FormationSession:
        self.init()
        return FormationSession(self.chamber)


# Global container instance
container = Container()
