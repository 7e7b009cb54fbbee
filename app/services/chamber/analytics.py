"""Chamber analytics service - thresholds and minimal winning coalitions."""

from collections.abc import Callable

from loguru import logger

from app.models.chamber import Chamber, WinningCoalition
from helpers import formulas


class ChamberAnalytics:
    """Chamber-wide analytics with in-memory caching. The chamber never changes."""

    def __init__(self, chamber: Chamber):
        self._chamber = chamber
        self._cache: dict[str, object] = {}
        logger.debug("ChamberAnalytics initialized for {} parties", len(chamber.parties))

    @property
    def chamber(self) -> Chamber:
        return self._chamber

    def _get_cached_or_compute(self, key: str, compute_fn: Callable):
        """Return the cached result, computing it on first use."""
        if key not in self._cache:
            self._cache[key] = compute_fn()
        return self._cache[key]

    def thresholds(self) -> tuple[int | None, int | None]:
        """(minimal winning size, least surplus among minimal winning coalitions)."""

        def compute() -> tuple[int | None, int | None]:
            count = formulas.min_party_count_for_majority(self._chamber)
            if count is None:
                logger.warning("No coalition reaches {} seats", self._chamber.majority_threshold)
            return count, formulas.min_surplus_among_minimal_winning(self._chamber, count)

        return self._get_cached_or_compute("thresholds", compute)

    def coalitions(self) -> list[WinningCoalition]:
        """Minimal winning coalitions, least surplus first."""

        def compute() -> list[WinningCoalition]:
            count, least = self.thresholds()
            result = [
                WinningCoalition(
                    parties=members,
                    seats=seats,
                    surplus=extra,
                    least=extra == least,
                    connected=formulas.is_connected(self._chamber, members),
                )
                for members, seats, extra in formulas.minimal_winning_coalitions(self._chamber, count)
            ]
            logger.info("Found {} minimal winning coalitions", len(result))
            return result

        return self._get_cached_or_compute("coalitions", compute)
