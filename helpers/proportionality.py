"""Portfolio proportionality - how closely cabinet shares track seat shares."""

from collections.abc import Iterable, Mapping

from app.models.chamber import Chamber
from helpers.formulas import coalition_seats


def seat_shares(chamber: Chamber, members: Iterable[str]) -> dict[str, float]:
    """Each member's share of the coalition's seats."""
    members = list(dict.fromkeys(members))
    if not members:
        raise ValueError("Seat shares are undefined for an empty coalition")

    total = coalition_seats(chamber, members)
    return {m: chamber.party(m).seats / total for m in members}


def portfolio_shares(
    members: Iterable[str],
    allocation: Mapping[str, Iterable[str]],
    total_portfolios: int,
) -> dict[str, float]:
    """Each member's share of all cabinet portfolios."""
    denominator = max(1, total_portfolios)
    return {m: len(list(allocation.get(m, ()))) / denominator for m in dict.fromkeys(members)}


def proportionality_score(
    chamber: Chamber,
    members: Iterable[str],
    allocation: Mapping[str, Iterable[str]],
) -> int:
    """Score 0-100, lower mean absolute deviation between shares scores higher."""
    members = list(dict.fromkeys(members))
    if not members:
        return 0

    seats = seat_shares(chamber, members)
    portfolios = portfolio_shares(members, allocation, len(chamber.portfolios))
    mad = sum(abs(seats[m] - portfolios[m]) for m in members) / len(members)
    return max(0, round(100 * (1 - 2 * mad)))
