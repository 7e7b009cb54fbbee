"""Coalition formulas over a chamber - pure functions, easily testable.

Coalition-wide constants come from scanning the whole power set of the
chamber, which is O(2^n * n). That is fine for a handful of parties and is
a known scaling limit beyond ``MAX_ENUMERATED_PARTIES``.
"""

from collections.abc import Iterable, Iterator
from itertools import combinations

from loguru import logger

from app.models.chamber import Chamber
from app.models.formation import CoalitionType
from settings import CONNECTED_SPREAD, MAX_ENUMERATED_PARTIES


def _unique(members: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(members))


def coalition_seats(chamber: Chamber, members: Iterable[str]) -> int:
    """Total seats held by the members. Unknown ids raise."""
    return sum(chamber.party(m).seats for m in _unique(members))


def is_majority(chamber: Chamber, members: Iterable[str]) -> bool:
    return coalition_seats(chamber, members) >= chamber.majority_threshold


def surplus(chamber: Chamber, members: Iterable[str]) -> int:
    """Seats above the majority line (negative when short of it)."""
    return coalition_seats(chamber, members) - chamber.majority_threshold


def all_coalitions(chamber: Chamber) -> Iterator[tuple[str, ...]]:
    """Every non-empty subset of the chamber, smallest first, in chamber order."""
    ids = chamber.party_ids
    if len(ids) > MAX_ENUMERATED_PARTIES:
        logger.warning("Enumerating 2^{} coalitions, expect this to be slow", len(ids))

    for size in range(1, len(ids) + 1):
        yield from combinations(ids, size)


def min_party_count_for_majority(chamber: Chamber) -> int | None:
    """Fewest parties able to reach a majority, or None if nothing can."""
    best = None
    for coal in all_coalitions(chamber):
        if is_majority(chamber, coal) and (best is None or len(coal) < best):
            best = len(coal)
    return best


def is_minimal_winning(chamber: Chamber, members: Iterable[str], min_party_count: int | None) -> bool:
    """Majority using exactly the chamber-wide minimum number of parties.

    Minimality is by party count, not by the absence of redundant members.
    """
    members = _unique(members)
    if min_party_count is None or not is_majority(chamber, members):
        return False
    return len(members) == min_party_count


def min_surplus_among_minimal_winning(chamber: Chamber, min_party_count: int | None) -> int | None:
    """Smallest surplus over all minimal winning coalitions."""
    surpluses = [
        surplus(chamber, coal)
        for coal in all_coalitions(chamber)
        if is_minimal_winning(chamber, coal, min_party_count)
    ]
    return min(surpluses) if surpluses else None


def is_least_minimal_winning(
    chamber: Chamber,
    members: Iterable[str],
    min_party_count: int | None,
    min_surplus: int | None,
) -> bool:
    members = _unique(members)
    if min_surplus is None or not is_minimal_winning(chamber, members, min_party_count):
        return False
    return surplus(chamber, members) == min_surplus


def classify(
    chamber: Chamber,
    members: Iterable[str],
    min_party_count: int | None,
    min_surplus: int | None,
) -> CoalitionType:
    """Government type. Exactly one label applies to any coalition."""
    members = _unique(members)
    if is_least_minimal_winning(chamber, members, min_party_count, min_surplus):
        return CoalitionType.LEAST_MINIMAL_WINNING
    if is_minimal_winning(chamber, members, min_party_count):
        return CoalitionType.MINIMAL_WINNING
    if is_majority(chamber, members):
        return CoalitionType.SURPLUS_MAJORITY
    return CoalitionType.NOT_A_GOVERNMENT


def policy_spread(chamber: Chamber, members: Iterable[str]) -> int | None:
    """Distance between the most extreme member positions."""
    positions = [chamber.party(m).position for m in _unique(members)]
    if not positions:
        return None
    return max(positions) - min(positions)


def is_connected(chamber: Chamber, members: Iterable[str]) -> bool:
    """Connected when the policy spread is strictly under CONNECTED_SPREAD."""
    spread = policy_spread(chamber, members)
    return spread is not None and spread < CONNECTED_SPREAD


def minimal_winning_coalitions(chamber: Chamber, min_party_count: int | None) -> list[tuple]:
    """All minimal winning coalitions. Returns [(parties, seats, surplus)], lowest surplus first."""
    if min_party_count is None:
        return []

    result = []
    for coal in combinations(chamber.party_ids, min_party_count):
        if is_majority(chamber, coal):
            total = coalition_seats(chamber, coal)
            result.append((coal, total, total - chamber.majority_threshold))

    # sort is stable, so ties keep chamber order
    return sorted(result, key=lambda x: x[2])
