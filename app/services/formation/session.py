"""Formation session - a single coalition-building attempt over a chamber.

The session is Open until a successful evaluation locks it. Only ``reset``
leaves the Locked state. Commands that cannot apply return a ``Refusal``
and leave the session untouched; unknown party or portfolio names raise.
"""

from uuid import uuid4

from loguru import logger

from app.models.chamber import Chamber
from app.models.formation import CoalitionType, FormationSnapshot, Refusal
from helpers import formulas
from helpers.proportionality import proportionality_score


class FormationSession:
    """Selected coalition members, their portfolios and the vote outcome."""

    def __init__(self, chamber: Chamber):
        self._chamber = chamber
        self.id = uuid4().hex[:8]
        self._log = logger.bind(session=self.id)
        self.reset()

    def reset(self) -> None:
        """Clear the attempt and recompute the chamber-wide thresholds."""
        self._chosen: dict[str, None] = {}
        self._allocation: dict[str, list[str]] = {}
        self.locked = False
        self.evaluated = False
        self.passed: bool | None = None
        self.caretaker = False

        self.min_party_count = formulas.min_party_count_for_majority(self._chamber)
        self.min_surplus = formulas.min_surplus_among_minimal_winning(self._chamber, self.min_party_count)
        self._log.info(
            "Session reset: minimal winning size {}, least surplus {}",
            self.min_party_count,
            self.min_surplus,
        )

    @property
    def chamber(self) -> Chamber:
        return self._chamber

    @property
    def members(self) -> list[str]:
        return list(self._chosen)

    @property
    def allocation(self) -> dict[str, list[str]]:
        return {m: list(ports) for m, ports in self._allocation.items()}

    def _refuse(self, reason: Refusal) -> Refusal:
        self._log.warning("Refused: {}", reason)
        return reason

    def toggle_member(self, party_id: str) -> Refusal | None:
        """Add or remove a party. A removed party's portfolios become unassigned."""
        self._chamber.party(party_id)
        if self.locked:
            return self._refuse(Refusal.LOCKED)

        if party_id in self._chosen:
            del self._chosen[party_id]
            released = self._allocation.pop(party_id, [])
            self._log.debug("Removed {} (released {} portfolios)", party_id, len(released))
        else:
            self._chosen[party_id] = None
            self._allocation[party_id] = []
            self._log.debug("Added {}", party_id)
        return None

    def set_allocation(self, portfolio: str, party_id: str | None) -> Refusal | None:
        """Assign a portfolio to a member, or unassign it when party_id is None."""
        self._chamber.require_portfolio(portfolio)
        if party_id is not None:
            self._chamber.party(party_id)
        if self.locked:
            return self._refuse(Refusal.LOCKED)
        if not self._chosen:
            return self._refuse(Refusal.NO_MEMBERS)
        if party_id is not None and party_id not in self._chosen:
            return self._refuse(Refusal.NOT_A_MEMBER)

        for ports in self._allocation.values():
            if portfolio in ports:
                ports.remove(portfolio)
        if party_id is not None:
            self._allocation[party_id].append(portfolio)

        self._log.debug("{} -> {}", portfolio, party_id or "(unassigned)")
        return None

    def unassigned_portfolios(self) -> list[str]:
        assigned = {p for m in self._chosen for p in self._allocation.get(m, [])}
        return [p for p in self._chamber.portfolios if p not in assigned]

    def all_portfolios_assigned(self) -> bool:
        """Every portfolio is held by some selected member."""
        if not self._chosen:
            return False
        return not self.unassigned_portfolios()

    def evaluate(self) -> Refusal | None:
        """Put the coalition to an investiture vote and lock the session."""
        if self.locked:
            return self._refuse(Refusal.LOCKED)
        if not self.all_portfolios_assigned():
            return self._refuse(Refusal.INCOMPLETE_ALLOCATION)

        self.evaluated = True
        self.passed = formulas.is_majority(self._chamber, self._chosen)
        self.locked = True
        self.caretaker = not self.passed

        self._log.info(
            "Investiture {} for {} ({} seats)",
            "passed" if self.passed else "failed",
            ", ".join(self._chosen),
            formulas.coalition_seats(self._chamber, self._chosen),
        )
        return None

    def coalition_type(self) -> CoalitionType | None:
        if not self.evaluated:
            return None
        return formulas.classify(self._chamber, self._chosen, self.min_party_count, self.min_surplus)

    def proportionality(self) -> int | None:
        if not (self.evaluated and self._chosen):
            return None
        return proportionality_score(self._chamber, self._chosen, self._allocation)

    def snapshot(self) -> FormationSnapshot:
        members = self.members
        return FormationSnapshot(
            members=tuple(members),
            seats=formulas.coalition_seats(self._chamber, members),
            surplus=formulas.surplus(self._chamber, members),
            majority=formulas.is_majority(self._chamber, members),
            connected=formulas.is_connected(self._chamber, members),
            policy_spread=formulas.policy_spread(self._chamber, members),
            allocation=self.allocation,
            unassigned=tuple(self.unassigned_portfolios()),
            locked=self.locked,
            evaluated=self.evaluated,
            passed=self.passed,
            caretaker=self.caretaker,
            min_party_count=self.min_party_count,
            min_surplus=self.min_surplus,
            coalition_type=self.coalition_type(),
            proportionality=self.proportionality(),
        )
