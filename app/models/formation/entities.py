"""Formation domain entities - coalition labels, refusals and session snapshots."""

from dataclasses import dataclass, field
from enum import StrEnum

from app.models.common import BaseEntity


class CoalitionType(StrEnum):
    """Government type, in classification precedence order."""

    LEAST_MINIMAL_WINNING = "Least Minimal Winning Coalition (LMWC)"
    MINIMAL_WINNING = "Minimal Winning Coalition (MWC)"
    SURPLUS_MAJORITY = "Surplus Majority"
    NOT_A_GOVERNMENT = "Not a Government"


class Refusal(StrEnum):
    """Why a session refused a command. State is left unchanged."""

    INCOMPLETE_ALLOCATION = "incomplete-allocation"
    LOCKED = "session-locked"
    NO_MEMBERS = "no-members"
    NOT_A_MEMBER = "not-a-member"


REFUSAL_MESSAGES = {
    Refusal.INCOMPLETE_ALLOCATION: "Assign all cabinet portfolios to coalition members before evaluating.",
    Refusal.LOCKED: "The legislature has voted. Reset to start a new formation.",
    Refusal.NO_MEMBERS: "Select coalition members before assigning portfolios.",
    Refusal.NOT_A_MEMBER: "Portfolios can only go to coalition members.",
}


@dataclass(frozen=True)
class FormationSnapshot(BaseEntity):
    """Immutable view of a formation session."""

    members: tuple[str, ...]
    seats: int
    surplus: int
    majority: bool
    connected: bool
    policy_spread: int | None
    allocation: dict[str, list[str]] = field(default_factory=dict)
    unassigned: tuple[str, ...] = ()
    locked: bool = False
    evaluated: bool = False
    passed: bool | None = None
    caretaker: bool = False
    min_party_count: int | None = None
    min_surplus: int | None = None
    coalition_type: CoalitionType | None = None
    proportionality: int | None = None
