"""Formation API response schemas."""

from pydantic import BaseModel

from app.models.formation import CoalitionType, Refusal


class SessionSnapshot(BaseModel):
    """State of a formation session after a command."""

    members: list[str]
    seats: int
    surplus: int
    majority: bool
    connected: bool
    policy_spread: int | None = None
    allocation: dict[str, list[str]]
    unassigned: list[str]
    locked: bool
    evaluated: bool
    passed: bool | None = None
    caretaker: bool
    min_party_count: int | None = None
    min_surplus: int | None = None
    coalition_type: CoalitionType | None = None
    proportionality: int | None = None


class ValidationFailure(BaseModel):
    """Command refused; the session is unchanged."""

    reason: Refusal
    message: str
