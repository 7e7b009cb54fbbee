"""Chamber API response schemas."""

from pydantic import BaseModel


class PartyItem(BaseModel):
    """Party in the chamber."""

    id: str
    seats: int
    position: int


class ChamberResponse(BaseModel):
    """Chamber response."""

    parties: list[PartyItem]
    portfolios: list[str]
    total_seats: int
    majority_threshold: int


class CoalitionItem(BaseModel):
    """Minimal winning coalition."""

    parties: list[str]
    seats: int
    surplus: int
    least: bool
    connected: bool


class CoalitionsResponse(BaseModel):
    """Coalitions response."""

    quota: int
    min_party_count: int | None
    min_surplus: int | None
    items: list[CoalitionItem]
