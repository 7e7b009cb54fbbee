"""Chamber domain entities - parties, portfolios and derived seat constants."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity, UnknownPartyError, UnknownPortfolioError

MIN_POSITION = -5
MAX_POSITION = 5


@dataclass(frozen=True)
class Party(BaseEntity):
    """Party (house) with its seat count and policy position."""

    id: str
    seats: int
    position: int

    def __post_init__(self):
        if self.seats <= 0:
            raise ValueError(f"Party {self.id!r} must hold at least one seat, got {self.seats}")
        if not MIN_POSITION <= self.position <= MAX_POSITION:
            raise ValueError(
                f"Party {self.id!r} position {self.position} outside [{MIN_POSITION}, {MAX_POSITION}]"
            )


@dataclass(frozen=True)
class Chamber(BaseEntity):
    """Ordered, immutable set of parties and cabinet portfolios."""

    parties: tuple[Party, ...]
    portfolios: tuple[str, ...]
    _index: dict[str, Party] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        index = {p.id: p for p in self.parties}
        if len(index) != len(self.parties):
            raise ValueError("Party ids must be unique")
        if len(set(self.portfolios)) != len(self.portfolios):
            raise ValueError("Portfolio names must be unique")
        object.__setattr__(self, "_index", index)

    @property
    def total_seats(self) -> int:
        return sum(p.seats for p in self.parties)

    @property
    def majority_threshold(self) -> int:
        """Smallest seat count strictly greater than half the chamber."""
        return self.total_seats // 2 + 1

    @property
    def party_ids(self) -> list[str]:
        return [p.id for p in self.parties]

    def party(self, party_id: str) -> Party:
        """Look up a party, failing fast on unknown ids."""
        try:
            return self._index[party_id]
        except KeyError:
            raise UnknownPartyError(party_id) from None

    def has_party(self, party_id: str) -> bool:
        return party_id in self._index

    def has_portfolio(self, name: str) -> bool:
        return name in self.portfolios

    def require_portfolio(self, name: str) -> str:
        if name not in self.portfolios:
            raise UnknownPortfolioError(name)
        return name

    def to_dict(self) -> dict:
        return {
            "parties": [p.to_dict() for p in self.parties],
            "portfolios": list(self.portfolios),
            "total_seats": self.total_seats,
            "majority_threshold": self.majority_threshold,
        }


@dataclass(frozen=True)
class WinningCoalition(BaseEntity):
    """Minimal winning coalition found by scanning the chamber."""

    parties: tuple[str, ...]
    seats: int
    surplus: int
    least: bool
    connected: bool
