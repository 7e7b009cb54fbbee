"""Chamber API views - thin layer over services."""

from app.container import container

from .schemas import (
    ChamberResponse,
    CoalitionItem,
    CoalitionsResponse,
    PartyItem,
)


def get_chamber() -> ChamberResponse:
    """Get parties, portfolios and seat constants."""
    container.init()
    chamber = container.chamber

    return ChamberResponse(
        parties=[PartyItem(id=p.id, seats=p.seats, position=p.position) for p in chamber.parties],
        portfolios=list(chamber.portfolios),
        total_seats=chamber.total_seats,
        majority_threshold=chamber.majority_threshold,
    )


def get_coalitions() -> CoalitionsResponse:
    """Get every minimal winning coalition in the chamber."""
    container.init()
    analytics = container.chamber_analytics
    min_party_count, min_surplus = analytics.thresholds()

    items = [
        CoalitionItem(
            parties=list(c.parties),
            seats=c.seats,
            surplus=c.surplus,
            least=c.least,
            connected=c.connected,
        )
        for c in analytics.coalitions()
    ]

    return CoalitionsResponse(
        quota=analytics.chamber.majority_threshold,
        min_party_count=min_party_count,
        min_surplus=min_surplus,
        items=items,
    )
