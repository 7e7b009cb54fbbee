"""Chamber API."""

from web.api.chamber.views import get_chamber, get_coalitions

__all__ = [
    "get_chamber",
    "get_coalitions",
]
