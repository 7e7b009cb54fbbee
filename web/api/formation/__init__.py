"""Formation API."""

from web.api.formation.views import (
    evaluate,
    get_snapshot,
    new_session,
    reset_session,
    set_allocation,
    toggle_member,
)

__all__ = [
    "new_session",
    "get_snapshot",
    "reset_session",
    "toggle_member",
    "set_allocation",
    "evaluate",
]
