"""Common models - base classes and errors."""

from app.models.common.base import BaseEntity
from app.models.common.errors import NotFoundError, UnknownPartyError, UnknownPortfolioError

__all__ = [
    "BaseEntity",
    "NotFoundError",
    "UnknownPartyError",
    "UnknownPortfolioError",
]
