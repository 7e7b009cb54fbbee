"""Domain errors for contract violations."""


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class UnknownPartyError(NotFoundError):
    """Party id is not part of the chamber."""

    def __init__(self, party_id: str):
        self.party_id = party_id
        super().__init__(f"Unknown party: {party_id!r}")


class UnknownPortfolioError(NotFoundError):
    """Portfolio name is not part of the chamber."""

    def __init__(self, portfolio: str):
        self.portfolio = portfolio
        super().__init__(f"Unknown portfolio: {portfolio!r}")
