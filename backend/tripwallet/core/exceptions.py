"""
Domain exceptions raised by the service layer.
"""


class TripWalletError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateIdError(TripWalletError):
    """An entry identifier is already in use for this owner."""

    def __init__(self, entry_id: str):
        super().__init__(f"Entry id '{entry_id}' already exists")
        self.entry_id = entry_id


class NotFoundError(TripWalletError):
    """The referenced owner does not exist."""


class PlannerInputError(TripWalletError):
    """Planner percentages or ride counts are out of range."""
