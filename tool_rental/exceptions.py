"""
Custom exception classes for the Tool Rental web app.

Services raise these; the app factory registers handlers that turn them
into responses (500 for store failures, 404 for missing records) and the
form views catch ValidationError to flash a message instead.
"""


class RentalError(Exception):
    """Base class for all application errors."""

    default_message = "Error: request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class StoreError(RentalError):
    """Raised when the underlying persistence operation fails."""

    default_message = "Database error"


class NotFound(RentalError):
    """Raised when a referenced tool (or rental) does not exist."""

    default_message = "Error: tool not found"


class ValidationError(RentalError):
    """Raised for unusable input: blank names, bad rates or dates."""

    default_message = "Error: invalid input"
