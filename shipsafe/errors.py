# shipsafe/errors.py
from typing import Optional


class ShipSafeError(Exception):
    """Base error carrying a client-facing message and an HTTP status."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ShipSafeError):
    """Bad or missing input. Raised before any network activity."""

    status_code = 400
    default_message = "Invalid URL format"


class UnreachableError(ShipSafeError):
    """The target could not be fetched with HEAD nor with GET."""

    status_code = 400
    default_message = "Could not reach the target URL"


class InternalError(ShipSafeError):
    status_code = 500
    default_message = "Failed to scan the target"
