"""
Domain Exceptions

Architectural Intent:
- Single root for errors raised by snowbridge itself
- Upstream failures are not raised; they travel as Outcome variants
"""

from typing import Optional


class SnowbridgeError(Exception):
    pass


class TransportFailure(SnowbridgeError):
    """The HTTP capability could not complete the exchange."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(SnowbridgeError, ValueError):
    pass
