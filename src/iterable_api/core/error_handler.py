"""Error types for the Iterable API client.

Construction-time validation errors live here. Transport and API errors are
the ``requests`` exceptions themselves and are never wrapped.
"""


class IterableError(Exception):
    """Base exception class for the Iterable API client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(IterableError):
    """Error raised when client configuration is missing or invalid."""
    pass
