class ProviderError(Exception):
    """Base class for failures talking to a storage provider."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(ProviderError):
    """Raised when the provider session is missing, expired or rejected."""


class RateLimitError(ProviderError):
    """Raised when a provider rate limit is hit."""


class NotFoundError(ProviderError):
    """Raised when the requested file does not exist on the provider."""


class IntegrationError(ProviderError):
    """Raised when a provider API call fails or returns unusable data."""


class ProviderNotFoundError(Exception):
    """Raised when no provider is registered under the requested name."""
