"""Per-request context: the selected provider and the caller's provider session."""

from fastapi import Depends, Header

from filecompanion.exceptions import AuthenticationError, ProviderNotFoundError
from filecompanion.models.common import ProviderUserSession
from filecompanion.providers.base import Provider
from filecompanion.providers.drive import Drive

PROVIDERS: dict[str, type[Provider]] = {
    Drive.name: Drive,
}


def get_provider(name: str) -> Provider:
    try:
        return PROVIDERS[name]()
    except KeyError:
        raise ProviderNotFoundError(f"Unknown provider: {name}") from None


class Companion:
    """Carries the provider client and session for one request."""

    def __init__(self, provider: Provider, provider_user_session: ProviderUserSession):
        self.provider = provider
        self.provider_user_session = provider_user_session


def get_provider_user_session(authorization: str | None = Header(default=None)) -> ProviderUserSession:
    """Read the provider access token from an 'Authorization: Bearer <token>' header."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Missing bearer token for the provider session.")
    return ProviderUserSession(access_token=token.strip())


def get_companion(
    provider_name: str,
    provider_user_session: ProviderUserSession = Depends(get_provider_user_session),
) -> Companion:
    return Companion(get_provider(provider_name), provider_user_session)
