"""
Bearer Token Providers - Supply the vault client with access tokens

Each provider returns a TokenResult instead of raising, so token sourcing
stays decoupled from client construction.
"""
from dataclasses import dataclass
from typing import Optional, Protocol
import logging

from skyflow.errors import SkyflowError
from skyflow.service_account import generate_bearer_token, is_expired

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenResult:
    """Either a bearer token or the reason one could not be produced"""
    token: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.token is not None and self.error is None

    @classmethod
    def success(cls, token: str) -> "TokenResult":
        return cls(token=token)

    @classmethod
    def failure(cls, error: str) -> "TokenResult":
        return cls(error=error)


class BearerTokenProvider(Protocol):
    def get_token(self) -> TokenResult:
        ...


class StaticTokenProvider:
    """Hands out a fixed, pre-issued JWT bearer token"""

    def __init__(self, token: str):
        self._token = token or ""

    def get_token(self) -> TokenResult:
        if not self._token:
            return TokenResult.failure("Vault bearer token not configured")
        return TokenResult.success(self._token)


class CredentialsFileTokenProvider:
    """
    Generates bearer tokens from a Skyflow service account credentials file

    The last token is reused until the SDK reports it expired.
    """

    def __init__(self, credentials_path: str):
        self.credentials_path = credentials_path
        self._token: Optional[str] = None

    def get_token(self) -> TokenResult:
        try:
            if self._token is None or is_expired(self._token):
                self._token, _ = generate_bearer_token(self.credentials_path)
                logger.info("Generated new vault bearer token from service account")
            return TokenResult.success(self._token)
        except SkyflowError as e:
            self._token = None
            logger.error(f"Bearer token generation failed: {e}")
            return TokenResult.failure(f"Bearer token generation failed: {e}")


def provider_from_settings(settings) -> BearerTokenProvider:
    """Pick the token source configured in settings"""
    if settings.VAULT_CREDENTIALS_PATH:
        return CredentialsFileTokenProvider(settings.VAULT_CREDENTIALS_PATH)
    return StaticTokenProvider(settings.VAULT_API_KEY)
