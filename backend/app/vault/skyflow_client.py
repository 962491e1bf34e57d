"""
Skyflow Vault Client - Shared handle around the Skyflow Python SDK
The SDK is blocking, so every call is pushed onto a worker thread
"""
import asyncio
from typing import Dict, Optional
import logging

from skyflow.errors import SkyflowError
from skyflow.vault import Client, Configuration, GetOptions, InsertOptions

from ..core.config import settings
from ..core.exceptions import AuthenticationException, GatewayException, VaultException
from .token_provider import BearerTokenProvider, provider_from_settings

logger = logging.getLogger(__name__)


class VaultClient:
    """
    Async facade over skyflow.vault.Client

    Features:
    - Built once at startup, read-only afterwards
    - Injectable bearer token provider
    - SDK errors normalized to VaultException
    """

    def __init__(
        self,
        vault_id: str = None,
        vault_url: str = None,
        token_provider: Optional[BearerTokenProvider] = None,
    ):
        """
        Initialize the Skyflow client

        Args:
            vault_id: Skyflow vault ID (defaults to env variable)
            vault_url: Skyflow vault URL (defaults to env variable)
            token_provider: Bearer token source (defaults to settings)
        """
        self.vault_id = vault_id or settings.VAULT_ID
        self.vault_url = vault_url or settings.VAULT_URL
        self.token_provider = token_provider or provider_from_settings(settings)

        if not self.vault_id or not self.vault_url:
            raise VaultException("Vault ID and vault URL must be configured")

        provider = self.token_provider

        # The SDK only accepts a plain function here
        def bearer_token() -> str:
            result = provider.get_token()
            if not result.ok:
                raise AuthenticationException(result.error or "No bearer token available")
            return result.token

        self.client = Client(Configuration(self.vault_id, self.vault_url, bearer_token))

        logger.info(f"Vault client initialized for {self.vault_url}")

    async def get(self, payload: Dict, tokens: bool = False) -> Dict:
        """
        Bulk-get records by id

        Args:
            payload: {"records": [{"ids", "table", "redaction"?}]}
            tokens: Return tokens instead of values

        Returns:
            SDK response dict with a "records" list
        """
        return await self._call(self.client.get, payload, options=GetOptions(tokens))

    async def detokenize(self, payload: Dict) -> Dict:
        """Resolve {"records": [{"token"}]} back to values"""
        # The SDK raises instead of sending an empty batch
        if not payload.get("records"):
            return {"records": []}
        return await self._call(self.client.detokenize, payload)

    async def insert(self, payload: Dict, tokens: bool = True) -> Dict:
        """Insert {"records": [{"table", "fields"}]} and return tokens for the new rows"""
        return await self._call(self.client.insert, payload, options=InsertOptions(tokens))

    async def _call(self, func, payload: Dict, **kwargs) -> Dict:
        try:
            return await asyncio.to_thread(func, payload, **kwargs)
        except SkyflowError as e:
            raise VaultException(getattr(e, "message", str(e)), vault_code=getattr(e, "code", None)) from e
        except GatewayException:
            raise
        except Exception as e:
            raise VaultException(str(e)) from e

    def token_status(self) -> Dict:
        """Check whether the provider can currently produce a token"""
        result = self.token_provider.get_token()
        if result.ok:
            return {'status': 'healthy', 'provider': type(self.token_provider).__name__}
        return {
            'status': 'unhealthy',
            'provider': type(self.token_provider).__name__,
            'error': result.error,
        }

    def describe(self) -> Dict:
        """
        Get vault configuration info (for the health route)

        Returns:
            Non-secret vault info dict
        """
        return {
            'vault_id': self.vault_id,
            'vault_url': self.vault_url,
            'token_provider': type(self.token_provider).__name__,
        }


# Singleton instance
_vault_client = None


def get_vault_client() -> VaultClient:
    """Get the singleton vault client instance"""
    global _vault_client
    if _vault_client is None:
        _vault_client = VaultClient()
    return _vault_client
