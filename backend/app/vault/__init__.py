# Vault module — Skyflow client, bearer token providers, audit trail
from .skyflow_client import VaultClient, get_vault_client
from .token_provider import (
    TokenResult,
    BearerTokenProvider,
    StaticTokenProvider,
    CredentialsFileTokenProvider,
    provider_from_settings,
)
from .audit import AuditLogger, get_audit_logger
