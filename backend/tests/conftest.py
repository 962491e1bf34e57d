"""
Shared test fixtures for the Vault Gateway test suite.

The Skyflow SDK is never reached: resolvers get a fake vault client through
the GraphQL context, HTTP tests override the FastAPI dependency.
"""

import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time
os.environ.setdefault("VAULT_ID", "test-vault-id")
os.environ.setdefault("VAULT_URL", "https://test.vault.skyflowapis.com")
os.environ.setdefault("VAULT_API_KEY", "test-api-key")
os.environ["RATE_LIMIT_ENABLED"] = "false"

# Add backend source directory to path so imports resolve
BACKEND_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(BACKEND_DIR))

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport  # noqa: E402

from app.vault.skyflow_client import VaultClient  # noqa: E402


@pytest.fixture
def fake_vault():
    """VaultClient stand-in with async get/detokenize/insert returning empty results."""
    vault = MagicMock(spec=VaultClient)
    vault.get = AsyncMock(return_value={"records": []})
    vault.detokenize = AsyncMock(return_value={"records": []})
    vault.insert = AsyncMock(return_value={"records": []})
    return vault


@pytest.fixture
def context(fake_vault):
    """GraphQL context as built by the FastAPI router."""
    return {"vault": fake_vault}


@pytest_asyncio.fixture
async def test_client(fake_vault):
    """Async HTTP client wrapping the FastAPI app, vault dependency overridden."""
    import main
    from app.vault.skyflow_client import get_vault_client

    main.app.dependency_overrides[get_vault_client] = lambda: fake_vault

    transport = ASGITransport(app=main.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    main.app.dependency_overrides.clear()
