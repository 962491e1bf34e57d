"""
Health Routes - Health check and service info endpoints
"""
from fastapi import APIRouter
from datetime import datetime
import logging

from ..models.responses import HealthResponse
from ..vault.skyflow_client import get_vault_client
from .. import __version__

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Report vault configuration and whether a bearer token can be produced

    No request is sent to the vault itself.
    """
    try:
        vault = get_vault_client()
        vault_info = {"status": "configured", **vault.describe()}
        token_health = vault.token_status()
    except Exception as e:
        logger.warning(f"Vault client unavailable: {e}")
        vault_info = {"status": "error", "error": str(e)}
        token_health = {"status": "unknown"}
    
    all_healthy = (
        vault_info.get("status") == "configured"
        and token_health.get("status") == "healthy"
    )
    
    return HealthResponse(
        status="healthy" if all_healthy else "degraded",
        timestamp=datetime.utcnow(),
        vault=vault_info,
        token_provider=token_health,
        version=__version__
    )


@router.get("/")
async def root():
    """
    Root endpoint
    """
    return {
        "name": "Vault GraphQL Gateway",
        "version": __version__,
        "description": "GraphQL proxy for Skyflow vault records, users and detokenization",
        "graphql": "/graphql"
    }
