"""
GraphQL Router - mounts the schema on FastAPI
"""
from typing import Dict

from fastapi import Depends
from strawberry.fastapi import GraphQLRouter

from ..core.config import settings
from ..vault.skyflow_client import VaultClient, get_vault_client
from .schema import schema


async def get_context(vault: VaultClient = Depends(get_vault_client)) -> Dict:
    """Per-request context; the vault client is a shared singleton"""
    return {"vault": vault}


graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql" if settings.APP_ENV == "development" else None,
)
