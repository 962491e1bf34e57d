"""
Vault GraphQL Gateway
=====================

GraphQL proxy in front of a Skyflow tokenization vault.

This is the main entry point for the FastAPI application.
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
import logging
import sys

from app.core.config import settings
from app.graphql import graphql_router
from app.models.responses import ErrorResponse
from app.routes import health_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)

# Rate limiter, applied to every route through the middleware
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"],
    enabled=settings.RATE_LIMIT_ENABLED,
)

# Create FastAPI app
app = FastAPI(
    title="Vault GraphQL Gateway",
    description="""
**Vault GraphQL Gateway** - GraphQL access to a Skyflow vault

## Queries

- `getRecords(table, ids, tokensBool)` — fetch records by skyflow_id, plain text unless `tokensBool`
- `getUsers(ids, tokensBool)` — same, against the users table
- `detokenize(tokens)` — resolve tokens to values

## Mutations

- `insertRecord(name, fields)` — insert a JSON object into table `name`, returns tokens

Failed vault calls resolve to `null` and are logged.
    """,
    version="1.0.0",
    docs_url="/docs" if settings.APP_ENV == "development" else None,
    redoc_url="/redoc" if settings.APP_ENV == "development" else None,
)

# Rate limiter state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            code=str(getattr(exc, "code", "INTERNAL_ERROR")),
            detail=str(exc) if settings.APP_ENV == "development" else None,
        ).model_dump()
    )


# Include routers
app.include_router(health_router)
app.include_router(graphql_router, prefix="/graphql")


# Startup event
@app.on_event("startup")
async def startup_event():
    logger.info("[STARTUP] Initializing Vault GraphQL Gateway...")

    # Build the shared vault client once
    try:
        from app.vault.skyflow_client import get_vault_client
        vault = get_vault_client()
        logger.info(f"[OK] Skyflow vault client ready: {vault.vault_url}")
        token_health = vault.token_status()
        if token_health["status"] != "healthy":
            logger.warning(f"[WARN] Bearer token unavailable: {token_health.get('error')}")
    except Exception as e:
        logger.warning(f"[WARN] Vault client not available: {e}")

    logger.info(f"[READY] Vault GraphQL Gateway running on :{settings.PORT}/graphql ({settings.APP_ENV})")


# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    logger.info("[SHUTDOWN] Vault GraphQL Gateway shutting down...")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.APP_ENV == "development"
    )
