"""
CJSC V2 Metadata Server — FastAPI Application

Serves token metadata assembled from on-chain staking/NFT state,
collection metadata, and allowlist Merkle proofs.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi import HTTPException
from fastapi.responses import JSONResponse

from chain_client import ChainClient
from config import settings
from domain.constants import SERVICE_NAME, SERVICE_VERSION
from domain.responses import error_content
from routes import health, metadata, proof
from services.allowlist_service import AllowlistTable

# ── Logging ─────────────────────────────────────────────────────────

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan ────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: validate settings, build chain client, load allowlist. Shutdown: stop executor."""
    settings.validate_production_settings()

    app.state.chain_client = ChainClient.from_settings(settings)
    app.state.allowlist = AllowlistTable.from_file(settings.allowlist_proofs_file)
    logger.info(f"🚀 {SERVICE_NAME} started ({settings.environment})")

    yield  # app runs here

    from services.async_executor import shutdown_executor
    shutdown_executor()

    logger.info("Shutting down")


# ── App Factory ─────────────────────────────────────────────────────

app = FastAPI(
    title=SERVICE_NAME,
    description="Dynamic NFT metadata for CryptoJunkieSocialClub V2 on Base",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)

# ── Routes ──────────────────────────────────────────────────────────

app.include_router(health.router)
app.include_router(metadata.router)
app.include_router(proof.router)

# Same handlers under /api for the per-route (serverless) URL layout
app.include_router(metadata.router, prefix="/api")
app.include_router(proof.router, prefix="/api")


# ── Exception Handlers ──────────────────────────────────────────────


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """
    Catch-all for unhandled exceptions.

    Never return raw exception details to clients; the full traceback is
    logged server-side.
    """
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=error_content("internal_server_error", "Internal server error"),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc: HTTPException):
    """
    Standardize HTTPException responses for API consumers.

    Keeps the original HTTP status code, but wraps the payload.
    """
    # DomainError carries structured error info
    if hasattr(exc, "message") and hasattr(exc, "details"):
        error_code = exc.__class__.__name__.replace("Error", "").lower()
        return JSONResponse(
            status_code=exc.status_code,
            content=error_content(error_code, exc.message, exc.details),
        )

    # Regular HTTPException
    detail = exc.detail
    message = detail if isinstance(detail, str) else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_content(
            "http_error",
            message,
            detail if not isinstance(detail, str) else None,
        ),
        headers=getattr(exc, "headers", None),
    )


# ── Entrypoint ──────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn
    import os
    port = int(os.environ.get("PORT", 3001))
    uvicorn.run(app, host="0.0.0.0", port=port, log_level="info")
