"""
Service info and health check endpoints.
"""
from datetime import datetime, timezone
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from chain_client import ChainClient
from config import Settings
from deps import get_chain_client, get_settings
from domain.constants import SERVICE_NAME, SERVICE_VERSION
from models import ServiceInfoResponse
from services.async_executor import run_blocking

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/", response_model=ServiceInfoResponse)
async def service_info(settings: Settings = Depends(get_settings)):
    """Service info — endpoints and which contracts are configured."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "endpoints": {
            "metadata": "/metadata/:tokenId",
            "batch": "/metadata/batch?ids=",
            "animation": "/animation/:tokenId",
            "contract": "/contract",
            "proof": "/proof/:address",
        },
        "contracts": {
            "stakingManager": settings.staking_manager_address or "not configured",
            "nftContract": settings.nft_contract_address or "not configured",
        },
    }


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check(client: ChainClient = Depends(get_chain_client)):
    """Health check — verifies RPC node connectivity."""
    try:
        block = await run_blocking(client.latest_block)
        return {
            "status": "healthy",
            "chain_connected": True,
            "latest_block": block,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "chain_connected": False,
                "error": "RPC endpoint unreachable",
            },
        )
