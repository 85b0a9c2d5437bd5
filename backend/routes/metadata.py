"""
Token and collection metadata endpoints.

Token IDs are validated (1-500) before any chain read. Chain failures never
surface here (the services degrade to fallback values), so a 500 only
reflects an unexpected bug.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from chain_client import ChainClient
from config import Settings
from deps import get_chain_client, get_settings
from domain.constants import CACHE_ANIMATION, CACHE_CONTRACT, CACHE_METADATA
from domain.responses import ERROR_RESPONSES
from models import AnimationStatusResponse, ContractMetadata, NFTMetadata
from services import metadata_service
from utils.validators import validated_batch_ids, validated_token_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["metadata"])


# ── GET /metadata/batch ────────────────────────────────────────────
# Registered before /metadata/{token_id} so "batch" is not taken as an ID.

@router.get(
    "/metadata/batch",
    response_model=List[NFTMetadata],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_metadata_batch(
    response: Response,
    token_ids: List[int] = Depends(validated_batch_ids),
    client: ChainClient = Depends(get_chain_client),
    settings: Settings = Depends(get_settings),
):
    """Metadata for 1-50 tokens, in request order."""
    try:
        metadata = await metadata_service.build_metadata_batch(client, settings, token_ids)
    except Exception as e:
        logger.error(f"Error generating batch metadata: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate metadata")

    response.headers["Cache-Control"] = CACHE_METADATA
    return metadata


# ── GET /metadata/{token_id} ───────────────────────────────────────

@router.get(
    "/metadata/{token_id}",
    response_model=NFTMetadata,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_metadata(
    response: Response,
    token_id: int = Depends(validated_token_id),
    client: ChainClient = Depends(get_chain_client),
    settings: Settings = Depends(get_settings),
):
    """Token metadata (tokenURI target)."""
    try:
        metadata = await metadata_service.build_metadata(client, settings, token_id)
    except Exception as e:
        logger.error(f"Error generating metadata for token {token_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate metadata")

    # Balance can change; keep short
    response.headers["Cache-Control"] = CACHE_METADATA
    return metadata


# ── GET /animation/{token_id} ──────────────────────────────────────

@router.get(
    "/animation/{token_id}",
    response_model=AnimationStatusResponse,
    responses=ERROR_RESPONSES,
)
async def get_animation_status(
    response: Response,
    token_id: int = Depends(validated_token_id),
    client: ChainClient = Depends(get_chain_client),
):
    """Lightweight powered-up status and progress toward the threshold."""
    try:
        status_info = await metadata_service.build_animation_status(client, token_id)
    except Exception as e:
        logger.error(f"Error checking animation status for token {token_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to check animation status")

    response.headers["Cache-Control"] = CACHE_ANIMATION
    return status_info


# ── GET /contract ──────────────────────────────────────────────────

@router.get("/contract", response_model=ContractMetadata)
async def get_contract_metadata(
    response: Response,
    settings: Settings = Depends(get_settings),
):
    """Collection-level metadata (contractURI target)."""
    response.headers["Cache-Control"] = CACHE_CONTRACT
    return metadata_service.build_contract_metadata(settings)
