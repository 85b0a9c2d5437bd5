"""
Allowlist proof endpoint.

Returns precomputed Merkle proofs for the OG and Addicts phases; the mint
contract verifies them against the roots.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from deps import get_allowlist
from domain.constants import CACHE_PROOF
from domain.responses import ERROR_RESPONSES
from models import AllowlistProofResponse
from services.allowlist_service import AllowlistTable
from utils.validators import validated_address

logger = logging.getLogger(__name__)

router = APIRouter(tags=["allowlist"])


@router.get(
    "/proof/{address}",
    response_model=AllowlistProofResponse,
    responses=ERROR_RESPONSES,
)
async def get_proof(
    response: Response,
    address: str = Depends(validated_address),
    allowlist: AllowlistTable = Depends(get_allowlist),
):
    """Allowlist eligibility and proofs for a wallet address."""
    try:
        result = allowlist.lookup(address)
    except Exception as e:
        logger.error(f"Error fetching proof for {address}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch proof")

    # Proofs don't change often
    response.headers["Cache-Control"] = CACHE_PROOF
    return result
