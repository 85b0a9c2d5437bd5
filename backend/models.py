"""
Pydantic models for response validation and OpenAPI docs.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional, Union


# ── Token Metadata ──────────────────────────────────────────────────

class NFTAttribute(BaseModel):
    """Marketplace trait; display_type is omitted unless set."""
    trait_type: str
    value: Union[int, str]
    display_type: Optional[str] = None


class NFTMetadata(BaseModel):
    """OpenSea-compatible token metadata (animation_url only when powered up)."""
    name: str
    description: str
    image: str
    animation_url: Optional[str] = None
    external_url: str
    attributes: List[NFTAttribute]
    background_color: str


class AnimationStatusResponse(BaseModel):
    """Powered-up status with whole-token balances and integer progress percent."""
    model_config = ConfigDict(populate_by_name=True)

    token_id: int = Field(..., alias="tokenId")
    is_animated: bool = Field(..., alias="isAnimated")
    balance: str
    threshold: str
    progress: int


# ── Collection Metadata ─────────────────────────────────────────────

class ContractMetadata(BaseModel):
    """Collection-level metadata (OpenSea contractURI)."""
    name: str
    description: str
    image: str
    external_link: str
    seller_fee_basis_points: int = Field(..., description="Royalty in basis points (500 = 5%)")
    fee_recipient: str


# ── Allowlist ───────────────────────────────────────────────────────

class PhaseProof(BaseModel):
    eligible: bool
    proof: Optional[List[str]] = None
    root: Optional[str] = None


class AllowlistProofResponse(BaseModel):
    """Merkle proofs per phase; every address is eligible for PUBLIC."""
    model_config = ConfigDict(populate_by_name=True)

    address: str
    og: PhaseProof
    addicts: PhaseProof
    eligible_phases: List[str] = Field(..., alias="eligiblePhases")


# ── Service Info ────────────────────────────────────────────────────

class ServiceInfoResponse(BaseModel):
    status: str
    service: str
    version: str
    endpoints: Dict[str, str]
    contracts: Dict[str, str]
