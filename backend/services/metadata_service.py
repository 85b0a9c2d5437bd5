"""
Metadata Service — assembles marketplace (OpenSea-style) metadata documents.

Token metadata is rebuilt on every request from four chain reads:
animation status, rarity, boost tier and token-bound account. The reads are
independent, so they are issued together and joined before assembly.

Image selection for powered-up tokens:
    ANIMATED_IMAGE_IPFS set   → image = animation_url = {base}{id}.gif
    ANIMATED_IMAGE_IPFS unset → static image + shared overlay as animation_url
"""
import asyncio
import logging
from typing import Any, List

from chain_client import ChainClient
from config import Settings
from domain.constants import (
    BACKGROUND_POWERED_UP,
    BACKGROUND_STANDARD,
    BALANCE_UNIT,
    COLLECTION_DESCRIPTION,
    COLLECTION_NAME,
    POWERED_UP_SUFFIX,
    ROYALTY_BASIS_POINTS,
    STATUS_POWERED_UP,
    STATUS_STANDARD,
    ZERO_ADDRESS,
)
from services import chain_reader
from services.formatting import animation_progress, format_balance, rarity_name

logger = logging.getLogger(__name__)


def _image_urls(settings: Settings, token_id: int, is_animated: bool) -> tuple[str, str | None]:
    """Return (image, animation_url) for a token."""
    static_image = f"{settings.static_image_ipfs}{token_id}.jpg"
    if not is_animated:
        return static_image, None

    if settings.animated_image_ipfs:
        animated_image = f"{settings.animated_image_ipfs}{token_id}.gif"
        return animated_image, animated_image

    return static_image, settings.animation_overlay_ipfs


async def build_metadata(client: ChainClient, settings: Settings, token_id: int) -> dict[str, Any]:
    """
    Build the metadata document for one token.

    Never fails on chain errors: each read already degrades to its fallback.
    `animation_url` is present only for powered-up tokens.
    """
    animation, rarity, boost_tier, tba_address = await asyncio.gather(
        chain_reader.get_animation_status(client, token_id),
        chain_reader.get_rarity(client, token_id),
        chain_reader.get_boost_tier(client, token_id),
        chain_reader.get_tba_address(client, token_id),
    )

    is_animated = animation.is_animated
    image, animation_url = _image_urls(settings, token_id, is_animated)

    attributes: List[dict[str, Any]] = [
        {"trait_type": "Rarity", "value": rarity_name(rarity)},
        {
            "trait_type": "TBA Balance",
            "value": f"{format_balance(animation.balance)} {BALANCE_UNIT}",
            "display_type": "number",
        },
        {"trait_type": "Boost Tier", "value": boost_tier},
        {"trait_type": "Status", "value": STATUS_POWERED_UP if is_animated else STATUS_STANDARD},
        {
            "trait_type": "Animation Threshold",
            "value": f"{format_balance(animation.threshold)} {BALANCE_UNIT}",
        },
    ]
    if tba_address:
        attributes.append({"trait_type": "Token Bound Account", "value": tba_address})

    metadata: dict[str, Any] = {
        "name": f"{COLLECTION_NAME} #{token_id}",
        "description": COLLECTION_DESCRIPTION + (POWERED_UP_SUFFIX if is_animated else ""),
        "image": image,
        "external_url": f"{settings.external_url}/nft/{token_id}",
        "attributes": attributes,
        "background_color": BACKGROUND_POWERED_UP if is_animated else BACKGROUND_STANDARD,
    }
    if animation_url:
        metadata["animation_url"] = animation_url

    return metadata


async def build_metadata_batch(
    client: ChainClient, settings: Settings, token_ids: List[int]
) -> List[dict[str, Any]]:
    """Build metadata for several tokens; order follows `token_ids`, any failure fails all."""
    logger.info(f"Building batch metadata for {len(token_ids)} tokens")
    return list(await asyncio.gather(
        *(build_metadata(client, settings, token_id) for token_id in token_ids)
    ))


async def build_animation_status(client: ChainClient, token_id: int) -> dict[str, Any]:
    """Lightweight powered-up check with progress toward the threshold."""
    animation = await chain_reader.get_animation_status(client, token_id)
    return {
        "tokenId": token_id,
        "isAnimated": animation.is_animated,
        "balance": format_balance(animation.balance),
        "threshold": format_balance(animation.threshold),
        "progress": animation_progress(animation.balance, animation.threshold),
    }


def build_contract_metadata(settings: Settings) -> dict[str, Any]:
    """Collection-level metadata; depends only on configuration."""
    return {
        "name": COLLECTION_NAME,
        "description": COLLECTION_DESCRIPTION,
        "image": f"{settings.static_image_ipfs}collection.png",
        "external_link": settings.external_url,
        "seller_fee_basis_points": ROYALTY_BASIS_POINTS,
        "fee_recipient": settings.royalty_recipient or ZERO_ADDRESS,
    }
