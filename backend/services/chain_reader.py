"""
Chain Reader — the four contract view calls behind a token's metadata.

Every read is fault-isolated: the raw call yields a ReadResult (value or
error), and each public accessor collapses it to a fixed fallback. A
failing or unconfigured contract therefore degrades the metadata to
"Common / Standard" defaults instead of failing the response.

Fallbacks:
    getAnimationStatus  → (False, 0, 50000e18)
    getRarity           → 0 (Common)
    getTBABoostTier     → 0
    tokenBoundAccounts  → None (also for the zero address)
"""
import logging
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from chain_client import ChainClient
from domain.constants import DEFAULT_ANIMATION_THRESHOLD, ZERO_ADDRESS
from exceptions import ChainReadError, ContractNotConfiguredError
from services.async_executor import run_blocking

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ReadResult(Generic[T]):
    """Outcome of a single view call."""
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, fallback: T) -> T:
        return self.value if self.ok else fallback


@dataclass(frozen=True)
class AnimationStatus:
    is_animated: bool
    balance: int
    threshold: int


FALLBACK_ANIMATION_STATUS = AnimationStatus(
    is_animated=False,
    balance=0,
    threshold=DEFAULT_ANIMATION_THRESHOLD,
)


def _call_view(contract: Any, function_name: str, token_id: int) -> Any:
    return getattr(contract.functions, function_name)(token_id).call()


async def read_view(contract: Any, function_name: str, token_id: int) -> ReadResult:
    """Invoke `function_name(token_id)` on `contract` without ever raising."""
    if contract is None:
        logger.debug(f"Skipping {function_name}({token_id}): contract not configured")
        return ReadResult(error=ContractNotConfiguredError(function_name))

    try:
        value = await run_blocking(_call_view, contract, function_name, token_id)
    except Exception as e:
        error = ChainReadError(function_name, token_id, e)
        logger.warning(f"Error fetching {function_name} for token {token_id}: {e}")
        return ReadResult(error=error)

    return ReadResult(value=value)


async def get_animation_status(client: ChainClient, token_id: int) -> AnimationStatus:
    result = await read_view(client.staking_manager, "getAnimationStatus", token_id)
    if not result.ok:
        return FALLBACK_ANIMATION_STATUS

    is_animated, balance, threshold = result.value
    return AnimationStatus(
        is_animated=bool(is_animated),
        balance=int(balance),
        threshold=int(threshold),
    )


async def get_rarity(client: ChainClient, token_id: int) -> int:
    result = await read_view(client.nft_contract, "getRarity", token_id)
    return int(result.value_or(0))


async def get_boost_tier(client: ChainClient, token_id: int) -> int:
    result = await read_view(client.staking_manager, "getTBABoostTier", token_id)
    return int(result.value_or(0))


async def get_tba_address(client: ChainClient, token_id: int) -> Optional[str]:
    result = await read_view(client.staking_manager, "tokenBoundAccounts", token_id)
    address = result.value_or(None)
    if not address or address.lower() == ZERO_ADDRESS:
        return None
    return address
