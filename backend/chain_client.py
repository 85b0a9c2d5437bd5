"""
Web3 client and read-only contract handles for the staking manager and NFT.

Constructed once at startup (see main.lifespan) and shared read-only across
requests.
"""
import logging
from typing import Optional

from web3 import Web3
from web3.contract import Contract

from config import Settings

logger = logging.getLogger(__name__)


def _view(name: str, outputs: list, inputs: Optional[list] = None) -> dict:
    return {
        "type": "function",
        "name": name,
        "stateMutability": "view",
        "inputs": inputs if inputs is not None else [{"name": "tokenId", "type": "uint256"}],
        "outputs": outputs,
    }


STAKING_MANAGER_ABI = [
    _view("getAnimationStatus", [
        {"name": "isAnimated", "type": "bool"},
        {"name": "balance", "type": "uint256"},
        {"name": "threshold", "type": "uint256"},
    ]),
    _view("getTBABalance", [{"name": "", "type": "uint256"}]),
    _view("getTBABoostTier", [{"name": "", "type": "uint256"}]),
    _view("tokenBoundAccounts", [{"name": "", "type": "address"}]),
]

NFT_ABI = [
    _view("getRarity", [{"name": "", "type": "uint8"}]),
    _view("ownerOf", [{"name": "", "type": "address"}]),
    _view("totalSupply", [{"name": "", "type": "uint256"}], inputs=[]),
]


class ChainClient:
    """Holds the Web3 provider plus the two contract handles (None when unconfigured)."""

    def __init__(
        self,
        rpc_url: str,
        staking_manager_address: Optional[str] = None,
        nft_contract_address: Optional[str] = None,
        timeout: float = 10.0,
    ):
        self.w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout}))
        self.staking_manager = self._contract(staking_manager_address, STAKING_MANAGER_ABI)
        self.nft_contract = self._contract(nft_contract_address, NFT_ABI)
        logger.info(
            f"Chain client ready ({rpc_url}) — "
            f"staking manager: {staking_manager_address or 'NOT SET'}, "
            f"NFT contract: {nft_contract_address or 'NOT SET'}"
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChainClient":
        return cls(
            rpc_url=settings.rpc_url,
            staking_manager_address=settings.staking_manager_address,
            nft_contract_address=settings.nft_contract_address,
            timeout=settings.rpc_timeout_seconds,
        )

    def _contract(self, address: Optional[str], abi: list) -> Optional[Contract]:
        if not address:
            return None
        return self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)

    def latest_block(self) -> int:
        """Current block number; raises if the RPC endpoint is unreachable."""
        return self.w3.eth.block_number
