"""
Pytest configuration and shared fixtures for metadata server tests.

Provides mock contract handles (MagicMock web3 contracts), a sample
allowlist table, isolated settings, and an httpx client over the ASGI app.
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from types import SimpleNamespace
from typing import AsyncGenerator
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from config import Settings
from services.allowlist_service import AllowlistTable

WEI = 10**18

OG_ROOT = "0x" + "0a" * 32
ADDICTS_ROOT = "0x" + "0b" * 32
OG_PROOF = ["0x" + "11" * 32, "0x" + "12" * 32]
ADDICTS_PROOF = ["0x" + "21" * 32]

OG_ONLY_ADDRESS = "0x" + "a1" * 20
BOTH_PHASES_ADDRESS = "0x" + "b2" * 20
ADDICTS_ONLY_ADDRESS = "0x" + "c3" * 20
UNLISTED_ADDRESS = "0x" + "d4" * 20
TBA_ADDRESS = "0x" + "Ee" * 20


# ── Mock Contracts ───────────────────────────────────────────────────


def make_contract(**views) -> MagicMock:
    """
    Build a MagicMock web3 contract.

    Each keyword maps a view function name to its return value; an
    Exception instance makes `.call()` raise it instead.
    """
    contract = MagicMock()
    for name, result in views.items():
        call = getattr(contract.functions, name).return_value.call
        if isinstance(result, Exception):
            call.side_effect = result
        else:
            call.return_value = result
    return contract


def make_client(staking_manager=None, nft_contract=None, latest_block=None) -> SimpleNamespace:
    """Stand-in for ChainClient exposing the two contract handles."""
    def _latest_block():
        if isinstance(latest_block, Exception):
            raise latest_block
        return latest_block if latest_block is not None else 1000

    return SimpleNamespace(
        staking_manager=staking_manager,
        nft_contract=nft_contract,
        latest_block=_latest_block,
    )


@pytest.fixture
def unconfigured_client() -> SimpleNamespace:
    """Chain client with neither contract address configured."""
    return make_client()


@pytest.fixture
def powered_up_client() -> SimpleNamespace:
    """Chain client for a Mythic, powered-up token with a TBA."""
    staking = make_contract(
        getAnimationStatus=(True, 75_000 * WEI + 123, 50_000 * WEI),
        getTBABoostTier=2,
        tokenBoundAccounts=TBA_ADDRESS,
    )
    nft = make_contract(getRarity=3)
    return make_client(staking_manager=staking, nft_contract=nft)


# ── Settings ─────────────────────────────────────────────────────────


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the process environment's .env file."""
    return Settings(
        _env_file=None,
        static_image_ipfs="ipfs://static/",
        animated_image_ipfs=None,
        animation_overlay_ipfs="ipfs://overlay.gif",
        external_url="https://example.xyz",
        royalty_recipient=None,
        staking_manager_address=None,
        nft_contract_address=None,
    )


# ── Allowlist ────────────────────────────────────────────────────────


@pytest.fixture
def allowlist_data() -> dict:
    return {
        "og": {
            "root": OG_ROOT,
            "proofs": {
                # stored mixed-case on purpose; lookups must still match
                OG_ONLY_ADDRESS.upper().replace("0X", "0x"): OG_PROOF,
                BOTH_PHASES_ADDRESS: OG_PROOF,
            },
        },
        "addicts": {
            "root": ADDICTS_ROOT,
            "proofs": {
                BOTH_PHASES_ADDRESS: ADDICTS_PROOF,
                ADDICTS_ONLY_ADDRESS: ADDICTS_PROOF,
            },
        },
    }


@pytest.fixture
def allowlist(allowlist_data) -> AllowlistTable:
    return AllowlistTable.from_dict(allowlist_data)


# ── API Client ───────────────────────────────────────────────────────


@pytest.fixture
def chain_client(unconfigured_client):
    """Chain client served by the app; override in a test module to change it."""
    return unconfigured_client


@pytest_asyncio.fixture(scope="function")
async def client(chain_client, test_settings, allowlist) -> AsyncGenerator[AsyncClient, None]:
    """httpx client over the FastAPI app with chain/allowlist/settings overridden."""
    from main import app
    from deps import get_allowlist, get_chain_client, get_settings

    app.dependency_overrides[get_chain_client] = lambda: chain_client
    app.dependency_overrides[get_allowlist] = lambda: allowlist
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
