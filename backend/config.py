"""
Configuration management for the CJSC V2 Metadata Server.

Loads settings from .env via pydantic-settings.

Every value is optional; unset contract addresses make the matching chain
reads fall back to their defaults without touching the RPC endpoint.
"""
import logging
import os
import re
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")

# Relative data paths resolve here, not against the working directory
BACKEND_DIR = os.path.dirname(os.path.abspath(__file__))


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── Chain (Base) ────────────────────────────────────────────────
    rpc_url: str = "https://sepolia.base.org"
    rpc_timeout_seconds: float = 10.0

    # ── Contracts ───────────────────────────────────────────────────
    staking_manager_address: Optional[str] = None
    nft_contract_address: Optional[str] = None

    # ── Artwork (IPFS) ──────────────────────────────────────────────
    static_image_ipfs: str = "ipfs://QmUBoa8gPCN3NhWj9txpCF5FwToUq1NMN3YZ7MBwkjzQwQ/"
    # Pre-rendered animated versions; when unset the overlay is used instead
    animated_image_ipfs: Optional[str] = None
    animation_overlay_ipfs: str = "ipfs://bafybeidngluwswiusroipprouoslpam2gtxcbryj54ljk7br3nsrrup2ke"

    # ── Collection ──────────────────────────────────────────────────
    external_url: str = "https://cryptojunkies.xyz"
    royalty_recipient: Optional[str] = None

    # ── Allowlist ───────────────────────────────────────────────────
    allowlist_proofs_file: str = "data/allowlist-proofs.json"

    # ── Application ─────────────────────────────────────────────────
    environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # allow unknown .env keys without crashing
        validate_default=True,
    )

    @field_validator("allowlist_proofs_file")
    @classmethod
    def _resolve_allowlist_path(cls, value: str) -> str:
        if os.path.isabs(value):
            return value
        return os.path.join(BACKEND_DIR, value)

    @property
    def configured_addresses(self) -> dict:
        """Address-valued settings keyed by their env var name (unset ones skipped)."""
        values = {
            "STAKING_MANAGER_ADDRESS": self.staking_manager_address,
            "NFT_CONTRACT_ADDRESS": self.nft_contract_address,
            "ROYALTY_RECIPIENT": self.royalty_recipient,
        }
        return {name: value for name, value in values.items() if value}

    def validate_production_settings(self):
        """
        Validate settings before the app starts serving.

        Malformed addresses always fail. Missing contracts fail in
        production and only warn elsewhere, since metadata then degrades
        to the "Common / Standard" defaults for every token.
        """
        for name, value in self.configured_addresses.items():
            if not _ADDRESS_RE.match(value):
                raise ValueError(f"{name} is not a valid address: {value!r}")

        missing = []
        if not self.staking_manager_address:
            missing.append("STAKING_MANAGER_ADDRESS")
        if not self.nft_contract_address:
            missing.append("NFT_CONTRACT_ADDRESS")
        if not self.royalty_recipient:
            missing.append("ROYALTY_RECIPIENT")

        if self.environment == "production":
            if missing:
                raise ValueError(
                    f"{', '.join(missing)} must be set in production."
                )
            logger.info("✅ Production settings validated")
        else:
            for name in missing:
                logger.warning(f"⚠️  {name} not set (using fallback values)")


# Global settings instance
settings = Settings()
