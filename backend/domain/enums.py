"""
Domain enums (minimal set used for clarity in services).
"""

from enum import Enum


class AllowlistPhase(str, Enum):
    """Mint phases backed by a Merkle allowlist, keyed as in the proofs file."""
    OG = "og"
    ADDICTS = "addicts"

    @property
    def label(self) -> str:
        return self.name


PUBLIC_PHASE_LABEL = "PUBLIC"
