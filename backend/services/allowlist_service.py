"""
Allowlist Service — Merkle proof lookup for the OG and Addicts mint phases.

Proofs are precomputed off-line and shipped as a static JSON file:

    {
      "og":      {"root": "0x…", "proofs": {"0xabc…": ["0x…", …], …}},
      "addicts": {"root": "0x…", "proofs": {…}}
    }

The table is loaded once at startup and never mutated. This service only
returns stored proofs; verification against the root happens on-chain.
"""
import json
import logging
import os
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from domain.enums import PUBLIC_PHASE_LABEL, AllowlistPhase
from utils.validators import validate_eth_address

logger = logging.getLogger(__name__)


class AllowlistTable:
    """Immutable per-phase proof tables plus their Merkle roots."""

    def __init__(
        self,
        roots: Mapping[AllowlistPhase, Optional[str]],
        proofs: Mapping[AllowlistPhase, Mapping[str, Tuple[str, ...]]],
    ):
        self._roots = MappingProxyType(dict(roots))
        self._proofs = MappingProxyType({
            phase: MappingProxyType(dict(entries)) for phase, entries in proofs.items()
        })

    @classmethod
    def empty(cls) -> "AllowlistTable":
        return cls(
            roots={phase: None for phase in AllowlistPhase},
            proofs={phase: {} for phase in AllowlistPhase},
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AllowlistTable":
        """
        Build a table from the proofs-file structure.

        Address keys are lowercased so lookups are case-insensitive.

        Raises:
            ValueError if a phase section or its proofs mapping is malformed
        """
        roots = {}
        proofs = {}
        for phase in AllowlistPhase:
            section = data.get(phase.value)
            if not isinstance(section, Mapping):
                raise ValueError(f"Allowlist data missing '{phase.value}' section")

            entries = section.get("proofs", {})
            if not isinstance(entries, Mapping):
                raise ValueError(f"Allowlist '{phase.value}.proofs' must be an object")

            roots[phase] = section.get("root")
            proofs[phase] = {
                address.lower(): tuple(proof) for address, proof in entries.items()
            }
            logger.info(f"Allowlist phase '{phase.value}': {len(proofs[phase])} addresses")

        return cls(roots=roots, proofs=proofs)

    @classmethod
    def from_file(cls, path: str) -> "AllowlistTable":
        """Load the proofs file; a missing file yields an empty (public-only) table."""
        if not os.path.exists(path):
            logger.warning(f"Allowlist proofs file not found: {path} — every address is PUBLIC only")
            return cls.empty()

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        logger.info(f"Loaded allowlist proofs from {path}")
        return cls.from_dict(data)

    def root(self, phase: AllowlistPhase) -> Optional[str]:
        return self._roots.get(phase)

    def proof(self, phase: AllowlistPhase, address: str) -> Optional[Tuple[str, ...]]:
        return self._proofs.get(phase, {}).get(address.lower())

    def lookup(self, address: str) -> dict[str, Any]:
        """
        Report eligibility and proof for every allowlist phase.

        Args:
            address: 0x-prefixed, 40 hex digit address (any case)

        Returns:
            {address, og: {eligible, proof, root}, addicts: {…}, eligiblePhases}

        Raises:
            ValidationError if the address format is invalid
        """
        normalized = validate_eth_address(address).lower()

        response: dict[str, Any] = {"address": normalized}
        eligible_phases = []
        for phase in AllowlistPhase:
            proof = self.proof(phase, normalized)
            eligible = proof is not None
            response[phase.value] = {
                "eligible": eligible,
                "proof": list(proof) if eligible else None,
                "root": self.root(phase),
            }
            if eligible:
                eligible_phases.append(phase.label)

        eligible_phases.append(PUBLIC_PHASE_LABEL)
        response["eligiblePhases"] = eligible_phases
        return response
