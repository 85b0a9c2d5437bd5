"""
Input validation utilities for the metadata server.

Token IDs and wallet addresses are validated before any chain read or
allowlist lookup; failures raise ValidationError (HTTP 400).
"""
import re
from typing import List, Optional

from fastapi import Path, Query

from domain.constants import MAX_BATCH_SIZE, MAX_TOKEN_ID, MIN_TOKEN_ID
from domain.errors import ValidationError

_TOKEN_ID_RE = re.compile(r"^\d+$")
_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")

TOKEN_ID_MESSAGE = f"Invalid token ID. Must be between {MIN_TOKEN_ID} and {MAX_TOKEN_ID}."


def validate_token_id(raw: Optional[str]) -> int:
    """
    Parse a token ID path/query value.

    Returns:
        The token ID as int, guaranteed within [MIN_TOKEN_ID, MAX_TOKEN_ID]

    Raises:
        ValidationError if not a plain decimal integer or out of range
    """
    value = (raw or "").strip()
    if not _TOKEN_ID_RE.match(value):
        raise ValidationError(TOKEN_ID_MESSAGE, details={"tokenId": raw})

    token_id = int(value)
    if token_id < MIN_TOKEN_ID or token_id > MAX_TOKEN_ID:
        raise ValidationError(TOKEN_ID_MESSAGE, details={"tokenId": raw})
    return token_id


def parse_batch_ids(raw: Optional[str]) -> List[int]:
    """Parse a comma-separated `ids` list of 1..MAX_BATCH_SIZE token IDs, keeping order."""
    value = (raw or "").strip()
    parts = value.split(",") if value else []
    if not parts or len(parts) > MAX_BATCH_SIZE:
        raise ValidationError(
            f"Provide 1-{MAX_BATCH_SIZE} token IDs",
            details={"count": len(parts)},
        )
    return [validate_token_id(part) for part in parts]


def validate_eth_address(address: Optional[str]) -> str:
    """
    Validate a 0x-prefixed, 40 hex digit address (any letter case).

    Returns:
        The address unchanged; callers normalize as needed

    Raises:
        ValidationError if the format is wrong
    """
    if not address or not _ADDRESS_RE.match(address):
        raise ValidationError(
            "Invalid address format. Address must be a valid Ethereum address (0x...)",
            details={"address": address},
        )
    return address


def validated_token_id(token_id: str = Path(..., description="Token ID (1-500)")) -> int:
    """FastAPI dependency for validating token ID path parameters."""
    return validate_token_id(token_id)


def validated_batch_ids(ids: Optional[str] = Query(None, description="Comma-separated token IDs")) -> List[int]:
    """FastAPI dependency for validating the batch `ids` query parameter."""
    return parse_batch_ids(ids)


def validated_address(address: str = Path(..., description="Wallet address (0x + 40 hex)")) -> str:
    """FastAPI dependency for validating address path parameters."""
    return validate_eth_address(address)
