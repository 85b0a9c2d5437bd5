"""
Display formatting for on-chain values.

Balances are 18-decimal fixed point integers; Python ints keep them exact,
so all arithmetic here is integer-only (no float rounding).
"""
from domain.constants import RARITY_NAMES, WEI_PER_TOKEN


def format_balance(value: int) -> str:
    """
    Render a UFixed18 value as its whole-token part.

    Truncates at the decimal point: 1999999999999999999 → "1".
    """
    return str(value // WEI_PER_TOKEN)


def animation_progress(balance: int, threshold: int) -> int:
    """Integer percentage of `threshold` held (floor of balance * 100 / threshold)."""
    if threshold <= 0:
        # A zero threshold is met by any positive balance
        return 100 if balance > 0 else 0
    return balance * 100 // threshold


def rarity_name(index: int) -> str:
    if 0 <= index < len(RARITY_NAMES):
        return RARITY_NAMES[index]
    return RARITY_NAMES[0]
