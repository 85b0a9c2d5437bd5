"""
Domain constants used across services/routers.
"""

# Collection
COLLECTION_NAME = "CryptoJunkieSocialClub V2"
COLLECTION_DESCRIPTION = (
    "500 unique CryptoJunkies with Token Bound Accounts. Stake to earn $ATH tokens. "
    "NFTs with 50k+ $ATH in their wallet display animated artwork!"
)
POWERED_UP_SUFFIX = " This Junkie is POWERED UP! ⚡"
SERVICE_NAME = "CJSCV2 Metadata Server"
SERVICE_VERSION = "2.0.0"

# Token range
MIN_TOKEN_ID = 1
MAX_TOKEN_ID = 500
MAX_BATCH_SIZE = 50

# Rarity index -> display name; anything else renders as the first entry
RARITY_NAMES = ("Common", "Uncommon", "Rare", "Mythic")

# 18-decimal fixed point ($ATH and the animation threshold)
WEI_PER_TOKEN = 10**18
DEFAULT_ANIMATION_THRESHOLD = 50_000 * WEI_PER_TOKEN
BALANCE_UNIT = "ATH"

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Marketplace display
STATUS_POWERED_UP = "Powered Up ⚡"
STATUS_STANDARD = "Standard"
BACKGROUND_POWERED_UP = "FFD700"
BACKGROUND_STANDARD = "1a1a2e"
ROYALTY_BASIS_POINTS = 500  # 5%

# Cache-Control per route
CACHE_METADATA = "public, s-maxage=300, stale-while-revalidate=60"
CACHE_ANIMATION = "public, s-maxage=60, stale-while-revalidate=30"
CACHE_CONTRACT = "public, s-maxage=3600, stale-while-revalidate=600"
CACHE_PROOF = "public, s-maxage=300, stale-while-revalidate=60"
