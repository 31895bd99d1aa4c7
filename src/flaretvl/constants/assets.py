"""Placeholder TVL figures.

Only the reference asset price is live; every figure below is static data
standing in for a real TVL source (DeFiLlama).
"""

from typing import Final

from flaretvl.core.tvl.models import AssetSpec, ProtocolEntry

# price_usd=None means "use the live reference price"
DEFAULT_ASSET_TABLE: Final[tuple[AssetSpec, ...]] = (
    AssetSpec(
        symbol="FXRP",
        locked_value_usd=149_579_262,
        location="Kinetic (Lending), SparkDEX (Liquidity)",
    ),
    AssetSpec(symbol="stXRP", locked_value_usd=50_000_000, location="Firelight Staking"),
    AssetSpec(
        symbol="WFLR",
        locked_value_usd=25_000_000,
        location="WNat Contract, FTSO Delegation",
        price_usd=0.025,
    ),
    AssetSpec(
        symbol="rFLR",
        locked_value_usd=15_000_000,
        location="Incentive Pools (FAssets Program)",
        price_usd=0.025,
    ),
    AssetSpec(
        symbol="FLR",
        locked_value_usd=100_000_000,
        location="Native Staking/Validators",
        price_usd=0.025,
    ),
)

DEFAULT_PROTOCOLS: Final[tuple[ProtocolEntry, ...]] = (
    ProtocolEntry(name="Kinetic", locked_value_usd=80_000_000),
    ProtocolEntry(name="SparkDEX", locked_value_usd=40_000_000),
    ProtocolEntry(name="Firelight", locked_value_usd=50_000_000),
    ProtocolEntry(name="FTSO", locked_value_usd=25_000_000),
    ProtocolEntry(name="Validators", locked_value_usd=100_000_000),
)

# Trend chart: two historical points in $M, then the live total
TREND_HISTORY_MILLIONS: Final[tuple[tuple[str, float], ...]] = (
    ("Oct 2025", 120.0),
    ("Nov 2025", 150.0),
)
TREND_CURRENT_LABEL: Final[str] = "Dec 2025"

DISTRIBUTION_COLORS: Final[tuple[str, ...]] = (
    "rgb(59, 130, 246)",
    "rgb(16, 185, 129)",
    "rgb(245, 158, 11)",
    "rgb(239, 68, 68)",
    "rgb(139, 92, 246)",
)
