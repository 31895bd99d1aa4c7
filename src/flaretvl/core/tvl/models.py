"""TVL Pydantic models.

This module defines the data models the snapshot builder produces and the
presentation layer consumes. All models are frozen: a snapshot is replaced
wholesale on every refresh, never edited in place.
"""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class PriceSource(str, Enum):
    """Where the reference price of a snapshot came from."""

    LIVE = "live"
    FALLBACK = "fallback"


class AssetSpec(BaseModel):
    """One row of the configured asset table.

    Attributes:
        symbol: Asset ticker (e.g., FXRP).
        locked_value_usd: Value locked in USD.
        location: Where the asset is held (protocols, contracts).
        price_usd: Fixed unit price, or None to use the live reference price.
    """

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(min_length=1)
    locked_value_usd: float = Field(ge=0)
    location: str = ""
    price_usd: float | None = Field(default=None, ge=0)

    @property
    def uses_reference_price(self) -> bool:
        """True when the unit price follows the live reference price."""
        return self.price_usd is None


class AssetEntry(BaseModel):
    """Per-asset breakdown entry of a snapshot.

    Attributes:
        symbol: Asset ticker.
        locked_value_usd: Value locked in USD.
        unit_price_usd: Unit price in USD used for this cycle.
        location_description: Where the asset is held.
    """

    model_config = ConfigDict(frozen=True)

    symbol: str
    locked_value_usd: float
    unit_price_usd: float
    location_description: str = ""


class ProtocolEntry(BaseModel):
    """Value locked in a single protocol."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    locked_value_usd: float = Field(ge=0)


class Snapshot(BaseModel):
    """Result of one fetch-and-build cycle.

    The total is computed from ``assets`` on every read, so it always equals
    the sum of the per-asset locked values.

    Attributes:
        assets: Mapping from symbol to entry, in table order.
        reference_price_usd: Live (or fallback) price of the reference asset.
        reference_price_source: Whether the reference price is live or fallback.
        protocols: Per-protocol breakdown.
        built_at: When the snapshot was built.
    """

    model_config = ConfigDict(frozen=True)

    assets: dict[str, AssetEntry] = Field(default_factory=dict)
    reference_price_usd: float = 0.0
    reference_price_source: PriceSource = PriceSource.FALLBACK
    protocols: tuple[ProtocolEntry, ...] = ()
    built_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_locked_value_usd(self) -> float:
        """Sum of locked value over all assets."""
        return sum(entry.locked_value_usd for entry in self.assets.values())

    @property
    def is_empty(self) -> bool:
        """True for the placeholder snapshot held before the first refresh."""
        return not self.assets

    @classmethod
    def empty(cls) -> "Snapshot":
        """Create the placeholder snapshot held while loading."""
        return cls()
