"""Asset table loading.

The built-in table lives in ``flaretvl.constants.assets``. A JSON file can
replace it until a real TVL source exists::

    {
        "assets": [
            {"symbol": "FXRP", "locked_value_usd": 149579262, "location": "Kinetic"},
            {"symbol": "FLR", "locked_value_usd": 100000000, "price_usd": 0.025}
        ],
        "protocols": [{"name": "Kinetic", "locked_value_usd": 80000000}]
    }
"""

from pathlib import Path

import structlog
from pydantic import BaseModel, Field, ValidationError, field_validator

from flaretvl.constants.assets import DEFAULT_ASSET_TABLE, DEFAULT_PROTOCOLS
from flaretvl.core.exceptions import ConfigurationError
from flaretvl.core.tvl.models import AssetSpec, ProtocolEntry

log = structlog.get_logger(__name__)


class AssetTable(BaseModel):
    """Asset rows plus protocol breakdown."""

    assets: tuple[AssetSpec, ...] = Field(min_length=1)
    protocols: tuple[ProtocolEntry, ...] = ()

    @field_validator("assets")
    @classmethod
    def validate_unique_symbols(cls, v: tuple[AssetSpec, ...]) -> tuple[AssetSpec, ...]:
        """Symbols key the breakdown mapping and must be unique."""
        seen: set[str] = set()
        for spec in v:
            if spec.symbol in seen:
                raise ValueError(f"Duplicate asset symbol: {spec.symbol}")
            seen.add(spec.symbol)
        return v


def default_asset_table() -> AssetTable:
    """Return the built-in placeholder table."""
    return AssetTable(assets=DEFAULT_ASSET_TABLE, protocols=DEFAULT_PROTOCOLS)


def load_asset_table(path: Path | None = None) -> AssetTable:
    """Load the asset table from a JSON file, or the built-in one.

    Args:
        path: JSON file to read. None selects the built-in table.

    Returns:
        Validated AssetTable.

    Raises:
        ConfigurationError: If the file is missing or invalid.
    """
    if path is None:
        return default_asset_table()

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read asset table file {path}: {e}") from e

    try:
        table = AssetTable.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid asset table file {path}: {e}") from e

    log.info("asset_table_loaded", path=str(path), assets=len(table.assets))
    return table
