"""Asset breakdown table."""

from typing import Any

import pandas as pd

from flaretvl.core.tvl.models import Snapshot
from flaretvl.ui.components.formatting import format_millions, format_price

BREAKDOWN_COLUMNS = ["Asset", "TVL (USD)", "Price (USD)", "Location"]


def breakdown_rows(snapshot: Snapshot) -> list[dict[str, Any]]:
    """Unformatted rows, one per asset, in table order."""
    return [
        {
            "symbol": entry.symbol,
            "locked_value_usd": entry.locked_value_usd,
            "unit_price_usd": entry.unit_price_usd,
            "location": entry.location_description,
        }
        for entry in snapshot.assets.values()
    ]


def snapshot_to_dataframe(snapshot: Snapshot) -> pd.DataFrame:
    """Convert the snapshot breakdown to a display DataFrame."""
    rows = [
        {
            "Asset": row["symbol"],
            "TVL (USD)": format_millions(row["locked_value_usd"]),
            "Price (USD)": format_price(row["unit_price_usd"]),
            "Location": row["location"],
        }
        for row in breakdown_rows(snapshot)
    ]
    return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)
