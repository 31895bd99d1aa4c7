"""Number formatting shared by the dashboard components."""


def format_millions(value_usd: float) -> str:
    """Format a USD amount in millions, e.g. ``$149.58M``."""
    return f"${value_usd / 1e6:.2f}M"


def format_price(price_usd: float, decimals: int = 4) -> str:
    """Format a unit price, e.g. ``$2.1800``."""
    return f"${price_usd:.{decimals}f}"
