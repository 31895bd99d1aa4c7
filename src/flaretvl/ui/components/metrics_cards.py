"""Metrics cards: total TVL, featured asset, 24h change and live price."""

from html import escape

from flaretvl.core.tvl.models import PriceSource, Snapshot
from flaretvl.ui.components.formatting import format_millions

PRICE_CAPTIONS = {
    PriceSource.LIVE: "Live via CoinGecko",
    PriceSource.FALLBACK: "Fallback price",
}


def _card(label: str, value: str, css_class: str, caption: str = "") -> str:
    caption_html = f'<p class="tvl-card-caption">{escape(caption)}</p>' if caption else ""
    return (
        f'<div class="tvl-card {css_class}">'
        f'<h3>{escape(label)}</h3>'
        f'<p class="tvl-card-value">{escape(value)}</p>'
        f"{caption_html}"
        "</div>"
    )


def render_metrics_html(
    snapshot: Snapshot,
    featured_symbol: str = "FXRP",
    change_label: str = "+0.70%",
    reference_label: str = "XRP",
) -> str:
    """Render the four metrics cards.

    Args:
        snapshot: Current snapshot.
        featured_symbol: Asset whose locked value gets its own card.
        change_label: Placeholder 24h change text.
        reference_label: Display name of the live-priced asset.

    Returns:
        HTML string containing the cards row.
    """
    featured = snapshot.assets.get(featured_symbol)
    featured_value = featured.locked_value_usd if featured else 0.0
    caption = PRICE_CAPTIONS[snapshot.reference_price_source]

    cards = [
        _card("Total TVL", format_millions(snapshot.total_locked_value_usd), "tvl-card-total"),
        _card(f"{featured_symbol} Locked", format_millions(featured_value), "tvl-card-featured"),
        _card("24h Change", change_label, "tvl-card-change"),
        _card(
            f"{reference_label} Price",
            f"${snapshot.reference_price_usd:.2f}",
            f"tvl-card-price tvl-price-{snapshot.reference_price_source.value}",
            caption=caption,
        ),
    ]
    return f'<div id="tvl-metrics">{"".join(cards)}</div>'
