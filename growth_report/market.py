"""Market intelligence: randomized headline figures over static curves."""

import random

from .models import AgeGroup, Demographics, GeoRegion, MarketReport, SeasonalityPoint
from .tables import (
    AGE_GROUPS,
    GEO_DISTRIBUTION,
    GROWTH_RATE_RANGE,
    MARKET_SIZE_RANGE_B,
    SEASONALITY,
    STAGE_MARKET,
    TOP_TRENDS,
)


def build_demographics() -> Demographics:
    return Demographics(
        age_groups=[AgeGroup(age, pct, eng) for age, pct, eng in AGE_GROUPS],
        geo_distribution=[GeoRegion(region, share, growth) for region, share, growth in GEO_DISTRIBUTION],
    )


async def get_market_intelligence(
    keywords: list[str] | None = None,
    industry: str | None = None,
    on_progress: callable = None,
    rng: random.Random | None = None,
) -> MarketReport:
    """Market size and growth are random; trends, seasonality and demographics are fixed."""
    if on_progress:
        on_progress(STAGE_MARKET)
    rng = rng or random.Random()

    # tenths, so the one-decimal figure stays inside [low, high)
    size_low, size_high = MARKET_SIZE_RANGE_B
    growth_low, growth_high = GROWTH_RATE_RANGE
    size = rng.randrange(int(size_low * 10), int(size_high * 10)) / 10
    growth = rng.randrange(int(growth_low * 10), int(growth_high * 10)) / 10

    return MarketReport(
        total_market_size=f"${size:.1f}B",
        growth_rate=f"{growth:.1f}%",
        top_trends=list(TOP_TRENDS),
        seasonality=[SeasonalityPoint(month, demand) for month, demand in SEASONALITY],
        demographics=build_demographics(),
    )
