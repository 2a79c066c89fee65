"""Competitor list per industry with synthetic performance figures."""

import random

from .models import CompetitorRecord
from .tables import (
    AD_SPEND_RANGE_K,
    COMPETITOR_AD_CHANNELS,
    COMPETITOR_KEYWORDS,
    GENERIC_COMPETITORS,
    INDUSTRY_COMPETITORS,
    MARKET_SHARE_RANGE,
    REVENUE_RANGE_M,
    ROAS_RANGE,
    STAGE_COMPETITORS,
)


def competitor_name(domain: str) -> str:
    """Display name from a competitor domain.

    >>> competitor_name("zara.com")
    'Zara'
    >>> competitor_name("competitor1.com")
    'Competitor1'
    """
    stem = domain.rsplit(".", 1)[0] if "." in domain else domain
    return stem[:1].upper() + stem[1:]


def build_competitor(domain: str, rng: random.Random) -> CompetitorRecord:
    rev_low, rev_high = REVENUE_RANGE_M
    spend_low, spend_high = AD_SPEND_RANGE_K
    # tenths of $M and whole $K, so the formatted figure stays inside [low, high)
    revenue = rng.randrange(int(rev_low * 10), int(rev_high * 10)) / 10
    ad_spend = rng.randrange(int(spend_low), int(spend_high))
    return CompetitorRecord(
        name=competitor_name(domain),
        domain=domain,
        estimated_revenue=f"${revenue:.1f}M/month",
        ad_spend=f"${ad_spend}K/month",
        roas=rng.randrange(*ROAS_RANGE),
        market_share=rng.randrange(*MARKET_SHARE_RANGE),
        top_keywords=list(COMPETITOR_KEYWORDS),
        ad_channels=list(COMPETITOR_AD_CHANNELS),
    )


async def get_competitor_data(
    domain: str,
    industry: str,
    on_progress: callable = None,
    rng: random.Random | None = None,
) -> list[CompetitorRecord]:
    """
    Competitors for ``industry`` in table order, each with fresh random metrics.

    ``domain`` is the analyzed site; it is accepted for symmetry with the
    other stages but does not affect the result.
    """
    if on_progress:
        on_progress(STAGE_COMPETITORS)
    rng = rng or random.Random()

    domains = INDUSTRY_COMPETITORS.get(industry, GENERIC_COMPETITORS)
    return [build_competitor(comp, rng) for comp in domains]
