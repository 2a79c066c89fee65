"""Templated growth recommendations."""

import random

from .models import CompetitorRecord, MarketReport, Recommendation, WebsiteProfile
from .tables import STAGE_RECOMMENDATIONS


def generate_recommendations(
    website: WebsiteProfile | None = None,
    competitors: list[CompetitorRecord] | None = None,
    market: MarketReport | None = None,
    on_progress: callable = None,
    rng: random.Random | None = None,
) -> list[Recommendation]:
    """
    Always four recommendations: two High, then two Medium.

    The inputs are not inspected yet; only the numeric fragments vary
    between calls.
    """
    if on_progress:
        on_progress(STAGE_RECOMMENDATIONS)
    rng = rng or random.Random()

    return [
        Recommendation(
            priority="High",
            category="Budget Allocation",
            action="Increase Google Ads spend by 25% based on competitor gap analysis",
            impact=f"+${rng.uniform(20, 70):.0f}K monthly revenue",
            confidence=rng.randrange(85, 100),
            icon="💰",
            reasoning="Competitors are under-investing in search, creating opportunity",
        ),
        Recommendation(
            priority="High",
            category="Audience Targeting",
            action="Target 25-34 segment with 92% engagement rate",
            impact=f"+{rng.randrange(30, 70)}% ROAS improvement",
            confidence=rng.randrange(88, 98),
            icon="🎯",
            reasoning="Highest engagement demographic with growth potential",
        ),
        Recommendation(
            priority="Medium",
            category="Geographic Expansion",
            action="Expand to Asia Pacific market",
            impact="+25% revenue growth",
            confidence=rng.randrange(75, 90),
            icon="🌍",
            reasoning="25% growth rate in region",
        ),
        Recommendation(
            priority="Medium",
            category="Creative Optimization",
            action="Implement video creative strategy based on top competitor analysis",
            impact=f"+{rng.randrange(15, 40)}% CTR improvement",
            confidence=rng.randrange(80, 90),
            icon="⚡",
            reasoning="Video content shows higher engagement in this vertical",
        ),
    ]
