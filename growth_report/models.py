"""Report dataclasses — everything an analysis produces.

Python attributes are snake_case; ``to_dict()`` emits the camelCase shape the
dashboard renders.
"""

from dataclasses import dataclass, field

METHODS = ("direct", "intelligent_analysis", "fallback")
PRIORITIES = ("High", "Medium")


@dataclass(frozen=True)
class WebsiteProfile:
    title: str
    description: str
    domain: str  # hostname of the analyzed URL
    method: str  # one of METHODS, provenance only
    keywords: list[str] = field(default_factory=list)
    product_prices: list[str] = field(default_factory=list)  # raw numeric text, e.g. "1,299.00"
    product_names: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "keywords": list(self.keywords),
            "productPrices": list(self.product_prices),
            "productNames": list(self.product_names),
            "domain": self.domain,
            "method": self.method,
        }


@dataclass(frozen=True)
class CompetitorRecord:
    name: str
    domain: str
    estimated_revenue: str  # "$3.4M/month"
    ad_spend: str  # "$120K/month"
    roas: int
    market_share: int
    top_keywords: list[str] = field(default_factory=list)
    ad_channels: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "domain": self.domain,
            "estimatedRevenue": self.estimated_revenue,
            "adSpend": self.ad_spend,
            "roas": self.roas,
            "marketShare": self.market_share,
            "topKeywords": list(self.top_keywords),
            "adChannels": list(self.ad_channels),
        }


@dataclass(frozen=True)
class SeasonalityPoint:
    month: str
    demand: int


@dataclass(frozen=True)
class AgeGroup:
    age: str
    percentage: int
    engagement: int


@dataclass(frozen=True)
class GeoRegion:
    region: str
    share: int
    growth: int


@dataclass(frozen=True)
class Demographics:
    age_groups: list[AgeGroup] = field(default_factory=list)
    geo_distribution: list[GeoRegion] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "ageGroups": [
                {"age": g.age, "percentage": g.percentage, "engagement": g.engagement}
                for g in self.age_groups
            ],
            "geoDistribution": [
                {"region": r.region, "share": r.share, "growth": r.growth}
                for r in self.geo_distribution
            ],
        }


@dataclass(frozen=True)
class MarketReport:
    total_market_size: str  # "$24.5B"
    growth_rate: str  # "12.3%"
    top_trends: list[str] = field(default_factory=list)
    seasonality: list[SeasonalityPoint] = field(default_factory=list)
    demographics: Demographics = field(default_factory=Demographics)

    def to_dict(self) -> dict:
        return {
            "totalMarketSize": self.total_market_size,
            "growthRate": self.growth_rate,
            "topTrends": list(self.top_trends),
            "seasonality": [{"month": p.month, "demand": p.demand} for p in self.seasonality],
            "demographics": self.demographics.to_dict(),
        }


@dataclass(frozen=True)
class Recommendation:
    priority: str  # one of PRIORITIES
    category: str
    action: str
    impact: str
    confidence: int
    icon: str
    reasoning: str

    def to_dict(self) -> dict:
        return {
            "priority": self.priority,
            "category": self.category,
            "action": self.action,
            "impact": self.impact,
            "confidence": self.confidence,
            "icon": self.icon,
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class ChannelBudget:
    name: str
    current: int  # percent of spend today
    optimized: int  # suggested percent
    roi: float

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "current": self.current,
            "optimized": self.optimized,
            "roi": self.roi,
        }


@dataclass(frozen=True)
class CurrentMetrics:
    roas: int
    ctr: str
    cpc: str
    cvr: str

    def to_dict(self) -> dict:
        return {"roas": self.roas, "ctr": self.ctr, "cpc": self.cpc, "cvr": self.cvr}


@dataclass(frozen=True)
class AnalysisReport:
    website: WebsiteProfile
    industry: str
    competitors: list[CompetitorRecord]
    market: MarketReport
    recommendations: list[Recommendation]
    budget_optimization: list[ChannelBudget]
    current_metrics: CurrentMetrics

    def to_dict(self) -> dict:
        return {
            "website": self.website.to_dict(),
            "industry": self.industry,
            "competitors": [c.to_dict() for c in self.competitors],
            "market": self.market.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations],
            "budgetOptimization": [b.to_dict() for b in self.budget_optimization],
            "currentMetrics": self.current_metrics.to_dict(),
        }
