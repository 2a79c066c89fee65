"""Orchestration: URL -> extract -> classify -> competitors + market -> recommendations -> report."""

import asyncio
import logging
import math
import random
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlparse

from .classifier import determine_industry
from .competitors import get_competitor_data
from .config import STATUS_CLEAR_DELAY
from .errors import AnalysisInProgressError, PipelineError, ValidationError
from .market import get_market_intelligence
from .models import (
    AnalysisReport,
    ChannelBudget,
    CompetitorRecord,
    CurrentMetrics,
    Demographics,
    MarketReport,
    Recommendation,
    WebsiteProfile,
)
from .recommendations import generate_recommendations
from .scraper import extract_website_data
from .tables import (
    BASELINE_METRICS,
    BUDGET_OPTIMIZATION,
    DEFAULT_INDUSTRY,
    INDUSTRIES,
    METRIC_JITTER,
    MSG_BUSY,
    MSG_EMPTY_URL,
    MSG_INVALID_URL,
    MSG_LIMITED_DATA,
    STAGE_CATEGORY,
    STAGE_COMPLETE,
    STAGE_CONNECTING,
    STAGE_FINALIZING,
)

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    EXTRACTING = "extracting"
    CLASSIFYING = "classifying"
    ENRICHING = "enriching"
    AGGREGATING = "aggregating"
    COMPLETE = "complete"
    ERROR = "error"


@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of one analysis request.

    - validation error / busy: report is None, error holds the message
    - success: report set, error None
    - degraded: report is the static fallback, error holds the warning
    """
    report: AnalysisReport | None = None
    error: str | None = None
    degraded: bool = False

    @property
    def ok(self) -> bool:
        return self.report is not None and self.error is None

    def to_dict(self) -> dict:
        return {
            "report": self.report.to_dict() if self.report else None,
            "warning": self.error if self.report else None,
            "error": None if self.report else self.error,
        }


def validate_url(url: str | None) -> str:
    """Return the stripped URL or raise ValidationError with a user-facing message."""
    url = (url or "").strip()
    if not url:
        raise ValidationError(MSG_EMPTY_URL)
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError as e:
        raise ValidationError(MSG_INVALID_URL) from e
    if parsed.scheme not in ("http", "https") or not hostname:
        raise ValidationError(MSG_INVALID_URL)
    return url


def compute_current_metrics(industry: str, rng: random.Random) -> CurrentMetrics:
    """Industry baseline with a bounded random offset on each figure."""
    roas, ctr, cpc, cvr = BASELINE_METRICS.get(industry, BASELINE_METRICS[DEFAULT_INDUSTRY])

    def jitter(name: str) -> float:
        spread = METRIC_JITTER[name]
        return rng.uniform(-spread, spread)

    return CurrentMetrics(
        roas=math.floor(roas + jitter("roas")),
        ctr=f"{ctr + jitter('ctr'):.2f}",
        cpc=f"{cpc + jitter('cpc'):.2f}",
        cvr=f"{cvr + jitter('cvr'):.2f}",
    )


def build_budget_optimization() -> list[ChannelBudget]:
    return [ChannelBudget(name, current, optimized, roi) for name, current, optimized, roi in BUDGET_OPTIMIZATION]


def build_fallback_report(url: str) -> AnalysisReport:
    """Fully static report served when the pipeline faults after validation."""
    domain = (urlparse(url).hostname or url) if "://" in url else url
    return AnalysisReport(
        website=WebsiteProfile(
            title=f"{domain} Analysis",
            description="Ecommerce website analysis",
            domain=domain,
            method="fallback",
        ),
        industry=DEFAULT_INDUSTRY,
        competitors=[
            CompetitorRecord(
                name="Competitor A",
                domain="",
                estimated_revenue="$1.2M/month",
                ad_spend="$85K/month",
                roas=285,
                market_share=12,
                ad_channels=["Google Ads", "Facebook Ads"],
            ),
            CompetitorRecord(
                name="Competitor B",
                domain="",
                estimated_revenue="$2.1M/month",
                ad_spend="$125K/month",
                roas=315,
                market_share=18,
                ad_channels=["Google Ads", "Instagram Ads"],
            ),
        ],
        market=MarketReport(
            total_market_size="$24.5B",
            growth_rate="12.3%",
            top_trends=["mobile commerce", "social shopping", "personalization"],
            demographics=Demographics(),
        ),
        recommendations=[
            Recommendation(
                priority="High",
                category="Quick Win",
                action="Optimize mobile experience for better conversions",
                impact="+35% mobile ROAS",
                confidence=85,
                icon="🎯",
                reasoning="Mobile traffic share is high",
            ),
        ],
        budget_optimization=build_budget_optimization(),
        current_metrics=CurrentMetrics(roas=240, ctr="2.0", cpc="0.80", cvr="2.4"),
    )


class AnalysisPipeline:
    """
    Runs one analysis at a time and owns the stage indicator.

    Usage:
        pipeline = AnalysisPipeline(on_progress=print, rng=random.Random(7))
        result = await pipeline.run("https://example.com")

    A second ``run`` while one is in flight is rejected with MSG_BUSY.
    """

    def __init__(
        self,
        fetcher=None,
        on_progress: callable = None,
        rng: random.Random | None = None,
        status_clear_delay: float = STATUS_CLEAR_DELAY,
    ):
        self.fetcher = fetcher
        self.on_progress = on_progress
        self.rng = rng or random.Random()
        self.status_clear_delay = status_clear_delay
        self.state = PipelineState.IDLE
        self.stage = ""
        self.report: AnalysisReport | None = None
        self._in_flight = False
        self._listener = None
        self._clear_handle: asyncio.TimerHandle | None = None

    @property
    def busy(self) -> bool:
        return self._in_flight

    async def run(self, url: str, on_progress: callable = None) -> AnalysisResult:
        """
        Analyze ``url``. Never raises.

        ``on_progress`` receives this run's stage labels in addition to the
        pipeline-wide callback.
        """
        try:
            self._acquire()
        except AnalysisInProgressError as e:
            logger.info("Rejected %s: %s", url, e)
            return AnalysisResult(error=str(e))

        self._listener = on_progress
        try:
            return await self._run(url)
        finally:
            self._listener = None
            self._in_flight = False

    def _acquire(self):
        if self._in_flight:
            raise AnalysisInProgressError(MSG_BUSY)
        self._in_flight = True

    async def _run(self, url: str) -> AnalysisResult:
        self._transition(PipelineState.VALIDATING)
        try:
            url = validate_url(url)
        except ValidationError as e:
            self._transition(PipelineState.IDLE)
            return AnalysisResult(error=str(e))

        self._cancel_clear()
        self.report = None
        try:
            report = await self._analyze(url)
        except Exception:
            logger.exception("Analysis of %s failed; serving fallback report", url)
            self._transition(PipelineState.ERROR)
            self.report = build_fallback_report(url)
            return AnalysisResult(report=self.report, error=MSG_LIMITED_DATA, degraded=True)

        self.report = report
        self._transition(PipelineState.COMPLETE)
        self._set_stage(STAGE_COMPLETE)
        self._schedule_clear()
        return AnalysisResult(report=report)

    async def _analyze(self, url: str) -> AnalysisReport:
        self._transition(PipelineState.EXTRACTING)
        self._set_stage(STAGE_CONNECTING)
        website = await extract_website_data(
            url, fetcher=self.fetcher, on_progress=self._set_stage, rng=self.rng
        )

        self._transition(PipelineState.CLASSIFYING)
        self._set_stage(STAGE_CATEGORY)
        industry = determine_industry(website)

        # Competitors and market data don't read each other's output
        self._transition(PipelineState.ENRICHING)
        competitors, market = await asyncio.gather(
            get_competitor_data(website.domain, industry, on_progress=self._set_stage, rng=self.rng),
            get_market_intelligence(website.keywords, industry, on_progress=self._set_stage, rng=self.rng),
        )

        self._transition(PipelineState.AGGREGATING)
        recommendations = generate_recommendations(
            website, competitors, market, on_progress=self._set_stage, rng=self.rng
        )
        self._set_stage(STAGE_FINALIZING)

        if industry not in INDUSTRIES:
            raise PipelineError(f"Unknown industry label {industry!r}")

        return AnalysisReport(
            website=website,
            industry=industry,
            competitors=competitors,
            market=market,
            recommendations=recommendations,
            budget_optimization=build_budget_optimization(),
            current_metrics=compute_current_metrics(industry, self.rng),
        )

    def _transition(self, state: PipelineState):
        logger.debug("Pipeline %s -> %s", self.state.value, state.value)
        self.state = state

    def _set_stage(self, msg: str):
        self.stage = msg
        if self.on_progress:
            self.on_progress(msg)
        if self._listener:
            self._listener(msg)

    def _schedule_clear(self):
        loop = asyncio.get_running_loop()
        self._clear_handle = loop.call_later(self.status_clear_delay, self._clear_stage)

    def _clear_stage(self):
        # fires after run() returned, so the per-run listener is already detached
        self._clear_handle = None
        self.stage = ""
        if self.on_progress:
            self.on_progress("")

    def _cancel_clear(self):
        if self._clear_handle is not None:
            self._clear_handle.cancel()
            self._clear_handle = None


async def analyze_website(
    url: str,
    on_progress: callable = None,
    rng: random.Random | None = None,
    fetcher=None,
) -> AnalysisResult:
    """
    Analyze a merchant website and build its growth report.

    Steps:
        1. Validate the URL
        2. Fetch + parse the homepage (or synthesize a profile from the domain)
        3. Classify the industry
        4. Competitors and market intelligence
        5. Recommendations, budget split and baseline metrics

    Args:
        url: Website URL to analyze
        on_progress: Optional callback(stage: str) for progress updates
        rng: Random source; seed it for reproducible numbers
        fetcher: Async callable url -> markup (default: configured backend)

    Returns:
        AnalysisResult (never raises)
    """
    pipeline = AnalysisPipeline(fetcher=fetcher, on_progress=on_progress, rng=rng)
    return await pipeline.run(url)


def analyze_website_sync(
    url: str,
    on_progress: callable = None,
    rng: random.Random | None = None,
    fetcher=None,
) -> AnalysisResult:
    """Synchronous wrapper for analyze_website."""
    return asyncio.run(analyze_website(url, on_progress, rng, fetcher))
