"""Tests for report dataclasses and their wire shape."""

import dataclasses
import random
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", ".."))
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), ".."))

from growth_report.models import METHODS, PRIORITIES, CompetitorRecord, CurrentMetrics, WebsiteProfile
from growth_report.main import AnalysisResult, analyze_website, build_fallback_report
from helpers import FailingFetcher, FakeFetcher


class TestWebsiteProfile(unittest.TestCase):
    def test_defaults(self):
        profile = WebsiteProfile(title="t", description="d", domain="a.com", method="direct")
        self.assertEqual(profile.keywords, [])
        self.assertEqual(profile.product_prices, [])
        self.assertEqual(profile.product_names, [])

    def test_to_dict_uses_camel_case(self):
        profile = WebsiteProfile(
            title="t", description="d", domain="a.com", method="direct",
            product_prices=["1.00"], product_names=["Mat"],
        )
        d = profile.to_dict()
        self.assertEqual(d["productPrices"], ["1.00"])
        self.assertEqual(d["productNames"], ["Mat"])
        self.assertNotIn("product_names", d)

    def test_frozen(self):
        profile = WebsiteProfile(title="t", description="d", domain="a.com", method="direct")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            profile.title = "changed"


class TestCompetitorRecord(unittest.TestCase):
    def test_to_dict(self):
        comp = CompetitorRecord(
            name="Zara", domain="zara.com", estimated_revenue="$2.0M/month",
            ad_spend="$90K/month", roas=300, market_share=10,
            top_keywords=["a", "b", "c"], ad_channels=["x", "y", "z"],
        )
        d = comp.to_dict()
        self.assertEqual(
            set(d),
            {"name", "domain", "estimatedRevenue", "adSpend", "roas", "marketShare", "topKeywords", "adChannels"},
        )
        self.assertEqual(d["marketShare"], 10)


class TestAnalysisResult(unittest.TestCase):
    def test_validation_outcome(self):
        result = AnalysisResult(error="bad url")
        self.assertFalse(result.ok)
        self.assertEqual(result.to_dict(), {"report": None, "warning": None, "error": "bad url"})

    def test_degraded_outcome(self):
        result = AnalysisResult(report=build_fallback_report("https://a.com"), error="limited", degraded=True)
        self.assertFalse(result.ok)
        d = result.to_dict()
        self.assertEqual(d["warning"], "limited")
        self.assertIsNone(d["error"])
        self.assertEqual(d["report"]["currentMetrics"], CurrentMetrics(240, "2.0", "0.80", "2.4").to_dict())


class TestAllowedValues(unittest.IsolatedAsyncioTestCase):
    async def test_methods_and_priorities(self):
        reports = [build_fallback_report("https://a.com")]
        for fetcher in (FakeFetcher(), FailingFetcher()):
            result = await analyze_website("https://acme.com", rng=random.Random(2), fetcher=fetcher)
            reports.append(result.report)

        self.assertEqual([r.website.method for r in reports], ["fallback", "direct", "intelligent_analysis"])
        for report in reports:
            self.assertIn(report.website.method, METHODS)
            for rec in report.recommendations:
                self.assertIn(rec.priority, PRIORITIES)


if __name__ == "__main__":
    unittest.main()
