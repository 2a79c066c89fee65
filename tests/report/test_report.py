"""Tests for HTML/PDF report rendering."""

import random
import tempfile
from pathlib import Path
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", ".."))
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), ".."))

try:
    from growth_report.report import generate_report_pdf, render_report_html
except (ImportError, OSError):  # WeasyPrint needs Pango at import time
    render_report_html = None

from growth_report.main import analyze_website_sync, build_fallback_report
from helpers import FakeFetcher


@unittest.skipIf(render_report_html is None, "WeasyPrint system libraries not available")
class TestRenderReportHtml(unittest.TestCase):
    def setUp(self):
        result = analyze_website_sync("https://acme.com", rng=random.Random(1), fetcher=FakeFetcher())
        self.report = result.report

    def test_contains_sections(self):
        html = render_report_html(self.report)
        self.assertIn("Acme Yoga Mats", html)
        self.assertIn("Nike", html)
        self.assertIn("Budget Optimization", html)
        self.assertIn("Jan", html)

    def test_escapes_markup(self):
        report = build_fallback_report("https://acme.com")
        html = render_report_html(report, warning="<b>limited</b>")
        self.assertIn("&lt;b&gt;limited&lt;/b&gt;", html)

    def test_write_pdf(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = generate_report_pdf(self.report, Path(tmp) / "out" / "acme.pdf")
            self.assertTrue(path.exists())
            self.assertEqual(path.read_bytes()[:4], b"%PDF")


if __name__ == "__main__":
    unittest.main()
