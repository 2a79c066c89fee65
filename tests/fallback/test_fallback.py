"""Tests for the domain-name fallback profile."""

import random
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", ".."))
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), ".."))

from growth_report.fallback import (
    DomainInfo,
    analyze_search_results,
    company_name_from_domain,
    generate_fallback_profile,
    search_website_info,
)


class TestSearchWebsiteInfo(unittest.TestCase):
    def test_beauty_domain(self):
        info = search_website_info("beautybox.com", "beautybox")
        self.assertEqual(info.detected_industry, "beauty cosmetics")
        self.assertEqual(info.company_name, "beautybox")

    def test_first_match_wins(self):
        # "store" comes before "tech" in the table
        info = search_website_info("techstore.io", "techstore")
        self.assertEqual(info.detected_industry, "retail ecommerce")

    def test_shopify_before_shop(self):
        info = search_website_info("acme.myshopify.com", "acme")
        self.assertEqual(info.detected_industry, "ecommerce platform")

    def test_default_general(self):
        info = search_website_info("notarealsite.invalid", "notarealsite")
        self.assertEqual(info.detected_industry, "general")


class TestAnalyzeSearchResults(unittest.TestCase):
    def test_beautybox_profile(self):
        profile = generate_fallback_profile("beautybox.com", random.Random(1))
        self.assertEqual(profile.title, "Beautybox - beauty cosmetics")
        self.assertEqual(profile.description, "Premium beauty cosmetics products and services")
        self.assertEqual(profile.product_names, ["Foundation", "Lipstick", "Skincare Set", "Eye Shadow"])
        self.assertEqual(profile.keywords, ["beauty", "cosmetics"])
        self.assertEqual(profile.domain, "beautybox.com")
        self.assertEqual(profile.method, "intelligent_analysis")

    def test_prices_in_range(self):
        rng = random.Random(3)
        for _ in range(50):
            profile = generate_fallback_profile("beautybox.com", rng)
            self.assertEqual(len(profile.product_prices), 4)
            for price in profile.product_prices:
                self.assertRegex(price, r"^\d+\.\d{2}$")
                self.assertGreaterEqual(float(price), 20.0)
                self.assertLess(float(price), 220.0)

    def test_unknown_descriptor_gets_generic_products(self):
        info = DomainInfo(domain="myshop.com", company_name="myshop", detected_industry="online store")
        profile = analyze_search_results(info, random.Random(0))
        self.assertEqual(profile.product_names, ["Product 1", "Product 2", "Product 3", "Product 4"])
        self.assertEqual(len(profile.product_prices), 4)
        self.assertEqual(profile.title, "Myshop - online store")

    def test_same_seed_same_prices(self):
        a = generate_fallback_profile("fitnessfirst.com", random.Random(9))
        b = generate_fallback_profile("fitnessfirst.com", random.Random(9))
        self.assertEqual(a.product_prices, b.product_prices)
        self.assertEqual(a.product_names, ["Protein Powder", "Yoga Mat", "Dumbbells", "Supplement"])

    def test_company_name(self):
        self.assertEqual(company_name_from_domain("beautybox.com"), "beautybox")
        self.assertEqual(company_name_from_domain("www.acme.com"), "www")


if __name__ == "__main__":
    unittest.main()
