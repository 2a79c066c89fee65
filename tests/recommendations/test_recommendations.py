"""Tests for the recommendation engine."""

import random
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", ".."))

from growth_report.recommendations import generate_recommendations


class TestGenerateRecommendations(unittest.TestCase):
    def test_four_in_fixed_order(self):
        recs = generate_recommendations()
        self.assertEqual(len(recs), 4)
        self.assertEqual([r.priority for r in recs], ["High", "High", "Medium", "Medium"])
        self.assertEqual(
            [r.category for r in recs],
            ["Budget Allocation", "Audience Targeting", "Geographic Expansion", "Creative Optimization"],
        )

    def test_confidence_ranges(self):
        rng = random.Random(2)
        for _ in range(50):
            budget, audience, geo, creative = generate_recommendations(rng=rng)
            self.assertTrue(85 <= budget.confidence < 100)
            self.assertTrue(88 <= audience.confidence < 98)
            self.assertTrue(75 <= geo.confidence < 90)
            self.assertTrue(80 <= creative.confidence < 90)

    def test_templated_impact(self):
        budget, audience, geo, creative = generate_recommendations(rng=random.Random(4))
        self.assertRegex(budget.impact, r"^\+\$\d+K monthly revenue$")
        self.assertRegex(audience.impact, r"^\+\d+% ROAS improvement$")
        self.assertEqual(geo.impact, "+25% revenue growth")
        self.assertRegex(creative.impact, r"^\+\d+% CTR improvement$")

    def test_stage_label(self):
        stages = []
        generate_recommendations(on_progress=stages.append)
        self.assertEqual(stages, ["Generating AI recommendations..."])


if __name__ == "__main__":
    unittest.main()
