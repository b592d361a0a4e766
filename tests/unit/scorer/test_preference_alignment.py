#!/usr/bin/env python3
"""
Test suite for location, title and industry alignment.
"""

import unittest

from jobmatch.config_loader import ScorerConfig
from jobmatch.models import Preferences
from jobmatch.scorer import preferences
from jobmatch.scorer.preferences import (
    calculate_industry_match,
    calculate_location_match,
    calculate_title_match,
)
from tests import make_posting


class TestLocationMatch(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_no_preferences_prefers_remote(self):
        prefs = Preferences()

        self.assertEqual(calculate_location_match(make_posting(remote=True), prefs, self.config), 1.0)
        self.assertEqual(calculate_location_match(make_posting(remote=False), prefs, self.config), 0.5)

    def test_preferred_location_substring_matches(self):
        prefs = Preferences(locations=["berlin"])
        posting = make_posting(location="Berlin, Germany")

        self.assertEqual(calculate_location_match(posting, prefs, self.config), 1.0)

    def test_posting_location_inside_preference_matches(self):
        prefs = Preferences(locations=["New York, NY, USA"])
        posting = make_posting(location="new york")

        self.assertEqual(calculate_location_match(posting, prefs, self.config), 1.0)

    def test_remote_fallback_when_candidate_accepts_remote(self):
        prefs = Preferences(locations=["Berlin"], accepts_remote=True)
        posting = make_posting(location="Lisbon", remote=True)

        self.assertEqual(calculate_location_match(posting, prefs, self.config), 0.8)

    def test_remote_posting_without_remote_acceptance_scores_zero(self):
        prefs = Preferences(locations=["Berlin"], accepts_remote=False)
        posting = make_posting(location="Lisbon", remote=True)

        self.assertEqual(calculate_location_match(posting, prefs, self.config), 0.0)

    def test_location_mismatch_scores_zero(self):
        prefs = Preferences(locations=["Berlin"], accepts_remote=True)
        posting = make_posting(location="Paris", remote=False)

        self.assertEqual(calculate_location_match(posting, prefs, self.config), 0.0)

    def test_blank_posting_location_does_not_match(self):
        prefs = Preferences(locations=["Berlin"])
        posting = make_posting(location="")

        self.assertEqual(calculate_location_match(posting, prefs, self.config), 0.0)

    def test_missing_preferences_object(self):
        self.assertEqual(calculate_location_match(make_posting(remote=True), None, self.config), 1.0)


class TestTitleMatch(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_no_titles_is_neutral(self):
        self.assertEqual(calculate_title_match(make_posting(), Preferences(), self.config), 0.5)

    def test_containment(self):
        prefs = Preferences(job_titles=["Data Engineer"])
        posting = make_posting(title="Senior Data Engineer")

        self.assertEqual(calculate_title_match(posting, prefs, self.config), 1.0)

    def test_shared_keyword(self):
        prefs = Preferences(job_titles=["Platform Engineer"])
        posting = make_posting(title="Engineer - Payments")

        self.assertEqual(calculate_title_match(posting, prefs, self.config), 1.0)

    def test_short_words_do_not_count(self):
        prefs = Preferences(job_titles=["VP of IT"])
        posting = make_posting(title="Head of QA")

        self.assertEqual(calculate_title_match(posting, prefs, self.config), 0.0)

    def test_no_overlap(self):
        prefs = Preferences(job_titles=["Designer"])
        posting = make_posting(title="Accountant")

        self.assertEqual(calculate_title_match(posting, prefs, self.config), 0.0)

    def test_has_common_keywords(self):
        self.assertTrue(preferences.has_common_keywords("backend developer", "developer advocate"))
        self.assertFalse(preferences.has_common_keywords("ui qa", "ux qa"))


class TestIndustryMatch(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_no_industries_is_neutral(self):
        self.assertEqual(calculate_industry_match(make_posting(), Preferences(), self.config), 0.5)

    def test_containment_either_way(self):
        prefs = Preferences(industries=["fintech", "Health"])

        self.assertEqual(
            calculate_industry_match(make_posting(industry="FinTech"), prefs, self.config), 1.0
        )
        self.assertEqual(
            calculate_industry_match(make_posting(industry="Healthcare"), prefs, self.config), 1.0
        )

    def test_mismatch(self):
        prefs = Preferences(industries=["Gaming"])

        self.assertEqual(
            calculate_industry_match(make_posting(industry="Banking"), prefs, self.config), 0.0
        )

    def test_blank_posting_industry_does_not_match(self):
        prefs = Preferences(industries=["Gaming"])

        self.assertEqual(calculate_industry_match(make_posting(industry=""), prefs, self.config), 0.0)


if __name__ == '__main__':
    unittest.main()
