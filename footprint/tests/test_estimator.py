from django.contrib.auth import get_user_model
from django.test import TestCase

from footprint.services.estimator import (
    estimate_footprint,
    largest_source,
    normalize_breakdown,
)
from profiles.models import BusinessProfile
from utils.exceptions import AIResponseError, EstimationFailed

from .mock_ai_data import SAMPLE_FOOTPRINT, FakeModelClient


class NormalizeBreakdownTest(TestCase):

    def test_percentages_within_tolerance_are_kept(self):
        footprint = {"breakdown": [
            {"category": "A", "kgCO2e": 10, "percent": 49.8},
            {"category": "B", "kgCO2e": 10, "percent": 50.0},
        ]}
        normalize_breakdown(footprint)
        self.assertEqual([item["percent"] for item in footprint["breakdown"]], [49.8, 50.0])

    def test_percentages_rederived_from_kg(self):
        footprint = {"breakdown": [
            {"category": "A", "kgCO2e": 300, "percent": 10},
            {"category": "B", "kgCO2e": 100, "percent": 10},
        ]}
        normalize_breakdown(footprint)
        self.assertEqual([item["percent"] for item in footprint["breakdown"]], [75.0, 25.0])

    def test_zero_emissions_get_equal_shares(self):
        footprint = {"breakdown": [
            {"category": "A", "kgCO2e": 0, "percent": 0},
            {"category": "B", "kgCO2e": 0, "percent": 0},
        ]}
        normalize_breakdown(footprint)
        total = sum(item["percent"] for item in footprint["breakdown"])
        self.assertAlmostEqual(total, 100, delta=0.5)

    def test_largest_source(self):
        self.assertEqual(largest_source(SAMPLE_FOOTPRINT)["category"], "Electricity")
        self.assertIsNone(largest_source({"breakdown": []}))


class EstimateFootprintTest(TestCase):

    def setUp(self):
        self.user = get_user_model().objects.create_user(username='cafe', password='TestPass123!')
        self.profile = BusinessProfile.objects.create(
            user=self.user,
            business_name="Green Bean Cafe",
            industry="Restaurant",
            country="United States",
            postal_code="94110",
        )

    def test_estimate_partial_profile(self):
        client = FakeModelClient()
        footprint = estimate_footprint(self.profile, client=client)

        self.assertEqual(footprint["totalKgCO2eAnnual"], 42000)
        self.assertAlmostEqual(sum(item["percent"] for item in footprint["breakdown"]), 100, delta=0.5)
        prompt = client.prompt_for("carbon_footprint")
        self.assertIn('"industry": "Restaurant"', prompt)
        self.assertIn('"employeeCount": 0', prompt)
        self.assertIn('"hasActualData": true', prompt)

    def test_missing_profile_is_wrapped(self):
        with self.assertRaises(EstimationFailed) as ctx:
            estimate_footprint(None, client=FakeModelClient())
        self.assertTrue(ctx.exception.message.startswith("Failed to calculate carbon footprint"))

    def test_model_failure_is_wrapped(self):
        client = FakeModelClient(failures={"carbon_footprint": AIResponseError("bad schema")})
        with self.assertRaises(EstimationFailed) as ctx:
            estimate_footprint(self.profile, client=client)
        self.assertIn("bad schema", ctx.exception.message)

    def test_unexpected_failure_is_wrapped(self):
        client = FakeModelClient(failures={"carbon_footprint": TimeoutError("timed out")})
        with self.assertRaises(EstimationFailed):
            estimate_footprint(self.profile, client=client)
