import datetime
from unittest import mock

from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.test import TestCase
from django.utils import timezone

from footprint.models import ActionPlan, CarbonFootprint, CompletedAction
from footprint.services.dashboard import (
    calculate_and_generate,
    get_latest,
    save_footprint_and_plan,
    toggle_action_completion,
)
from utils.exceptions import GenerationFailed, ProfileNotFound, ValidationError

from .factories import create_footprint, create_profile
from .mock_ai_data import SAMPLE_FOOTPRINT, FakeModelClient


class CalculateAndGenerateTest(TestCase):

    def setUp(self):
        self.user = get_user_model().objects.create_user(username='cafe', password='TestPass123!')

    def test_requires_profile(self):
        with self.assertRaises(ProfileNotFound):
            calculate_and_generate(self.user, client=FakeModelClient())
        self.assertFalse(CarbonFootprint.objects.exists())

    def test_stores_footprint_and_plan(self):
        create_profile(self.user)
        result = calculate_and_generate(self.user, client=FakeModelClient())

        footprint = CarbonFootprint.objects.get(user=self.user)
        plan = ActionPlan.objects.get(user=self.user)
        self.assertEqual(plan.footprint_id, footprint.id)
        self.assertEqual(result['footprint']['id'], footprint.id)
        self.assertEqual(result['dashboard']['footprintId'], footprint.id)
        self.assertEqual(len(result['dashboard']['fullActionPlan']), 10)
        self.assertIn('id', result['dashboard']['prioritizedNextStep'])

    def test_failed_generation_stores_nothing(self):
        create_profile(self.user)
        client = FakeModelClient(failures={'energy': RuntimeError("rate limited")})

        with self.assertRaises(GenerationFailed):
            calculate_and_generate(self.user, client=client)

        self.assertFalse(CarbonFootprint.objects.exists())
        self.assertFalse(ActionPlan.objects.exists())


class SaveFootprintAndPlanTest(TestCase):

    def setUp(self):
        self.user = get_user_model().objects.create_user(username='cafe', password='TestPass123!')
        self.plan = {
            "executiveSummary": "Summary",
            "prioritizedNextStep": {"id": "action_1", "title": "t", "description": "d",
                                    "impact": "High", "cost": "$", "paybackPeriod": "Immediate"},
            "quickWins": [],
            "fullActionPlan": [],
            "rentConstraintFlags": [],
        }

    def test_plan_insert_failure_rolls_back_footprint(self):
        with mock.patch.object(ActionPlan.objects, 'create', side_effect=DatabaseError("insert failed")):
            with self.assertRaises(DatabaseError):
                save_footprint_and_plan(self.user, dict(SAMPLE_FOOTPRINT), self.plan)

        self.assertFalse(CarbonFootprint.objects.filter(user=self.user).exists())


class GetLatestTest(TestCase):

    def setUp(self):
        self.user = get_user_model().objects.create_user(username='cafe', password='TestPass123!')

    def test_none_without_footprint(self):
        self.assertIsNone(get_latest(self.user))

    def test_none_when_latest_footprint_has_no_plan(self):
        create_footprint(self.user, created_at=timezone.now() - datetime.timedelta(days=1))
        create_footprint(self.user, with_plan=False)
        self.assertIsNone(get_latest(self.user))

    def test_returns_most_recent_pair(self):
        create_profile(self.user)
        create_footprint(self.user, created_at=timezone.now() - datetime.timedelta(days=1), title="Old")
        newest = create_footprint(self.user, title="New")

        result = get_latest(self.user)

        self.assertEqual(result['footprint']['id'], newest.id)
        self.assertEqual(result['dashboard']['prioritizedNextStep']['title'], "New")
        self.assertEqual(result['businessName'], "Green Bean Cafe")
        self.assertEqual(result['completedActionIds'], [])

    def test_other_users_data_is_invisible(self):
        other = get_user_model().objects.create_user(username='other', password='TestPass123!')
        create_footprint(other)
        self.assertIsNone(get_latest(self.user))

    def test_includes_completed_actions(self):
        create_footprint(self.user)
        toggle_action_completion(self.user, "action_2", "quickwin", True)
        toggle_action_completion(self.user, "action_1", "priority", True)

        self.assertEqual(get_latest(self.user)['completedActionIds'], ["action_1", "action_2"])


class ToggleActionCompletionTest(TestCase):

    def setUp(self):
        self.user = get_user_model().objects.create_user(username='cafe', password='TestPass123!')

    def test_complete_is_idempotent(self):
        toggle_action_completion(self.user, "action_42", "quickwin", True)
        result = toggle_action_completion(self.user, "action_42", "quickwin", True)

        self.assertEqual(result, {"success": True, "actionId": "action_42", "completed": True})
        self.assertEqual(CompletedAction.objects.filter(user=self.user, action_id="action_42").count(), 1)

    def test_complete_again_records_latest_type(self):
        toggle_action_completion(self.user, "action_42", "quickwin", True)
        toggle_action_completion(self.user, "action_42", "actionplan", True)

        marker = CompletedAction.objects.get(user=self.user, action_id="action_42")
        self.assertEqual(marker.action_type, "actionplan")

    def test_uncomplete_is_idempotent(self):
        toggle_action_completion(self.user, "action_42", "quickwin", True)
        toggle_action_completion(self.user, "action_42", "quickwin", False)
        result = toggle_action_completion(self.user, "action_42", "quickwin", False)

        self.assertFalse(result['completed'])
        self.assertFalse(CompletedAction.objects.filter(user=self.user).exists())

    def test_rejects_invalid_input(self):
        with self.assertRaises(ValidationError):
            toggle_action_completion(self.user, "", "quickwin", True)
        with self.assertRaises(ValidationError):
            toggle_action_completion(self.user, "action_42", "someday", True)
