from unittest import mock

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from footprint.models import CarbonFootprint, CompletedAction

from .factories import create_footprint, create_profile
from .mock_ai_data import FakeModelClient


class FootprintApiTest(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = get_user_model().objects.create_user(username='cafe', password='TestPass123!')
        self.client.force_authenticate(user=self.user)
        self.model_client = FakeModelClient()
        patcher = mock.patch('footprint.services.ai_client.get_model_client', return_value=self.model_client)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)
        response = self.client.get(reverse('footprint-latest'))
        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

    def test_generate_without_profile(self):
        response = self.client.post(reverse('footprint-generate'), format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error'], "No onboarding data found for user")

    def test_generate_then_latest(self):
        create_profile(self.user)

        response = self.client.post(reverse('footprint-generate'), format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['footprint']['totalKgCO2eAnnual'], 42000)
        self.assertEqual(response.data['dashboard']['footprintId'], response.data['footprint']['id'])

        response = self.client.get(reverse('footprint-latest'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['businessName'], "Green Bean Cafe")
        self.assertEqual(response.data['completedActionIds'], [])

    def test_generate_failure_returns_502(self):
        create_profile(self.user)
        self.model_client.failures = {'quick_wins': RuntimeError("rate limited")}

        response = self.client.post(reverse('footprint-generate'), format='json')

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertIn("Failed to generate dashboard", response.data['error'])
        self.assertFalse(CarbonFootprint.objects.exists())

    def test_latest_without_data(self):
        response = self.client.get(reverse('footprint-latest'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNone(response.data)

    def test_toggle_action(self):
        payload = {'actionId': 'action_97', 'actionType': 'actionplan', 'completed': True}
        response = self.client.post(reverse('footprint-toggle-action'), payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'success': True, 'actionId': 'action_97', 'completed': True})
        self.assertTrue(CompletedAction.objects.filter(user=self.user, action_id='action_97').exists())

    def test_toggle_invalid_action_type(self):
        payload = {'actionId': 'action_97', 'actionType': 'later', 'completed': True}
        response = self.client.post(reverse('footprint-toggle-action'), payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('actionType', response.data['details'])

    def test_chat_requires_messages(self):
        response = self.client.post(reverse('footprint-chat'), {'messages': []}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], "Messages are required")

    def test_chat_with_supplied_context(self):
        payload = {
            'messages': [{'role': 'user', 'content': 'How do I cut commute emissions?'}],
            'businessContext': {'industry': 'Consulting', 'employeeCount': 30},
        }
        response = self.client.post(reverse('footprint-chat'), payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['message'], self.model_client.reply)
        self.assertIn("Industry: Consulting", self.model_client.text_calls[0]['system'])

    def test_chat_builds_context_from_stored_data(self):
        create_profile(self.user)
        create_footprint(self.user)
        payload = {'messages': [{'role': 'user', 'content': 'What is my biggest source?'}]}

        response = self.client.post(reverse('footprint-chat'), payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        system = self.model_client.text_calls[0]['system']
        self.assertIn("Industry: Restaurant", system)
        self.assertIn("**LARGEST EMISSION SOURCE:** Electricity", system)

    def test_chat_model_failure(self):
        self.model_client.failures = {'chat': RuntimeError("upstream down")}
        payload = {'messages': [{'role': 'user', 'content': 'hi'}]}
        response = self.client.post(reverse('footprint-chat'), payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
