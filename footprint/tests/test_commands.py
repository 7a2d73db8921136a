from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.test import SimpleTestCase

from utils.exceptions import AIConfigurationError


class TestAiConnectionCommandTest(SimpleTestCase):

    @mock.patch('footprint.services.ai_client.GenerativeModelClient.generate_text', return_value="Hello there, friend")
    def test_prints_reply(self, generate_text):
        out = StringIO()
        call_command('test_ai_connection', stdout=out)

        output = out.getvalue()
        self.assertIn("Credentials: SET", output)
        self.assertIn("Reply: Hello there, friend", output)
        self.assertEqual(generate_text.call_args.kwargs['max_tokens'], 20)

    @mock.patch('footprint.services.ai_client.GenerativeModelClient.generate_text', side_effect=AIConfigurationError())
    def test_reports_errors(self, _generate_text):
        out, err = StringIO(), StringIO()
        call_command('test_ai_connection', stdout=out, stderr=err)
        self.assertIn("No generative model credentials configured", err.getvalue())
