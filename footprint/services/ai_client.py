"""
Generative model interface.

Wraps the OpenAI SDK (Azure OpenAI or any OpenAI-compatible endpoint) behind
two calls: a schema-constrained object generation and a free-text reply.
"""

import json
import logging
import threading
import time

import jsonschema
from django.conf import settings
from openai import AzureOpenAI, OpenAI

from utils.azure_helper import get_openai_token_provider
from utils.exceptions import AIConfigurationError, AIResponseError

logger = logging.getLogger(__name__)


def parse_json_response(response_text):
    """
    Parse a model reply as JSON. Models sometimes wrap the payload in a
    markdown code block; the markers are stripped first.
    """
    if response_text is None:
        raise AIResponseError("Model returned an empty response")

    text = response_text.strip()
    if text.startswith("```json"):
        text = text[len("```json"):]
    elif text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]

    try:
        return json.loads(text.strip())
    except json.JSONDecodeError as e:
        raise AIResponseError(f"Model response is not valid JSON: {e}") from e


def validate_against_schema(data, schema, name="response"):
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.exceptions.ValidationError as e:
        path = "/".join(str(part) for part in e.absolute_path) or "<root>"
        raise AIResponseError(f"Model {name} failed schema validation at {path}: {e.message}") from e


class GenerativeModelClient:
    """
    Client for the hosted generative model.

    Azure OpenAI is used when an endpoint is configured (API key or Azure AD
    token); otherwise an OpenAI-compatible endpoint configured in AI_MODEL.
    """

    def __init__(self, azure_config=None, model_config=None):
        self.azure_config = azure_config if azure_config is not None else getattr(settings, 'AZURE_OPENAI', {})
        self.model_config = model_config if model_config is not None else getattr(settings, 'AI_MODEL', {})
        self.timeout = self.model_config.get('TIMEOUT', 120)
        self._client = None
        self._lock = threading.Lock()

        if not self.is_configured:
            logger.warning("Generative model credentials not configured")

    @property
    def uses_azure(self):
        return bool(self.azure_config.get('ENDPOINT'))

    @property
    def is_configured(self):
        return self.uses_azure or bool(self.model_config.get('API_KEY'))

    @property
    def model(self):
        if self.uses_azure:
            return self.azure_config.get('DEPLOYMENT')
        return self.model_config.get('MODEL')

    def _build_client(self):
        if self.uses_azure:
            kwargs = {
                'azure_endpoint': self.azure_config['ENDPOINT'],
                'api_version': self.azure_config.get('API_VERSION'),
                'timeout': self.timeout,
            }
            if self.azure_config.get('API_KEY'):
                kwargs['api_key'] = self.azure_config['API_KEY']
            else:
                kwargs['azure_ad_token_provider'] = get_openai_token_provider()
            return AzureOpenAI(**kwargs)

        if not self.model_config.get('API_KEY'):
            raise AIConfigurationError()

        kwargs = {'api_key': self.model_config['API_KEY'], 'timeout': self.timeout}
        if self.model_config.get('BASE_URL'):
            kwargs['base_url'] = self.model_config['BASE_URL']
        return OpenAI(**kwargs)

    def get_client(self):
        # Shared by the worker threads of the action plan fan-out
        with self._lock:
            if self._client is None:
                self._client = self._build_client()
            return self._client

    def generate_object(self, system, prompt, schema, name="response", temperature=0.2):
        """
        Request data matching a JSON Schema.

        Returns:
            dict: the parsed and validated model output

        Raises:
            AIConfigurationError: no credentials configured
            AIResponseError: the reply is not JSON or does not match the schema
            openai.OpenAIError: transport or service failure
        """
        client = self.get_client()
        started = time.monotonic()
        completion = client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            response_format={
                "type": "json_schema",
                "json_schema": {"name": name, "schema": schema, "strict": False},
            },
            temperature=temperature,
        )
        logger.info(f"Model call '{name}' completed in {time.monotonic() - started:.2f}s")

        data = parse_json_response(completion.choices[0].message.content)
        validate_against_schema(data, schema, name)
        return data

    def generate_text(self, system, messages, temperature=0.7, max_tokens=500):
        """Free-text reply to a conversation of {role, content} messages."""
        client = self.get_client()
        completion = client.chat.completions.create(
            model=self.model,
            messages=[{"role": "system", "content": system}] + [
                {"role": message["role"], "content": message["content"]} for message in messages
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        text = completion.choices[0].message.content
        if not text:
            raise AIResponseError("Model returned an empty response")
        return text


def get_model_client():
    return GenerativeModelClient()
