"""
Azure credential helpers shared by the database settings and the
generative model client.
"""

import logging
import os

logger = logging.getLogger(__name__)

POSTGRES_AAD_SCOPE = "https://ossrdbms-aad.database.windows.net/.default"
COGNITIVE_SERVICES_SCOPE = "https://cognitiveservices.azure.com/.default"


def _standard_db_params():
    return {
        'ENGINE': os.getenv('DB_ENGINE', 'django.db.backends.postgresql'),
        'NAME': os.getenv('DB_NAME'),
        'USER': os.getenv('DB_USER'),
        'PASSWORD': os.getenv('DB_PASSWORD'),
        'HOST': os.getenv('DB_HOST'),
        'PORT': os.getenv('DB_PORT'),
        'OPTIONS': {
            'sslmode': os.getenv('DB_SSLMODE', 'require'),
            'client_encoding': 'UTF8'
        }
    }


def get_db_connection_params():
    """
    Get database connection parameters for Django.

    When DB_USE_AZURE_AD is set the password is an Azure AD access token
    obtained through DefaultAzureCredential; otherwise DB_PASSWORD is used.
    """
    params = _standard_db_params()
    if os.getenv('DB_USE_AZURE_AD', '').lower() not in ('1', 'true', 'yes'):
        return params

    try:
        from azure.identity import DefaultAzureCredential

        credential = DefaultAzureCredential()
        params['PASSWORD'] = credential.get_token(POSTGRES_AAD_SCOPE).token
    except Exception as e:
        # Fall back to standard authentication if Azure AD fails
        logger.error(f"Error getting Azure AD database token: {str(e)}")
    return params


def get_openai_token_provider():
    """
    Bearer token provider for Azure OpenAI when no API key is configured.
    """
    from azure.identity import DefaultAzureCredential, get_bearer_token_provider

    return get_bearer_token_provider(DefaultAzureCredential(), COGNITIVE_SERVICES_SCOPE)
