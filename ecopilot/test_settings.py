"""
Test settings - uses SQLite database
"""

from .settings import *

# Override database settings to use SQLite
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'test_db.sqlite3',
    }
}

# Tests never reach a real model endpoint; the client is patched
AZURE_OPENAI = {
    'ENDPOINT': None,
    'API_KEY': None,
    'API_VERSION': '2024-08-01-preview',
    'DEPLOYMENT': 'gpt-4o',
}

AI_MODEL = {
    'BASE_URL': None,
    'API_KEY': 'test-key',
    'MODEL': 'gpt-4o',
    'TIMEOUT': 5.0,
    'MAX_PARALLEL_CALLS': 6,
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

LOG_LEVEL = 'WARNING'
for _logger in LOGGING['loggers'].values():
    _logger['level'] = LOG_LEVEL
