"""
Django settings for the EcoPilot sustainability platform.

All deployment-specific values come from environment variables.
"""

import os
from datetime import timedelta
from pathlib import Path

from utils.azure_helper import get_db_connection_params

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-change-me')

DEBUG = os.getenv('DEBUG', 'False').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = [host for host in os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if host]

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'rest_framework_simplejwt',
    'django_filters',
    'profiles',
    'footprint',
    'ledger',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'ecopilot.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'ecopilot.wsgi.application'

# Database
# SQLite unless DB_ENGINE/DB_HOST point at a server database
if os.getenv('DB_HOST'):
    DATABASES = {'default': get_db_connection_params()}
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'rest_framework_simplejwt.authentication.JWTAuthentication',
        'rest_framework.authentication.SessionAuthentication',
    ),
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),
}

SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': timedelta(minutes=int(os.getenv('JWT_ACCESS_MINUTES', '60'))),
    'REFRESH_TOKEN_LIFETIME': timedelta(days=int(os.getenv('JWT_REFRESH_DAYS', '7'))),
}

# --- Generative model configuration ---
# Azure OpenAI takes precedence when an endpoint is configured. Without an
# API key the client authenticates with DefaultAzureCredential.
AZURE_OPENAI = {
    'ENDPOINT': os.getenv('AZURE_OPENAI_ENDPOINT'),
    'API_KEY': os.getenv('AZURE_OPENAI_API_KEY'),
    'API_VERSION': os.getenv('AZURE_OPENAI_API_VERSION', '2024-08-01-preview'),
    'DEPLOYMENT': os.getenv('AZURE_OPENAI_DEPLOYMENT_NAME', 'gpt-4o'),
}

# OpenAI-compatible fallback (OpenAI, OpenRouter, ...)
AI_MODEL = {
    'BASE_URL': os.getenv('OPENAI_BASE_URL'),
    'API_KEY': os.getenv('OPENAI_API_KEY'),
    'MODEL': os.getenv('OPENAI_MODEL', 'gpt-4o'),
    'TIMEOUT': float(os.getenv('AI_TIMEOUT_SECONDS', '120')),
    'MAX_PARALLEL_CALLS': int(os.getenv('AI_MAX_PARALLEL_CALLS', '6')),
}

# Spend-based (CEDA) emission factor table
CEDA_FACTORS_PATH = os.getenv('CEDA_FACTORS_PATH', str(BASE_DIR / 'ledger' / 'data' / 'ceda_factors.json'))

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'django': {'handlers': ['console'], 'level': 'INFO', 'propagate': False},
        'ecopilot': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'profiles': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'footprint': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'ledger': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'utils': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
    },
}
