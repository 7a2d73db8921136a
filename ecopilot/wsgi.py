"""
WSGI config for the EcoPilot project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'ecopilot.settings')

application = get_wsgi_application()
