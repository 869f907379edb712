"""
WSGI config for the ipdesk project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'ipdesk.config.settings')

application = get_wsgi_application()
