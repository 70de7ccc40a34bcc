"""WSGI config for the InnovaCart storefront."""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'innovacart.settings')

application = get_wsgi_application()
