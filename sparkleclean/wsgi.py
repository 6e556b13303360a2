"""
WSGI config for the SparkleClean website.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'sparkleclean.settings.production')

application = get_wsgi_application()
