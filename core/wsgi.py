import os
from core.settings.base import DEBUG

# Pick the settings module from the DEBUG flag in the environment
if DEBUG:
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'core.settings.development')
else:
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'core.settings.production')

from django.core.wsgi import get_wsgi_application

application = get_wsgi_application()
