"""
WSGI config for the jasperrelay project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'jasperrelay.settings')

application = get_wsgi_application()
