"""WSGI entry point.

The database connection is verified before the application starts
accepting requests; a failure is logged and the process keeps running.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from modules.core.database import connect_db  # noqa: E402

connect_db()
