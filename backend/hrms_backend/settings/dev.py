# backend/hrms_backend/settings/dev.py
from .base import *

DEBUG = True

ALLOWED_HOSTS = ["*", "localhost", "127.0.0.1"]

CORS_ALLOW_ALL_ORIGINS = True

REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"] = REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"] + [
    "rest_framework.renderers.BrowsableAPIRenderer",
]

DATABASES = {
    "default": {"ENGINE": "django.db.backends.sqlite3", "NAME": str(BASE_DIR / "db.sqlite3")}
}
