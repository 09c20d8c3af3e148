"""
Event Board - Django Settings
=============================
Django hosts the eventboard app and owns configuration, logging and the
database behind the persisted mirror. Every value below can be overridden
from the environment.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
# BASE_DIR = project root (where manage.py lives)
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "eventboard-dev-key-replace-before-deployment")

DEBUG = os.environ.get("DJANGO_DEBUG", "true").lower() == "true"

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "eventboard",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── Database ──────────────────────────────────────────────────
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("EVENTBOARD_DB_PATH", BASE_DIR / "db.sqlite3"),
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Event Board ───────────────────────────────────────────────
# MIRROR_BACKEND selects where the serialized collection lives:
#   "django" - a StoredMirror row in DATABASES["default"]
#   "file"   - a JSON file at MIRROR_PATH
#   "memory" - process memory only
EVENTBOARD = {
    "MIRROR_BACKEND": os.environ.get("EVENTBOARD_MIRROR_BACKEND", "django"),
    "MIRROR_KEY": os.environ.get("EVENTBOARD_MIRROR_KEY", "events"),
    "MIRROR_PATH": os.environ.get(
        "EVENTBOARD_MIRROR_PATH", str(BASE_DIR / "data" / "events.json")
    ),
    "PLACEHOLDER_IMAGE": os.environ.get(
        "EVENTBOARD_PLACEHOLDER_IMAGE", "public/images/event-placeholder.jpg"
    ),
}

# ── Logging ───────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("EVENTBOARD_LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "loggers": {
        "eventboard": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": True,
        },
    },
}
