"""
BangunanPro - Django Settings (Infrastructure Only)
=====================================================
Django serves as the framework container for BangunanPro.
Store logic never imports Django; the adapter reads the BANGUNAN_* and
ADVISOR_* values below into a StoreSettings object.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY", "bangunanpro-dev-key-replace-before-deployment"
)

DEBUG = _env_bool("DJANGO_DEBUG", True)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")
    if host.strip()
]

# ── Installed Apps ────────────────────────────────────────────
# Django infrastructure only. The store runs in memory; no models.
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL ───────────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"

# ── Database ──────────────────────────────────────────────────
# Unused by the store; Django wants one configured.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "id"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Store ─────────────────────────────────────────────────────
BANGUNAN_STORE_NAME = os.environ.get("BANGUNAN_STORE_NAME", "BangunanPro")
BANGUNAN_GENERIC_CUSTOMER = os.environ.get("BANGUNAN_GENERIC_CUSTOMER", "Umum")
BANGUNAN_REQUIRE_TEMPO_CUSTOMER = _env_bool("BANGUNAN_REQUIRE_TEMPO_CUSTOMER", False)

# ── Advisor (Gemini) ──────────────────────────────────────────
ADVISOR_API_KEY = os.environ.get("API_KEY") or os.environ.get("GEMINI_API_KEY")
ADVISOR_MODEL = os.environ.get("ADVISOR_MODEL", "gemini-2.5-flash")
ADVISOR_BASE_URL = os.environ.get(
    "ADVISOR_BASE_URL", "https://generativelanguage.googleapis.com"
)
ADVISOR_TIMEOUT_SECONDS = float(os.environ.get("ADVISOR_TIMEOUT_SECONDS", "20"))

# ── Logging ───────────────────────────────────────────────────
BANGUNAN_LOG_LEVEL = os.environ.get("BANGUNAN_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "bangunan": {
            "handlers": ["console"],
            "level": BANGUNAN_LOG_LEVEL,
            "propagate": True,
        },
    },
}
