"""Django settings for the concerts service.

Every value can be overridden from the environment. Defaults are for a
local quick start; do not run production on them.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def env_list(name: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, "").split(",") if item.strip()]


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-secret-key-change-in-prod")

DEBUG = env_bool("DJANGO_DEBUG", "false")

ALLOWED_HOSTS = env_list("DJANGO_ALLOWED_HOSTS") or ["*"]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "concerts",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("DJANGO_DB_NAME", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = False

USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": {
            "format": "%(asctime)s %(name)-12s %(levelname)-8s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "console",
        },
    },
    "loggers": {
        "": {
            "level": os.getenv("LOG_LEVEL", "INFO"),
            "handlers": ["console"],
        },
    },
}

# Ticketing service discovery

# "static" reads TICKETS_SERVICE_NAMES, "consul" queries a Consul agent.
TICKETS_DISCOVERY_BACKEND = os.getenv("TICKETS_DISCOVERY_BACKEND", "static")

TICKETS_SERVICE_NAMES = env_list("TICKETS_SERVICE_NAMES")

TICKETS_CONSUL_URL = os.getenv("TICKETS_CONSUL_URL", "http://localhost:8500")

TICKETS_CONSUL_TAG = os.getenv("TICKETS_CONSUL_TAG", "") or None

TICKETS_REQUEST_TIMEOUT = float(os.getenv("TICKETS_REQUEST_TIMEOUT", "5.0"))

CONCERTS_EMPTY_NAME_MATCH_IS_ERROR = env_bool("CONCERTS_EMPTY_NAME_MATCH_IS_ERROR", "true")
