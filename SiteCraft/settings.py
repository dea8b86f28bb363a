"""
Django settings for SiteCraft.

Only what the compiler needs: the compiler app, logging, Celery and the
SITECRAFT_* knobs read by compiler.conf.
"""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "sitecraft-insecure-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"

INSTALLED_APPS = [
    "compiler",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

USE_TZ = True

# Celery
CELERY_BROKER_URL = os.environ.get("CELERY_BROKER_URL", "redis://localhost:6379/0")
CELERY_RESULT_BACKEND = os.environ.get("CELERY_RESULT_BACKEND", CELERY_BROKER_URL)
CELERY_TASK_ALWAYS_EAGER = os.environ.get("CELERY_TASK_ALWAYS_EAGER", "0") == "1"
CELERY_TASK_SERIALIZER = "json"
CELERY_RESULT_SERIALIZER = "json"

# Compiler
SITECRAFT_STRICT_FRONTMATTER = os.environ.get("SITECRAFT_STRICT_FRONTMATTER", "0") == "1"
SITECRAFT_WCAG_STRICT = os.environ.get("SITECRAFT_WCAG_STRICT", "0") == "1"
SITECRAFT_UNIQUE_HEADING_IDS = False

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "compiler": {
            "handlers": ["console"],
            "level": os.environ.get("SITECRAFT_LOG_LEVEL", "INFO"),
        },
    },
}
