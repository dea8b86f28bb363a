"""Shared fixtures: Django settings, eager Celery, and a stand-in for Pandoc."""

import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "SiteCraft.settings")
os.environ.setdefault("CELERY_BROKER_URL", "memory://")
os.environ.setdefault("CELERY_RESULT_BACKEND", "cache+memory://")
os.environ.setdefault("CELERY_TASK_ALWAYS_EAGER", "1")

django.setup()


@pytest.fixture
def passthrough_pandoc(monkeypatch):
    """
    Replace pypandoc.convert_text with a function that returns its input.

    Tests then write document bodies directly as HTML.  Every call is
    recorded in the returned list.
    """
    calls = []

    def convert_text(text, to, format, extra_args=(), **kwargs):
        calls.append({"text": text, "to": to, "format": format, "extra_args": list(extra_args)})
        return text

    monkeypatch.setattr("compiler.markdown.renderer.pypandoc.convert_text", convert_text)
    return calls
