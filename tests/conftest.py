import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ClubSite.settings")
django.setup()

from django.apps import apps  # noqa: E402
from django.test import Client  # noqa: E402
from django.test.utils import setup_test_environment  # noqa: E402

setup_test_environment()


@pytest.fixture
def registry():
    return apps.get_app_config("club").highlight_registry


@pytest.fixture
def content_root(tmp_path):
    """An empty content directory; tests drop .md files into it."""
    root = tmp_path / "content"
    root.mkdir()
    return root


@pytest.fixture
def client():
    return Client()
