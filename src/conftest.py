"""Shared pytest fixtures for publisher tests."""

import pytest

from django.conf import settings

# Use local filesystem storage for tests (avoids S3 credential errors)
settings.STORAGES["default"] = {
    "BACKEND": "django.core.files.storage.FileSystemStorage",
}
settings.STORAGES["staticfiles"] = {
    "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
}

# Run Celery tasks synchronously in tests
settings.CELERY_TASK_ALWAYS_EAGER = True
settings.CELERY_TASK_EAGER_PROPAGATES = True

# Use in-memory cache for tests (avoids Redis connection errors)
settings.CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}


@pytest.fixture(autouse=True)
def _clear_cache():
    """Clear the in-memory cache before each test.

    Cached options would otherwise outlive the rolled-back rows of the
    test that wrote them.
    """
    from django.core.cache import cache

    cache.clear()


@pytest.fixture(autouse=True)
def _media_root(settings, tmp_path):
    """Write uploads to a per-test directory."""
    settings.MEDIA_ROOT = tmp_path / "media"
    settings.MEDIA_URL = "/media/"


@pytest.fixture(autouse=True)
def _clear_filters():
    """Start every test with no registered branding filters."""
    from django.apps import apps

    registry = apps.get_app_config("branding").filters
    registry.clear()
    yield
    registry.clear()


@pytest.fixture
def image_bytes():
    from branding.factories import make_image_bytes

    return make_image_bytes()


# --- Site fixtures ---


@pytest.fixture
def current_site(db):
    from django.contrib.sites.models import Site

    return Site.objects.get(pk=settings.SITE_ID)


@pytest.fixture
def other_site(db):
    from branding.factories import SiteFactory

    return SiteFactory(domain="other.example.org", name="Other")


# --- Attachment fixtures ---


@pytest.fixture
def attachment(db, image_bytes):
    from branding.attachments import upload_bits

    return upload_bits("test-image.jpg", image_bytes)


@pytest.fixture
def icon_attachment(db, image_bytes):
    """An uploaded image with the site icon renditions generated."""
    from branding.attachments import create_renditions, upload_bits

    uploaded = upload_bits("test-image.jpg", image_bytes)
    create_renditions(uploaded, settings.SITE_ICON_SIZES)
    return uploaded


@pytest.fixture
def site_icon(current_site, icon_attachment):
    from branding.services.site_icon import remove_site_icon, set_site_icon

    set_site_icon(icon_attachment)
    yield icon_attachment
    remove_site_icon()


@pytest.fixture
def custom_logo(current_site, attachment):
    from branding.services.custom_logo import (
        remove_custom_logo,
        set_custom_logo,
    )

    set_custom_logo(attachment)
    yield attachment
    remove_custom_logo()
