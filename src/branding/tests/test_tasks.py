"""Tests for branding Celery tasks."""

from django.core.files.storage import default_storage

from branding.attachments import create_renditions
from branding.tasks import regenerate_renditions


class TestRegenerateRenditions:
    def test_default_sizes(self, attachment):
        count = regenerate_renditions(attachment.pk)
        assert count == 5
        assert set(attachment.renditions.values_list("width", flat=True)) == {
            512,
            270,
            192,
            180,
            32,
        }

    def test_replaces_existing(self, attachment):
        old = create_renditions(attachment, [64])[0]
        regenerate_renditions(attachment.pk, [32])

        assert list(attachment.renditions.values_list("width", flat=True)) == [
            32
        ]
        assert not default_storage.exists(old.file.name)

    def test_missing_attachment(self, db):
        assert regenerate_renditions(424242) == 0

    def test_delay_runs_eagerly(self, attachment):
        result = regenerate_renditions.delay(attachment.pk, [32])
        assert result.get() == 1
