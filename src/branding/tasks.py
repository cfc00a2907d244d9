"""Celery tasks for the branding app."""

import logging

from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task
def regenerate_renditions(attachment_id: int, sizes=None):
    """Rebuild the square renditions of an attachment.

    Defaults to the site icon sizes. Existing renditions are deleted
    first so edits to the original are picked up.
    """
    from .attachments import create_renditions
    from .models import Attachment
    from .services.site_icon import site_icon_image_sizes

    try:
        attachment = Attachment.objects.get(pk=attachment_id)
    except Attachment.DoesNotExist:
        logger.warning(
            "Skipping renditions for missing attachment %s", attachment_id
        )
        return 0

    if sizes is None:
        sizes = site_icon_image_sizes()

    attachment.renditions.all().delete()
    return len(create_renditions(attachment, sizes))
