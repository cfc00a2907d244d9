"""Signal handlers keeping settings and files in step with attachments."""

import logging

from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import Attachment, AttachmentRendition
from .options import clear_references

logger = logging.getLogger(__name__)


@receiver(post_delete, sender=Attachment)
def attachment_deleted(sender, instance, **kwargs):
    """Remove the stored image and any settings that pointed at it."""
    clear_references(instance.pk)
    if instance.file:
        instance.file.delete(save=False)
        logger.info("Deleted file for attachment %s", instance.pk)


@receiver(post_delete, sender=AttachmentRendition)
def rendition_deleted(sender, instance, **kwargs):
    if instance.file:
        instance.file.delete(save=False)
