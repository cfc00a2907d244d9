"""Factory Boy factories for branding test data generation."""

from io import BytesIO

import factory
from factory.django import DjangoModelFactory
from PIL import Image


class SiteFactory(DjangoModelFactory):
    """Factory for django.contrib.sites Site."""

    class Meta:
        model = "sites.Site"
        django_get_or_create = ("domain",)

    domain = factory.Sequence(lambda n: f"site{n}.example.org")
    name = factory.Sequence(lambda n: f"Site {n}")


class AttachmentFactory(DjangoModelFactory):
    """Factory for Attachment with a generated image file."""

    class Meta:
        model = "branding.Attachment"

    file = factory.django.ImageField(
        filename="factory-image.png", width=256, height=256, format="PNG"
    )
    title = factory.Sequence(lambda n: f"Image {n}")
    alt_text = ""


def make_image_bytes(width=600, height=600, image_format="JPEG"):
    """Return encoded bytes of a solid-colour test image."""
    buf = BytesIO()
    Image.new("RGB", (width, height), color=(79, 70, 229)).save(
        buf, format=image_format
    )
    return buf.getvalue()
