"""Upload, resize and render image attachments."""

import logging
from io import BytesIO
from pathlib import PurePath

from PIL import Image, ImageOps, UnidentifiedImageError

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.base import ContentFile
from django.utils.html import format_html, format_html_join

from .models import (
    Attachment,
    AttachmentRendition,
    validate_attachment_file_size,
)

logger = logging.getLogger(__name__)

FULL_SIZE = "full"


def upload_bits(filename, contents, title=""):
    """Store raw image bytes as a new Attachment.

    Raises ValidationError when the name is empty, the payload is empty,
    too large or not an image. Storage errors propagate unchanged.
    """
    name = PurePath(filename or "").name
    if not name:
        raise ValidationError("An attachment needs a file name.")
    if not contents:
        raise ValidationError("Empty file.")

    upload = ContentFile(contents, name=name)
    validate_attachment_file_size(upload)
    try:
        with Image.open(BytesIO(contents)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError) as e:
        raise ValidationError(f"{name} is not a valid image.") from e

    attachment = Attachment(title=title or PurePath(name).stem)
    attachment.file.save(name, upload, save=False)
    attachment.save()
    logger.info(
        "Uploaded attachment %s (%sx%s) as %s",
        attachment.pk,
        attachment.width,
        attachment.height,
        attachment.file.name,
    )
    return attachment


def create_renditions(attachment, sizes):
    """Generate square, centre-cropped renditions at each pixel size.

    Sizes larger than the shorter edge of the original are skipped, and
    existing renditions are kept. Returns the renditions created.
    """
    created = []
    attachment.file.open("rb")
    try:
        source = Image.open(attachment.file)
        source.load()
    finally:
        attachment.file.close()

    image_format = source.format or "PNG"
    shortest = min(source.size)
    base_name = PurePath(attachment.file.name).stem
    extension = PurePath(attachment.file.name).suffix or ".png"

    for size in sorted(set(int(s) for s in sizes), reverse=True):
        if size <= 0 or size > shortest:
            continue
        if attachment.renditions.filter(width=size, height=size).exists():
            continue

        img = ImageOps.fit(source, (size, size), Image.LANCZOS)
        if image_format == "JPEG" and img.mode in ("RGBA", "P"):
            img = img.convert("RGB")
        buf = BytesIO()
        img.save(buf, format=image_format)

        rendition = AttachmentRendition(
            attachment=attachment, width=size, height=size
        )
        rendition.file.save(
            f"{base_name}-{size}x{size}{extension}",
            ContentFile(buf.getvalue()),
            save=False,
        )
        rendition.save()
        created.append(rendition)

    if created:
        logger.info(
            "Created %d rendition(s) for attachment %s",
            len(created),
            attachment.pk,
        )
    return created


def get_attachment(attachment_id):
    """Return the Attachment for a stored id, or None if it is invalid."""
    if attachment_id in (None, ""):
        return None
    try:
        pk = int(attachment_id)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid attachment id %r", attachment_id)
        return None
    if pk <= 0:
        return None
    return (
        Attachment.objects.filter(pk=pk)
        .prefetch_related("renditions")
        .first()
    )


def _pixel_size(size):
    """Translate a size (``"full"``, a named size or pixels) to pixels."""
    if size is None or size == FULL_SIZE:
        return None
    named = getattr(settings, "IMAGE_SIZES", {})
    if size in named:
        return int(named[size])
    try:
        return int(size)
    except (TypeError, ValueError):
        return None


def _pick_rendition(attachment, size):
    pixels = _pixel_size(size)
    if pixels is None:
        return None
    renditions = attachment.renditions.all()
    exact = [r for r in renditions if r.width == pixels and r.height == pixels]
    if exact:
        return exact[0]
    larger = [r for r in renditions if min(r.width, r.height) >= pixels]
    if larger:
        return min(larger, key=lambda r: r.width * r.height)
    return None


def get_sized_url(attachment, size=FULL_SIZE):
    """Return the URL of ``attachment`` best matching ``size``.

    An exact rendition wins, then the smallest larger rendition, then
    the original image.
    """
    if attachment is None:
        return ""
    rendition = _pick_rendition(attachment, size)
    if rendition is not None:
        return rendition.url
    return attachment.url


def get_attachment_image(attachment, size=FULL_SIZE, attrs=None):
    """Return an ``<img>`` element for ``attachment`` at ``size``.

    ``attrs`` override the default ``src``, ``class`` and ``alt``
    attributes and are appended after them.
    """
    if attachment is None:
        return ""

    rendition = _pick_rendition(attachment, size)
    source = rendition or attachment
    size_class = size if isinstance(size, str) else f"{size}x{size}"

    html_attrs = {}
    if source.width and source.height:
        html_attrs["width"] = source.width
        html_attrs["height"] = source.height
    html_attrs["src"] = source.url
    html_attrs["class"] = f"attachment-{size_class} size-{size_class}"
    html_attrs["alt"] = attachment.alt_text.strip()
    html_attrs.update(attrs or {})

    return format_html(
        "<img{} />",
        format_html_join(
            "",
            ' {}="{}"',
            (
                (name, value)
                for name, value in html_attrs.items()
                if value is not None
            ),
        ),
    )
