"""Site icon lookup and ``<link>``/``<meta>`` tag rendering.

The site icon is the attachment whose id is stored in the site's
``site_icon`` option. It is present only while that option points at an
existing attachment.
"""

import logging

from django.conf import settings

from ..attachments import (
    FULL_SIZE,
    create_renditions,
    get_attachment,
    get_sized_url,
    upload_bits,
)
from ..formatting import esc_url
from ..hooks import get_filters
from ..options import delete_option, get_option, update_option
from ..sites import resolve_site_id

logger = logging.getLogger(__name__)

SITE_ICON_OPTION = "site_icon"
# Sizes at or above this render the original upload
FULL_ICON_SIZE = 512


def get_site_icon_attachment(site=None):
    return get_attachment(get_option(SITE_ICON_OPTION, site=site))


def _sized_icon_url(attachment, size, url, site_id, filters):
    if attachment is not None:
        if size >= FULL_ICON_SIZE:
            url = get_sized_url(attachment, FULL_SIZE)
        else:
            url = get_sized_url(attachment, size)
    return get_filters(filters).apply_filters(
        "get_site_icon_url", url, size, site_id
    )


def get_site_icon_url(size=FULL_ICON_SIZE, url="", site=None, filters=None):
    """Return the site icon URL at ``size`` pixels, or ``url`` if unset."""
    site_id = resolve_site_id(site)
    return _sized_icon_url(
        get_site_icon_attachment(site_id), size, url, site_id, filters
    )


def has_site_icon(site=None, filters=None):
    return bool(get_site_icon_url(FULL_ICON_SIZE, site=site, filters=filters))


def site_icon_image_sizes(filters=None):
    sizes = list(settings.SITE_ICON_SIZES)
    return get_filters(filters).apply_filters("site_icon_image_sizes", sizes)


def upload_site_icon(filename, contents, site=None, filters=None):
    """Upload an image, generate its icon renditions and use it as icon."""
    attachment = upload_bits(filename, contents)
    create_renditions(attachment, site_icon_image_sizes(filters))
    set_site_icon(attachment, site=site)
    return attachment


def set_site_icon(attachment, site=None):
    attachment_id = getattr(attachment, "pk", attachment)
    update_option(SITE_ICON_OPTION, attachment_id, site=site)
    logger.info(
        "Site icon for site %s set to attachment %s",
        resolve_site_id(site),
        attachment_id,
    )


def remove_site_icon(site=None):
    return delete_option(SITE_ICON_OPTION, site=site)


def site_icon_meta_tags(site=None, filters=None):
    """Return the icon tags for ``site`` in output order.

    The four fixed tags come first; ``site_icon_meta_tags`` filters may
    append to or otherwise transform the list. Empty entries are dropped,
    and a filter returning nothing leaves no tags.
    """
    site_id = resolve_site_id(site)
    attachment = get_site_icon_attachment(site_id)

    if not _sized_icon_url(attachment, FULL_ICON_SIZE, "", site_id, filters):
        return []

    def icon_url(size):
        return esc_url(_sized_icon_url(attachment, size, "", site_id, filters))

    meta_tags = [
        f'<link rel="icon" href="{icon_url(32)}" sizes="32x32" />',
        f'<link rel="icon" href="{icon_url(192)}" sizes="192x192" />',
        f'<link rel="apple-touch-icon-precomposed" href="{icon_url(180)}" />',
        f'<meta name="msapplication-TileImage" content="{icon_url(270)}" />',
    ]
    filtered = get_filters(filters).apply_filters(
        "site_icon_meta_tags", meta_tags
    )
    return [tag for tag in filtered or [] if tag]


def render_site_icon_tags(site=None, filters=None):
    """Return the icon tags as newline-terminated lines, or ``""``."""
    meta_tags = site_icon_meta_tags(site, filters=filters)
    if not meta_tags:
        return ""
    return "\n".join(meta_tags + [""])
