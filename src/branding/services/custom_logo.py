"""Custom logo lookup and rendering.

The logo is the attachment whose id is stored in the ``custom_logo``
theme mod of the site's active theme.
"""

import logging

from django.conf import settings
from django.utils.html import format_html

from ..attachments import FULL_SIZE, get_attachment, get_attachment_image
from ..formatting import esc_url
from ..hooks import get_filters
from ..options import get_theme_mod, remove_theme_mod, set_theme_mod
from ..sites import get_home_url, resolve_site_id

logger = logging.getLogger(__name__)

CUSTOM_LOGO_MOD = "custom_logo"


def get_theme_support(feature, key=None):
    """Return the active theme's declaration for ``feature``.

    With ``key``, return that entry of the declaration (or None).
    """
    support = getattr(settings, "THEME_SUPPORT", {}).get(feature)
    if key is None:
        return support
    if not isinstance(support, dict):
        return None
    return support.get(key)


def get_custom_logo_size():
    return get_theme_support("custom-logo", "size") or FULL_SIZE


def get_custom_logo_attachment(site=None):
    return get_attachment(get_theme_mod(CUSTOM_LOGO_MOD, site=site))


def has_custom_logo(site=None):
    return get_custom_logo_attachment(site) is not None


def set_custom_logo(attachment, site=None):
    attachment_id = getattr(attachment, "pk", attachment)
    set_theme_mod(CUSTOM_LOGO_MOD, attachment_id, site=site)
    logger.info(
        "Custom logo for site %s set to attachment %s",
        resolve_site_id(site),
        attachment_id,
    )


def remove_custom_logo(site=None):
    return remove_theme_mod(CUSTOM_LOGO_MOD, site=site)


def get_custom_logo(site=None, filters=None):
    """Return the home-linked logo markup for ``site``, or ``""``."""
    site_id = resolve_site_id(site)
    attachment = get_custom_logo_attachment(site_id)
    html = ""
    if attachment is not None:
        size = get_custom_logo_size()
        image = get_attachment_image(
            attachment,
            size,
            attrs={
                "class": f"custom-logo attachment-{size}",
                "data-size": size,
                "itemprop": "logo",
            },
        )
        html = format_html(
            '<a href="{}" class="custom-logo-link" rel="home" '
            'itemprop="url">{}</a>',
            esc_url(get_home_url(site_id, "/")),
            image,
        )
    return get_filters(filters).apply_filters("get_custom_logo", html, site_id)
