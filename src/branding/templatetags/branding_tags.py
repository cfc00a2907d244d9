"""Template tags that emit site icon and custom logo markup."""

import logging

from django import template
from django.utils.safestring import mark_safe

from branding.services.custom_logo import get_custom_logo
from branding.services.custom_logo import has_custom_logo as _has_custom_logo
from branding.services.site_icon import get_site_icon_url
from branding.services.site_icon import has_site_icon as _has_site_icon
from branding.services.site_icon import render_site_icon_tags

logger = logging.getLogger(__name__)

register = template.Library()


@register.simple_tag
def site_icon(site=None):
    """Emit the site icon ``<link>``/``<meta>`` tags, or nothing."""
    return mark_safe(render_site_icon_tags(site))


@register.simple_tag
def site_icon_url(size=512, url="", site=None):
    try:
        size = int(size)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid site icon size %r", size)
        return url
    return get_site_icon_url(size, url=url, site=site)


@register.simple_tag
def custom_logo(site=None):
    """Emit the home-linked custom logo, or nothing."""
    return mark_safe(get_custom_logo(site))


@register.simple_tag
def has_site_icon(site=None):
    return _has_site_icon(site)


@register.simple_tag
def has_custom_logo(site=None):
    return _has_custom_logo(site)
