"""Context processors for site-wide template variables."""

from django.conf import settings
from django.utils.safestring import mark_safe


def site_settings(request):
    """Add site name and branding markup to template context.

    The icon tags and logo are each resolved once; the presence flags
    follow from the rendered markup.
    """
    from branding.services.custom_logo import get_custom_logo
    from branding.services.site_icon import render_site_icon_tags

    site_icon_tags = render_site_icon_tags()
    custom_logo = get_custom_logo()
    return {
        "SITE_NAME": settings.SITE_NAME,
        "has_site_icon": bool(site_icon_tags),
        "site_icon_tags": mark_safe(site_icon_tags),
        "has_custom_logo": bool(custom_logo),
        "custom_logo": mark_safe(custom_logo),
    }
