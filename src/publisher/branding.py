"""Branding callables for django-unfold SITE_LOGO and SITE_FAVICONS."""


def get_site_logo(request):
    """Return the URL of the custom logo, or None for text fallback."""
    from branding.services.custom_logo import get_custom_logo_attachment

    attachment = get_custom_logo_attachment()
    if attachment is None:
        return None
    return attachment.file.url


def get_site_favicons(request):
    """Return a list of favicon dicts for unfold, with static fallback."""
    from branding.services.site_icon import get_site_icon_url

    favicons = []
    for size in (32, 192):
        url = get_site_icon_url(size)
        if url:
            favicons.append(
                {"href": url, "rel": "icon", "sizes": f"{size}x{size}"}
            )
    if not favicons:
        return [{"href": "/static/favicon.ico"}]
    return favicons
