"""Per-site settings storage: options and theme modifications.

Reads go through the Django cache (no expiry); every write or delete
invalidates the affected key. ``site`` arguments accept a Site, a site id
or None for the current site.
"""

import logging

from django.conf import settings
from django.core.cache import cache

from .models import Option, ThemeMod
from .sites import UNKNOWN_SITE_ID, resolve_site_id

logger = logging.getLogger(__name__)

_MISSING = object()


def _option_cache_key(site_id, name):
    return f"branding:option:{site_id}:{name}"


def _theme_mod_cache_key(site_id, theme, name):
    return f"branding:theme_mod:{site_id}:{theme}:{name}"


def invalidate_option(site_id, name):
    cache.delete(_option_cache_key(site_id, name))


def invalidate_theme_mod(site_id, theme, name):
    cache.delete(_theme_mod_cache_key(site_id, theme, name))


def _writable_site_id(site):
    site_id = resolve_site_id(site)
    if site_id == UNKNOWN_SITE_ID:
        raise ValueError(f"Cannot store settings for invalid site {site!r}")
    return site_id


def _cached_lookup(key, queryset):
    entry = cache.get(key, _MISSING)
    if entry is _MISSING:
        value = queryset.values_list("value", flat=True).first()
        entry = (value is not None, value)
        cache.set(key, entry, timeout=None)
    return entry


def get_option(name, default=None, site=None):
    """Return the value of option ``name``, or ``default`` when unset."""
    site_id = resolve_site_id(site)
    found, value = _cached_lookup(
        _option_cache_key(site_id, name),
        Option.objects.filter(site_id=site_id, name=name),
    )
    return value if found else default


def update_option(name, value, site=None):
    """Create or replace option ``name``."""
    site_id = _writable_site_id(site)
    Option.objects.update_or_create(
        site_id=site_id, name=name, defaults={"value": str(value)}
    )
    invalidate_option(site_id, name)
    logger.debug("Updated option %s for site %s", name, site_id)


def delete_option(name, site=None):
    """Remove option ``name``. Returns True if it existed."""
    site_id = resolve_site_id(site)
    deleted, _ = Option.objects.filter(site_id=site_id, name=name).delete()
    invalidate_option(site_id, name)
    if deleted:
        logger.debug("Deleted option %s for site %s", name, site_id)
    return bool(deleted)


def get_stylesheet(site=None):
    """Return the name of the site's active theme."""
    return get_option("stylesheet", site=site) or settings.DEFAULT_THEME


def get_theme_mod(name, default=None, site=None):
    """Return theme modification ``name`` for the site's active theme."""
    site_id = resolve_site_id(site)
    theme = get_stylesheet(site_id)
    found, value = _cached_lookup(
        _theme_mod_cache_key(site_id, theme, name),
        ThemeMod.objects.filter(site_id=site_id, theme=theme, name=name),
    )
    return value if found else default


def set_theme_mod(name, value, site=None):
    site_id = _writable_site_id(site)
    theme = get_stylesheet(site_id)
    ThemeMod.objects.update_or_create(
        site_id=site_id,
        theme=theme,
        name=name,
        defaults={"value": str(value)},
    )
    invalidate_theme_mod(site_id, theme, name)
    logger.debug(
        "Set theme mod %s for theme %s on site %s", name, theme, site_id
    )


def remove_theme_mod(name, site=None):
    site_id = resolve_site_id(site)
    theme = get_stylesheet(site_id)
    deleted, _ = ThemeMod.objects.filter(
        site_id=site_id, theme=theme, name=name
    ).delete()
    invalidate_theme_mod(site_id, theme, name)
    return bool(deleted)


def clear_references(attachment_id):
    """Drop every option and theme mod that points at ``attachment_id``.

    Only the ``site_icon`` option and ``custom_logo`` theme mod hold
    attachment references.
    """
    value = str(attachment_id)
    options = list(
        Option.objects.filter(name="site_icon", value=value).values_list(
            "site_id", "name"
        )
    )
    theme_mods = list(
        ThemeMod.objects.filter(name="custom_logo", value=value).values_list(
            "site_id", "theme", "name"
        )
    )
    Option.objects.filter(name="site_icon", value=value).delete()
    ThemeMod.objects.filter(name="custom_logo", value=value).delete()
    for site_id, name in options:
        invalidate_option(site_id, name)
    for site_id, theme, name in theme_mods:
        invalidate_theme_mod(site_id, theme, name)
    if options or theme_mods:
        logger.info(
            "Cleared %d setting(s) referencing attachment %s",
            len(options) + len(theme_mods),
            attachment_id,
        )
