"""Current-site tracking for multi-site deployments.

The current site defaults to ``settings.SITE_ID``. Code that needs to act
on behalf of another site switches to it for the duration of a block::

    with switched_site(other.pk):
        set_theme_mod("custom_logo", attachment.pk)

Switches nest; each ``restore_current_site`` undoes the latest switch.
"""

import contextvars
import logging
from contextlib import contextmanager

from django.conf import settings
from django.contrib.sites.models import Site

logger = logging.getLogger(__name__)

# Matches no Site row; used for values that are not a site id
UNKNOWN_SITE_ID = 0

_site_stack = contextvars.ContextVar("branding_site_stack", default=())


def get_current_site_id():
    """Return the id of the site currently being acted on."""
    stack = _site_stack.get()
    if stack:
        return stack[-1]
    return settings.SITE_ID


def resolve_site_id(site=None):
    """Normalise a Site, a site id or None (current site) to an id.

    Values that are not a site id resolve to ``UNKNOWN_SITE_ID``, so
    lookups for them find nothing.
    """
    if site is None:
        return get_current_site_id()
    if isinstance(site, Site):
        return site.pk
    try:
        return int(site)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid site id %r", site)
        return UNKNOWN_SITE_ID


def switch_to_site(site):
    """Make ``site`` the current site until ``restore_current_site``."""
    site_id = resolve_site_id(site)
    _site_stack.set(_site_stack.get() + (site_id,))
    return site_id


def restore_current_site():
    """Undo the most recent switch. Returns False if nothing was switched."""
    stack = _site_stack.get()
    if not stack:
        return False
    _site_stack.set(stack[:-1])
    return True


@contextmanager
def switched_site(site):
    site_id = switch_to_site(site)
    try:
        yield site_id
    finally:
        restore_current_site()


def get_home_url(site=None, path="/"):
    """Return the home URL for ``site`` with ``path`` appended.

    Uses the site's ``home`` option when set, otherwise the site domain
    under ``settings.SITE_SCHEME``. Unknown sites have no home URL.
    """
    from .options import get_option

    site_id = resolve_site_id(site)
    home = get_option("home", site=site_id)
    if not home:
        site_obj = Site.objects.filter(pk=site_id).first()
        if site_obj is None:
            return ""
        home = f"{settings.SITE_SCHEME}://{site_obj.domain}"
    home = home.rstrip("/")
    if path:
        home = f"{home}/{path.lstrip('/')}"
    return home
