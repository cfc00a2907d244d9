"""HTML helpers shared by the branding renderers."""

import logging
import re
from urllib.parse import urlsplit

from django.utils.encoding import iri_to_uri
from django.utils.html import escape

logger = logging.getLogger(__name__)

ALLOWED_PROTOCOLS = frozenset(
    {
        "http",
        "https",
        "ftp",
        "ftps",
        "mailto",
        "news",
        "irc",
        "ircs",
        "gopher",
        "nntp",
        "feed",
        "telnet",
        "mms",
        "rtsp",
        "sms",
        "svn",
        "tel",
        "fax",
        "xmpp",
        "webcal",
        "urn",
    }
)

# Browsers ignore control characters when reading a scheme
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def esc_url(url, protocols=ALLOWED_PROTOCOLS):
    """Return ``url`` percent-encoded and escaped for an HTML attribute.

    Relative URLs pass through. Absolute URLs whose scheme is not in
    ``protocols`` (``javascript:``, ``data:`` and the like) become ``""``.
    """
    if not url:
        return ""
    url = _CONTROL_CHARS.sub("", str(url)).strip()
    if not url:
        return ""
    try:
        scheme = urlsplit(url).scheme
    except ValueError:
        logger.warning("Dropping malformed URL %r", url)
        return ""
    if scheme and scheme.lower() not in protocols:
        logger.warning("Dropping URL with disallowed scheme %r", scheme)
        return ""
    return escape(iri_to_uri(url))
