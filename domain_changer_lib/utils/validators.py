"""
Utility validators for the domain‑changer library.
"""

import re
from typing import Optional
from urllib.parse import urlsplit

from domain_changer_lib.base.constants import ALLOWED_SCHEMES, WWW_PREFIX

# One or more domain labels (letters, digits, hyphen) joined by dots
HOST_REGEX = r"[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*"

_HOST_PATTERN = re.compile(HOST_REGEX)


def url_host(url: str) -> Optional[str]:
    """
    Return the lower‑cased host of an absolute ``http``/``https`` URL.

    The URL must carry an allowed scheme, a non‑empty host made of domain‑label
    characters only, a numeric port (if any) and no whitespace.

    Parameters
    ----------
    url: str
        The candidate URL, e.g. ``"https://twitter.com/"``.

    Returns
    -------
    str | None
        The host (``"twitter.com"``) or ``None`` when *url* is not a valid
        absolute URL.  Bare domains such as ``"twitter.com"`` yield ``None``.
    """
    if not isinstance(url, str) or not url or any(ch.isspace() for ch in url):
        return None

    try:
        parts = urlsplit(url)
        # Accessing the port validates it
        parts.port
    except ValueError:
        return None

    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        return None

    host = parts.hostname
    if not host or not _HOST_PATTERN.fullmatch(host):
        return None
    return host


def is_absolute_url(url: str) -> bool:
    """Check whether *url* is an absolute http(s) URL with a valid host."""
    return url_host(url) is not None


def normalize_host(host: str) -> str:
    """
    Bring a host to its comparable form: lower case, without a leading ``www.``.

    >>> normalize_host("WWW.Twitter.com")
    'twitter.com'
    """
    host = host.lower()
    if host.startswith(WWW_PREFIX):
        host = host[len(WWW_PREFIX) :]
    return host
