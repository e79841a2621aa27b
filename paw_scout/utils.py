# File: paw_scout/utils.py
"""paw_scout.utils: small URL helpers shared by the merge and the renderers."""

from __future__ import annotations

import re
from typing import Sequence

from paw_scout.logger import logger

__all__: Sequence[str] = (
    "site_label",
    "is_absolute",
    "qualify_link",
)

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


def site_label(site: str) -> str:
    """Display form of a site root: the address without scheme or trailing slash."""
    return _SCHEME_RE.sub("", site.strip(), count=1).rstrip("/")


def is_absolute(link: str) -> bool:
    """True when *link* starts with a ``scheme://`` prefix."""
    return bool(_SCHEME_RE.match(link))


def qualify_link(site: str, link: str) -> str:
    """Prefix a relative *link* with its *site* root; absolute links are returned unchanged."""
    if is_absolute(link):
        return link
    if link and not link.startswith("/"):
        qualified = f"{site.rstrip('/')}/{link}"
    else:
        qualified = site.rstrip("/") + link
    logger.debug("Qualified link: %s -> %s", link, qualified)
    return qualified

