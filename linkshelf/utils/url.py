"""
URL helpers

Only http and https URLs are stored or rendered; anything else
(javascript:, data:, vbscript:) is rejected at the boundary and
dropped from public output.
"""

from typing import Dict, List
from urllib.parse import urlsplit

SAFE_URL_SCHEMES = ("http", "https")
MAX_URL_LENGTH = 2048


def is_safe_url(value: str) -> bool:
    """
    Check that a URL uses http/https and has a host

    Args:
        value: Candidate URL

    Returns:
        True if the URL is safe to store and render
    """
    if not isinstance(value, str):
        return False

    try:
        parts = urlsplit(value.strip())
    except ValueError:
        return False

    return parts.scheme.lower() in SAFE_URL_SCHEMES and bool(parts.netloc)


def parse_bulk_links(text: str) -> List[Dict[str, str]]:
    """
    Parse pasted text into link drafts, one URL per line

    Blank lines, overlong lines and lines that are not http/https
    URLs are skipped.
    The URL doubles as the initial display name.

    Args:
        text: Raw multi-line text

    Returns:
        List of {"url", "name"} dicts in input order
    """
    links = []
    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed or len(trimmed) > MAX_URL_LENGTH or not is_safe_url(trimmed):
            continue
        links.append({"url": trimmed, "name": trimmed[:200]})

    return links
