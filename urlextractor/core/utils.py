"""
Core utility functions for URL Extractor
"""
import re
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlsplit

ELLIPSIS = "..."

_SCHEME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*:')
# Schemes that require a host
_HIERARCHICAL_SCHEMES = {"http", "https", "ftp", "ws", "wss", "file"}


def is_valid_url(value: str) -> bool:
    """
    Check URL syntax without touching the network.

    A URL needs a scheme; the common hierarchical schemes (http, https, ftp,
    ws, wss) also need a non-empty host. Like a browser URL parser, those
    schemes accept the host with any number of leading slashes, so
    "http:example.com" and "http:/example.com" are valid. "file" URLs need
    "//" and may have an empty host.

    Args:
        value: Raw user input

    Returns:
        True if the input parses as an absolute URL
    """
    candidate = value.strip()
    if not candidate or not _SCHEME_PATTERN.match(candidate):
        return False

    scheme, rest = candidate.split(":", 1)
    scheme = scheme.lower()
    if scheme not in _HIERARCHICAL_SCHEMES:
        return bool(rest)

    rest = rest.replace("\\", "/")
    if scheme == "file":
        return rest.startswith("//")

    try:
        parts = urlsplit("//" + rest.lstrip("/"))
        # Accessing port validates it
        parts.port
    except ValueError:
        return False

    host = parts.hostname or ""
    return bool(host) and not any(ch.isspace() for ch in parts.netloc)


def truncate_text(text: str, max_length: int) -> str:
    """Cut text to max_length characters and mark the cut with an ellipsis"""
    if len(text) <= max_length:
        return text
    return text[:max_length] + ELLIPSIS


def format_date(value: datetime) -> str:
    """Full date for the details view, e.g. 'May 1, 2024, 02:30 PM'"""
    local = value.astimezone()
    return f"{local.strftime('%b')} {local.day}, {local.year}, {local.strftime('%I:%M %p')}"


def get_relative_time(value: datetime, now: Optional[datetime] = None) -> str:
    """Short relative time for table cells"""
    if now is None:
        now = datetime.now(timezone.utc)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    seconds = int((now - value).total_seconds())
    if seconds < 60:
        return "just now"

    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m ago"

    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"

    days = hours // 24
    if days < 7:
        return f"{days}d ago"

    local = value.astimezone()
    return f"{local.strftime('%b')} {local.day}, {local.year}"
