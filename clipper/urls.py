import re
from urllib.parse import urljoin, urlparse

from .errors import InvalidUrl

_URL_IN_TEXT = re.compile(r"https?://[^\s<>\"{}|\\^`\[\]]+", re.IGNORECASE)


def is_valid_url(url: str) -> bool:
    if not isinstance(url, str) or not url.strip():
        return False
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.hostname)


def validate_url(url: str) -> str:
    """Return the stripped URL or raise InvalidUrl."""
    if not is_valid_url(url):
        raise InvalidUrl(url)
    return url.strip()


def hostname_of(url: str) -> str:
    return (urlparse(url).hostname or "").lower()


def source_of(url: str) -> str:
    """Hostname shown to the user, without the www. prefix."""
    host = hostname_of(url)
    if host.startswith("www."):
        host = host[4:]
    return host


def make_absolute_url(url: str, base_url: str) -> str:
    if url.startswith("//"):
        return "https:" + url
    if not url.startswith("http"):
        return urljoin(base_url, url)
    return url


def extract_url_from_text(text: str) -> str | None:
    """First http(s) URL inside a shared text blob, e.g. "Regarde ça https://..."."""
    if not text:
        return None
    m = _URL_IN_TEXT.search(text)
    return m.group(0) if m else None
