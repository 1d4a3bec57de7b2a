import re

from config import BLOCK_INDICATORS, MIN_HTML_LENGTH

_ERROR_TITLE = re.compile(r"<title[^>]*>\s*(?:error|404)\s*</title>", re.IGNORECASE)


def is_valid_html_content(html: str) -> bool:
    """Long enough, looks like a real document and is not a bare error page."""
    if not html or len(html) < MIN_HTML_LENGTH:
        return False
    h = html.lower()
    if "<html" not in h and "<!doctype" not in h:
        return False
    return not _ERROR_TITLE.search(html)


def is_blocked_response(html: str, indicators=None) -> bool:
    h = (html or "").lower()
    return any(mark in h for mark in (indicators or BLOCK_INDICATORS))
