from __future__ import annotations

import logging
import random
from urllib.parse import quote

import cloudscraper
import requests
from fake_useragent import UserAgent

from config import DEFAULT_HEADERS, USER_AGENTS, TIMEOUT
from .classifier import is_blocked_response, is_valid_html_content
from .errors import BlockedContent, HttpError, InvalidContent, NetworkError

logger = logging.getLogger(__name__)


def create_session(use_cloudscraper: bool = True) -> requests.Session:
    """Session used to talk to the relays"""
    session = None
    if use_cloudscraper:
        try:
            session = cloudscraper.create_scraper(
                browser={"browser": "chrome", "platform": "windows", "desktop": True}
            )
        except Exception as e:
            logger.warning(f"CloudScraper failed, using requests: {e}")
    if session is None:
        session = requests.Session()

    session.headers.update({
        "User-Agent": UserAgent(fallback=random.choice(USER_AGENTS)).random,
        **DEFAULT_HEADERS,
    })
    return session


def relay_url(template: str, url: str) -> str:
    return template.format(url=quote(url, safe=""))


def fetch_via_relay(session, template: str, url: str, timeout: float = TIMEOUT) -> str:
    """GET the target through one relay and return HTML fit for extraction.

    Raises NetworkError, HttpError, InvalidContent or BlockedContent.
    """
    proxied = relay_url(template, url)
    try:
        r = session.get(proxied, headers=DEFAULT_HEADERS, timeout=timeout)
    except requests.RequestException as e:
        raise NetworkError(type(e).__name__) from e

    if not 200 <= r.status_code < 300:
        raise HttpError(r.status_code)

    html = r.text or ""
    if not is_valid_html_content(html):
        raise InvalidContent()
    if is_blocked_response(html):
        raise BlockedContent()
    return html
