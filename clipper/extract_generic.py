from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup

from .extract_jsonld import extract_from_jsonld, extract_jsonld_price
from .models import PartialProduct, merge_partials
from .pricing import normalize_price

logger = logging.getLogger(__name__)

_AMOUNT = r"([0-9]+(?:[.,\u00a0\u202f ][0-9]{3})*(?:[.,][0-9]{1,2})?)"

# Ordered, first match wins
PRICE_PATTERNS = [
    re.compile(r"(?:€|&euro;|\bEUR\b)\s*" + _AMOUNT, re.IGNORECASE),
    re.compile(_AMOUNT + r"\s*(?:€|&euro;|\bEUR\b)", re.IGNORECASE),
    re.compile(r"data-(?:product-)?price\s*=\s*[\"']?([0-9]+(?:[.,][0-9]+)?)", re.IGNORECASE),
    re.compile(r"\"(?:price|amount)\"\s*:\s*\"?([0-9]+(?:[.,][0-9]+)?)", re.IGNORECASE),
    re.compile(r"itemprop=[\"']price[\"'][^>]*?content=[\"']([0-9]+(?:[.,][0-9]+)?)", re.IGNORECASE),
    re.compile(r"content=[\"']([0-9]+(?:[.,][0-9]+)?)[\"'][^>]*?itemprop=[\"']price[\"']", re.IGNORECASE),
]


def meta_content(soup: BeautifulSoup, *, prop: str = None, name: str = None) -> str | None:
    attrs = {"property": prop} if prop else {"name": name}
    m = soup.find("meta", attrs=attrs)
    if m and m.get("content") and m["content"].strip():
        return m["content"].strip()
    return None


def _from_open_graph(soup: BeautifulSoup) -> PartialProduct:
    price_text = meta_content(soup, prop="og:price:amount") or meta_content(soup, prop="product:price:amount")
    return PartialProduct(
        name=meta_content(soup, prop="og:title"),
        price=normalize_price(price_text),
        image_url=meta_content(soup, prop="og:image"),
        description=meta_content(soup, prop="og:description"),
    )


def _from_standard_meta(soup: BeautifulSoup) -> PartialProduct:
    title = meta_content(soup, name="title")
    if not title and soup.title:
        title = soup.title.get_text(strip=True) or None
    return PartialProduct(
        name=title,
        image_url=meta_content(soup, name="image"),
        description=meta_content(soup, name="description"),
    )


def scan_price_patterns(html: str) -> float | None:
    for pattern in PRICE_PATTERNS:
        m = pattern.search(html)
        if m:
            return normalize_price(m.group(1))
    return None


def extract_generic(soup: BeautifulSoup) -> PartialProduct:
    """Structured data, then Open Graph, then plain meta tags, then price regexes."""
    data = merge_partials(
        extract_from_jsonld(soup),
        _from_open_graph(soup),
        _from_standard_meta(soup),
    )

    if data.price is None:
        data.price = extract_jsonld_price(soup)

    if data.price is None:
        body = soup.body if soup.body is not None else soup
        data.price = scan_price_patterns(str(body))
        if data.price is not None:
            logger.debug(f"Price {data.price} found by pattern scan")

    return data
