from __future__ import annotations

import json
import logging

from bs4 import BeautifulSoup

from .models import PartialProduct
from .pricing import normalize_price

logger = logging.getLogger(__name__)

AGGREGATE_PRICE_KEYS = ("lowPrice", "highPrice", "price")


def _iter_jsonld_blocks(soup: BeautifulSoup):
    for sc in soup.find_all("script", attrs={"type": "application/ld+json"}):
        raw = (sc.string or sc.get_text() or "").strip()
        if not raw:
            continue
        try:
            yield json.loads(raw)
        except ValueError as e:
            # malformed JSON-LD is common, skip the block
            logger.debug(f"Skipping malformed JSON-LD block: {e}")
            continue


def _nodes(data) -> list[dict]:
    """Flatten a JSON-LD block (object, list, @graph) into its nodes."""
    if isinstance(data, list):
        out = []
        for item in data:
            out.extend(_nodes(item))
        return out
    if not isinstance(data, dict):
        return []
    graph = data.get("@graph")
    if isinstance(graph, list):
        return [data] + [n for n in graph if isinstance(n, dict)]
    return [data]


def _has_type(node: dict, name: str) -> bool:
    t = node.get("@type")
    if isinstance(t, list):
        return name in t
    return t == name


def _text(value) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _image(value) -> str | None:
    if isinstance(value, list):
        for item in value:
            found = _image(item)
            if found:
                return found
        return None
    if isinstance(value, dict):
        return _text(value.get("url") or value.get("contentUrl"))
    return _text(value)


def _offer_price(offer) -> float | None:
    if not isinstance(offer, dict):
        return None
    keys = AGGREGATE_PRICE_KEYS if _has_type(offer, "AggregateOffer") else ("price",)
    for key in keys:
        price = normalize_price(offer.get(key))
        if price is not None:
            return price
    # some shops nest the amount in priceSpecification
    spec = offer.get("priceSpecification")
    if isinstance(spec, list):
        spec = spec[0] if spec else None
    if isinstance(spec, dict):
        return normalize_price(spec.get("price"))
    return None


def _product_price(product: dict) -> float | None:
    offers = product.get("offers")
    if isinstance(offers, list):
        return _offer_price(offers[0]) if offers else None
    return _offer_price(offers)


def _from_node(node: dict) -> PartialProduct | None:
    if _has_type(node, "Product"):
        return PartialProduct(
            name=_text(node.get("name")),
            price=_product_price(node),
            image_url=_image(node.get("image")),
            description=_text(node.get("description")),
        )
    if _has_type(node, "Offer") or _has_type(node, "AggregateOffer"):
        price = _offer_price(node)
        if price is not None:
            return PartialProduct(price=price)
    return None


def extract_from_jsonld(soup: BeautifulSoup) -> PartialProduct:
    """Product fields from the first JSON-LD block describing a product.

    Within a block a Product node wins over a bare Offer/AggregateOffer node.
    Later blocks are not looked at once one block yields something usable.
    """
    for data in _iter_jsonld_blocks(soup):
        nodes = _nodes(data)
        candidates = [n for n in nodes if _has_type(n, "Product")]
        candidates += [n for n in nodes if not _has_type(n, "Product")]
        for node in candidates:
            partial = _from_node(node)
            if partial is not None and not partial.is_empty():
                return partial
    return PartialProduct()


def extract_jsonld_price(soup: BeautifulSoup) -> float | None:
    """Any offer price found in any JSON-LD block, product or not."""
    for data in _iter_jsonld_blocks(soup):
        for node in _nodes(data):
            price = _offer_price(node) if (_has_type(node, "Offer") or _has_type(node, "AggregateOffer")) else None
            if price is None and "offers" in node:
                price = _product_price(node)
            if price is not None:
                return price
    return None
