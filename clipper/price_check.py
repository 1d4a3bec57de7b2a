"""Re-check stored product prices against the live product pages."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from config import PRICE_CHECK_DELAY
from .models import ExtractionOutcome
from .pipeline import fetch_and_parse_product
from .urls import is_valid_url

logger = logging.getLogger(__name__)

STABLE_BAND_PERCENT = 0.5


@dataclass
class TrackedProduct:
    id: str
    name: str
    price: float
    link: str = ""
    target_price: Optional[float] = None
    price_alert_enabled: bool = False


@dataclass
class PriceCheckResult:
    product_id: str
    product_name: str
    previous_price: float
    current_price: Optional[float] = None
    has_changed: bool = False
    percent_change: float = 0.0
    reached_target: bool = False


def check_product_price(
    product: TrackedProduct,
    fetch: Callable[[str], ExtractionOutcome] = fetch_and_parse_product,
) -> PriceCheckResult:
    result = PriceCheckResult(
        product_id=product.id,
        product_name=product.name,
        previous_price=product.price,
    )

    if not product.link or not is_valid_url(product.link):
        return result

    try:
        outcome = fetch(product.link)
    except Exception as e:
        logger.error(f"Failed to check price for product {product.id}: {e}")
        return result

    if not outcome.ok or outcome.product.price is None:
        return result

    current = outcome.product.price
    result.current_price = current
    result.has_changed = current != product.price
    if product.price > 0:
        result.percent_change = (current - product.price) / product.price * 100
    if product.target_price and current <= product.target_price:
        result.reached_target = True
    return result


def check_multiple_product_prices(
    products: list[TrackedProduct],
    on_progress: Optional[Callable[[int, int], None]] = None,
    delay: float = PRICE_CHECK_DELAY,
    fetch: Callable[[str], ExtractionOutcome] = fetch_and_parse_product,
) -> list[PriceCheckResult]:
    results = []
    total = len(products)
    for i, product in enumerate(products):
        results.append(check_product_price(product, fetch=fetch))
        if on_progress:
            on_progress(i + 1, total)
        # pause between items to stay under relay rate limits
        if i < total - 1 and delay > 0:
            time.sleep(delay)
    return results


def get_checkable_products(products: list[TrackedProduct]) -> list[TrackedProduct]:
    return [p for p in products if p.link and is_valid_url(p.link) and p.price_alert_enabled]


def filter_price_drops(results: list[PriceCheckResult]) -> list[PriceCheckResult]:
    return [r for r in results if r.current_price is not None and r.has_changed and r.percent_change < 0]


def filter_target_reached(results: list[PriceCheckResult]) -> list[PriceCheckResult]:
    return [r for r in results if r.reached_target]


def format_price_change(percent_change: float) -> tuple[str, str, str]:
    """(text, color, icon) for display next to a product."""
    if abs(percent_change) < STABLE_BAND_PERCENT:
        return "Stable", "gray", "stable"
    if percent_change < 0:
        return f"{abs(percent_change):.1f}% moins cher", "green", "down"
    return f"{percent_change:.1f}% plus cher", "red", "up"


def calculate_savings(previous_price: float, current_price: float) -> float:
    return max(0.0, previous_price - current_price)
