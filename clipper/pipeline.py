from __future__ import annotations

import logging
import threading
from typing import Callable

from bs4 import BeautifulSoup

from config import PLACEHOLDER_NAME, ClipperSettings
from .errors import ClipperError, InvalidUrl, NetworkError, PriceNotFound
from .extract_generic import extract_generic
from .fetcher import create_session, fetch_via_relay
from .models import ExtractedProduct, ExtractionOutcome, Failure, PartialProduct, Success, merge_partials
from .sites import SiteRegistry, default_registry
from .urls import make_absolute_url, source_of, validate_url

logger = logging.getLogger(__name__)


def _run_stage(name: str, stage: Callable[[], PartialProduct]) -> PartialProduct:
    # a stage that blows up counts as a stage that found nothing
    try:
        return stage() or PartialProduct()
    except Exception as e:
        logger.debug(f"Extraction stage {name} failed: {e}")
        return PartialProduct()


def extract_product(html: str, url: str, registry: SiteRegistry | None = None) -> ExtractedProduct:
    """Site recipe first, then structured data and generic metadata fill the gaps."""
    registry = registry or default_registry()
    soup = BeautifulSoup(html, "lxml")

    stages = []
    recipe = registry.get_recipe(url)
    if recipe is not None:
        stages.append(_run_stage(recipe.key, lambda: recipe.extract(soup, url)))
    stages.append(_run_stage("generic", lambda: extract_generic(soup)))

    data = merge_partials(*stages)
    return ExtractedProduct(
        name=data.name or PLACEHOLDER_NAME,
        price=data.price,
        image_url=make_absolute_url(data.image_url, url) if data.image_url else "",
        description=data.description or "",
        link=url,
        source=source_of(url),
    )


def parse_product_from_html(html: str, url: str, registry: SiteRegistry | None = None) -> ExtractionOutcome:
    """Run the extraction chain on HTML already in hand."""
    try:
        url = validate_url(url)
        return Success(extract_product(html or "", url, registry))
    except ClipperError as e:
        return Failure(e.message)
    except Exception as e:
        logger.error(f"Error parsing {url}: {e}")
        return Failure("Erreur lors du parsing")


def fetch_and_parse_product(
    url: str,
    session=None,
    settings: ClipperSettings | None = None,
    registry: SiteRegistry | None = None,
    cancel_event: threading.Event | None = None,
) -> ExtractionOutcome:
    """Fetch a product page through the relays and extract it.

    Relays are tried one after the other. The first candidate with a price is
    returned right away; otherwise the best candidate without price is kept
    and returned once every relay has been tried. Never raises.
    """
    settings = settings or ClipperSettings()

    try:
        url = validate_url(url)
    except InvalidUrl as e:
        return Failure(e.message)

    registry = registry or SiteRegistry.from_settings(settings)

    if not settings.relays:
        return Failure("Aucun relais configuré")

    if session is None:
        session = create_session(settings.use_cloudscraper)

    best: ExtractedProduct | None = None
    reason = "Aucun relais n'a répondu"

    for template in settings.relays:
        if cancel_event is not None and cancel_event.is_set():
            logger.info(f"Extraction cancelled for {url}")
            reason = "Extraction annulée"
            break

        try:
            html = fetch_via_relay(session, template, url, timeout=settings.timeout)
        except ClipperError as e:
            logger.warning(f"Relay {template} failed for {url}: {e.message}")
            reason = e.message
            continue
        except Exception as e:
            # cloudscraper challenge errors are not RequestExceptions
            logger.warning(f"Relay {template} failed for {url}: {e}")
            reason = NetworkError(type(e).__name__).message
            continue

        try:
            product = extract_product(html, url, registry)
        except Exception as e:
            logger.error(f"Error extracting {url}: {e}")
            reason = "Erreur lors du parsing"
            continue

        if product.price is not None:
            logger.info(f"Extracted {product.name!r} at {product.price} via {template}")
            return Success(product)

        if best is None or product.filled_count() > best.filled_count():
            best = product
        reason = PriceNotFound().message

    if best is not None:
        logger.info(f"No price found for {url}, returning partial product")
        return Success(best)
    return Failure(reason)
