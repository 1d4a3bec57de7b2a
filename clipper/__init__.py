from .classifier import is_blocked_response, is_valid_html_content
from .extract_generic import extract_generic
from .extract_jsonld import extract_from_jsonld
from .models import ExtractedProduct, ExtractionOutcome, Failure, PartialProduct, Success, merge_partials
from .pipeline import extract_product, fetch_and_parse_product, parse_product_from_html
from .pricing import normalize_price
from .sites import SiteRegistry, resolve_site_key
from .urls import extract_url_from_text, is_valid_url

__all__ = [
    "ExtractedProduct",
    "ExtractionOutcome",
    "Failure",
    "PartialProduct",
    "SiteRegistry",
    "Success",
    "extract_from_jsonld",
    "extract_generic",
    "extract_product",
    "extract_url_from_text",
    "fetch_and_parse_product",
    "is_blocked_response",
    "is_valid_html_content",
    "is_valid_url",
    "merge_partials",
    "normalize_price",
    "parse_product_from_html",
    "resolve_site_key",
]
