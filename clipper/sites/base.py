"""
Rețete de extragere per site
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
import logging
import re

from bs4 import BeautifulSoup

from ..models import PartialProduct
from ..pricing import normalize_price
from ..urls import make_absolute_url

logger = logging.getLogger(__name__)

IMAGE_ATTRS = ("data-old-hires", "data-zoom-image", "data-src", "src", "content")


class SiteRecipe(ABC):
    """One extraction recipe, selected by a substring of the hostname"""

    key: str = ""

    def can_handle(self, hostname: str) -> bool:
        return bool(self.key) and self.key in hostname.lower()

    @abstractmethod
    def extract(self, soup: BeautifulSoup, url: str) -> PartialProduct:
        pass

    def _clean_text(self, text: Optional[str]) -> str:
        if not text:
            return ""
        return " ".join(text.split()).strip()

    def _first_text(self, soup: BeautifulSoup, selectors: List[str]) -> str:
        for selector in selectors:
            el = soup.select_one(selector)
            if not el:
                continue
            value = el.get("content") if el.name == "meta" else None
            value = self._clean_text(value or el.get_text(" "))
            if value:
                return value
        return ""

    def _first_price_text(self, soup: BeautifulSoup, selectors: List[str]) -> str:
        # itemprop/meta nodes carry the clean amount in content=
        for selector in selectors:
            el = soup.select_one(selector)
            if not el:
                continue
            value = self._clean_text(el.get("content") or el.get_text(" "))
            if value:
                return value
        return ""

    def _first_image(self, soup: BeautifulSoup, selectors: List[str], url: str) -> str:
        for selector in selectors:
            el = soup.select_one(selector)
            if not el:
                continue
            for attr in IMAGE_ATTRS:
                src = el.get(attr)
                if src and src.strip() and not src.strip().startswith("data:"):
                    return make_absolute_url(src.strip(), url)
        return ""


class SelectorRecipe(SiteRecipe):
    """Recipe driven by a dict of selector candidates (see recipes.yaml)"""

    def __init__(self, rules: Dict):
        self.rules = rules
        self.key = str(rules.get("key", "")).lower()

    def _candidates(self, field: str) -> List[str]:
        value = self.rules.get(field) or []
        if isinstance(value, str):
            return [value]
        return [str(v) for v in value]

    def _split_price(self, soup: BeautifulSoup) -> Optional[float]:
        whole = self._first_price_text(soup, self._candidates("price_whole"))
        whole = re.sub(r"[^\d]", "", whole)
        if not whole:
            return None
        fraction = self._first_price_text(soup, self._candidates("price_fraction"))
        fraction = re.sub(r"[^\d]", "", fraction) or "00"
        return normalize_price(f"{whole}.{fraction}")

    def _price(self, soup: BeautifulSoup) -> Optional[float]:
        price = self._split_price(soup)
        if price is None:
            price = normalize_price(self._first_price_text(soup, self._candidates("price")) or None)
        if price is None:
            meta = soup.select_one('meta[itemprop="price"][content]')
            if meta:
                price = normalize_price(meta.get("content"))
        return price

    def extract(self, soup: BeautifulSoup, url: str) -> PartialProduct:
        return PartialProduct(
            name=self._first_text(soup, self._candidates("title")) or None,
            price=self._price(soup),
            image_url=self._first_image(soup, self._candidates("image"), url) or None,
            description=self._first_text(soup, self._candidates("description")) or None,
        )

    def __repr__(self) -> str:
        return f"SelectorRecipe({self.key!r})"
