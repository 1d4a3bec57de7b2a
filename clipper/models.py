from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from typing import Optional, Union

from config import PLACEHOLDER_NAME


@dataclass
class PartialProduct:
    """Fields found by one extraction stage. Empty means "not found"."""
    name: Optional[str] = None
    price: Optional[float] = None
    image_url: Optional[str] = None
    description: Optional[str] = None

    def is_empty(self) -> bool:
        return all(_is_missing(getattr(self, f.name)) for f in fields(self))

    def filled_count(self) -> int:
        return sum(1 for f in fields(self) if not _is_missing(getattr(self, f.name)))


@dataclass(frozen=True)
class ExtractedProduct:
    name: str
    price: Optional[float]
    image_url: str
    description: str
    link: str
    source: str

    def to_dict(self) -> dict:
        return asdict(self)

    def filled_count(self) -> int:
        named = 0 if self.name == PLACEHOLDER_NAME else 1
        return named + sum(1 for v in (self.price, self.image_url, self.description) if not _is_missing(v))


@dataclass(frozen=True)
class Success:
    product: ExtractedProduct
    ok = True


@dataclass(frozen=True)
class Failure:
    reason: str
    ok = False


ExtractionOutcome = Union[Success, Failure]


def _is_missing(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def merge_partials(*partials: Optional[PartialProduct]) -> PartialProduct:
    # take the first non-empty value per field, later stages only fill gaps
    out = PartialProduct()
    for partial in partials:
        if partial is None:
            continue
        for f in fields(PartialProduct):
            if _is_missing(getattr(out, f.name)):
                value = getattr(partial, f.name)
                if not _is_missing(value):
                    setattr(out, f.name, value)
    return out
