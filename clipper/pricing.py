import math
import re

_NON_PRICE_CHARS = re.compile(r"[^\d.,]")


def normalize_price(text) -> float | None:
    """Turn raw price text ("1.299,99 €", "€ 15.50", "29€") into a float.

    Every character except digits, '.' and ',' is dropped and ',' becomes '.'.
    When several dots remain, all but the last one are thousands separators.
    Returns None when nothing parseable is left.
    """
    if text is None or isinstance(text, bool):
        return None

    if isinstance(text, (int, float)):
        value = float(text)
        if not math.isfinite(value) or value < 0:
            return None
        return round(value, 2)

    # a trailing separator is punctuation ("12,50 €.")
    cleaned = _NON_PRICE_CHARS.sub("", str(text)).replace(",", ".").rstrip(".")
    if not cleaned:
        return None

    if cleaned.count(".") > 1:
        head, _, tail = cleaned.rpartition(".")
        cleaned = head.replace(".", "") + "." + tail

    try:
        value = float(cleaned)
    except ValueError:
        return None

    if not math.isfinite(value):
        return None
    return round(value, 2)
