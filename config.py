"""
Configurări globale pentru web clipper
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

# Relay-uri CORS, încercate în ordine. {url} primește URL-ul țintă encodat
RELAY_ENDPOINTS = [
    "https://api.allorigins.win/raw?url={url}",
    "https://corsproxy.io/?url={url}",
    "https://api.codetabs.com/v1/proxy?quest={url}",
]

# Indicatori de pagină blocată (captcha, rate limit etc.), lower-case
BLOCK_INDICATORS = [
    "captcha",
    "are you a robot",
    "not a robot",
    "robot check",
    "access denied",
    "accès refusé",
    "acces refuse",
    "rate limit",
    "too many requests",
    "unusual traffic",
    "trafic inhabituel",
    "cf-browser-verification",
    "attention required",
    "<title>just a moment",
    "verify you are human",
]

DEFAULT_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
}

# User agents pentru rotație
USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.2 Safari/605.1.15",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0",
]

MIN_HTML_LENGTH = 500
PLACEHOLDER_NAME = "Produit sans nom"

TIMEOUT = 30  # secunde per relay
PRICE_CHECK_DELAY = 0.5  # secunde între produse la re-verificarea prețurilor


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ClipperSettings:
    """Setări runtime pentru pipeline"""
    relays: List[str] = field(default_factory=lambda: list(RELAY_ENDPOINTS))
    timeout: float = TIMEOUT
    use_cloudscraper: bool = True
    recipes_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ClipperSettings":
        settings = cls()

        relays = os.environ.get("CLIPPER_RELAYS", "")
        parsed = [r.strip() for r in relays.split(",") if "{url}" in r]
        if parsed:
            settings.relays = parsed

        timeout = os.environ.get("CLIPPER_TIMEOUT")
        if timeout:
            try:
                settings.timeout = float(timeout)
            except ValueError:
                pass

        use_cs = os.environ.get("CLIPPER_USE_CLOUDSCRAPER")
        if use_cs:
            settings.use_cloudscraper = _env_bool(use_cs)

        settings.recipes_path = os.environ.get("CLIPPER_RECIPES_PATH") or None
        return settings
