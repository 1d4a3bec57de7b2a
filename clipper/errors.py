"""Errors raised while fetching a product page through a relay.

Messages are French: they are shown as-is to the end user.
"""


class ClipperError(Exception):
    """Base exception for all web clipper errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class InvalidUrl(ClipperError):
    """Raised before any network call when the target URL is malformed."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"URL invalide : {url}")


class HttpError(ClipperError):
    """Raised when a relay answers with a non-2xx status."""

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"Erreur HTTP {status}")


class InvalidContent(ClipperError):
    """Raised when the relay body is too short, not HTML or an error page."""

    def __init__(self, message: str = "Contenu de la page invalide ou incomplet"):
        super().__init__(message)


class BlockedContent(ClipperError):
    """Raised when the page looks like a CAPTCHA or anti-bot wall."""

    def __init__(self, message: str = "Accès bloqué par le site (captcha ou protection anti-robot)"):
        super().__init__(message)


class PriceNotFound(ClipperError):
    def __init__(self, message: str = "Prix introuvable sur la page"):
        super().__init__(message)


class NetworkError(ClipperError):
    def __init__(self, detail: str = ""):
        self.detail = detail
        message = "Erreur de connexion"
        if detail:
            message = f"{message} : {detail}"
        super().__init__(message)
