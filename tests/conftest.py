"""Pytest configuration and shared fixtures.

Provides:
- Python path setup (so `config` and `clipper` import without install)
- HTML page builders padded past the minimum document length
- A fake relay session that records every call
"""
import json
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from config import ClipperSettings  # noqa: E402

FILLER = "<p>" + "Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 12 + "</p>"


def build_page(head: str = "", body: str = "", title: str | None = "Produit test") -> str:
    title_tag = f"<title>{title}</title>" if title is not None else ""
    return (
        "<!DOCTYPE html><html lang=\"fr\"><head><meta charset=\"utf-8\">"
        f"{title_tag}{head}</head><body>{body}{FILLER}</body></html>"
    )


def jsonld(data) -> str:
    return f'<script type="application/ld+json">{json.dumps(data)}</script>'


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Stands in for a requests session; replays queued responses in order.

    Queue items are FakeResponse instances or exceptions to raise.
    """

    def __init__(self, responses, on_call=None):
        self.responses = list(responses)
        self.calls = []
        self.on_call = on_call

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.on_call:
            self.on_call(len(self.calls))
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def page():
    return build_page


@pytest.fixture
def ld():
    return jsonld


@pytest.fixture
def make_session():
    return FakeSession


@pytest.fixture
def response():
    return FakeResponse


@pytest.fixture
def relay_settings():
    return ClipperSettings(
        relays=[
            "https://relay-a.test/raw?url={url}",
            "https://relay-b.test/?url={url}",
            "https://relay-c.test/proxy?quest={url}",
        ],
        timeout=5,
        use_cloudscraper=False,
    )
