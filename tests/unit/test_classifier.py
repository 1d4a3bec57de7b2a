"""Unit tests for the relay content classifier."""
import pytest

from clipper.classifier import is_blocked_response, is_valid_html_content


class TestValidHtml:

    def test_accepts_real_document(self, page):
        assert is_valid_html_content(page(body="<h1>Chaise</h1>"))

    def test_rejects_short_content(self):
        html = "<!DOCTYPE html><html><head><title>Ok</title></head><body>x</body></html>"
        assert len(html) < 500
        assert not is_valid_html_content(html)

    def test_rejects_empty(self):
        assert not is_valid_html_content("")
        assert not is_valid_html_content(None)

    def test_rejects_non_html(self):
        assert not is_valid_html_content('{"error": "nope"}' + " " * 600)

    def test_accepts_html_without_doctype(self, page):
        html = page().replace("<!DOCTYPE html>", "")
        assert is_valid_html_content(html)

    @pytest.mark.parametrize("title", ["Error", "404", " error ", "ERROR"])
    def test_rejects_error_pages(self, page, title):
        assert not is_valid_html_content(page(title=title))

    def test_error_word_inside_title_is_fine(self, page):
        assert is_valid_html_content(page(title="404 Error Shoes - Baskets"))


class TestBlocked:

    @pytest.mark.parametrize("marker", ["captcha", "CAPTCHA", "Captcha"])
    def test_captcha_any_case(self, page, marker):
        assert is_blocked_response(page(body=f"<div>Please solve the {marker}</div>"))

    @pytest.mark.parametrize("text", [
        "Access Denied",
        "We detected unusual traffic from your network",
        "Rate limit exceeded",
        "Accès refusé",
    ])
    def test_other_indicators(self, page, text):
        assert is_blocked_response(page(body=f"<p>{text}</p>"))

    def test_clean_page_not_blocked(self, page):
        assert not is_blocked_response(page(body="<h1>Canapé 3 places</h1>"))

    def test_meta_robots_not_blocked(self, page):
        assert not is_blocked_response(page(head='<meta name="robots" content="index, follow">'))

    def test_valid_and_blocked_are_independent(self, page):
        html = page(title="Vérification", body="<form>captcha</form>")
        assert is_valid_html_content(html)
        assert is_blocked_response(html)

    def test_custom_vocabulary(self, page):
        html = page(body="<p>Merci de patienter</p>")
        assert is_blocked_response(html, indicators=["patienter"])
