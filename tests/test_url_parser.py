"""Tests for URL normalization, validation and domain extraction."""
import pytest

from utils.url_parser import normalize, is_valid, extract_domain, get_path_segments


class TestNormalize:
    def test_adds_https_when_scheme_missing(self):
        assert normalize("zonaprop.com.ar/aviso") == "https://zonaprop.com.ar/aviso"

    def test_keeps_existing_scheme(self):
        assert normalize("http://www.argenprop.com/x") == "http://www.argenprop.com/x"
        assert normalize("HTTPS://www.argenprop.com/x") == "HTTPS://www.argenprop.com/x"

    def test_strips_trailing_slash_and_whitespace(self):
        assert normalize("  https://www.zonaprop.com.ar/  ") == "https://www.zonaprop.com.ar"

    @pytest.mark.parametrize("url", [
        "zonaprop.com.ar/aviso",
        "https://www.zonaprop.com.ar//",
        "argenprop.com/",
        "",
    ])
    def test_is_idempotent(self, url):
        once = normalize(url)
        assert normalize(once) == once

    def test_handles_none(self):
        assert normalize(None) == "https://"


class TestIsValid:
    def test_valid_url(self):
        assert is_valid("https://www.zonaprop.com.ar/propiedades/x-123.html")

    @pytest.mark.parametrize("url", [
        "",
        None,
        "not a url",
        "https://",
        "http://exa mple.com",
        "http://[::1",
        "https://example.com:99999",
        "mailto:agent@zonaprop.com.ar",
    ])
    def test_malformed_urls_are_invalid(self, url):
        assert is_valid(url) is False


class TestExtractDomain:
    def test_strips_www(self):
        assert extract_domain("https://www.zonaprop.com.ar/aviso") == "zonaprop.com.ar"

    def test_only_leading_www_is_stripped(self):
        assert extract_domain("https://shop.www.example.com") == "shop.www.example.com"

    def test_lowercases_host(self):
        assert extract_domain("https://WWW.ArgenProp.com/x") == "argenprop.com"

    def test_invalid_url_returns_none(self):
        assert extract_domain("https://") is None


class TestGetPathSegments:
    def test_drops_empty_segments(self):
        assert get_path_segments("https://a.com//propiedades/depto-123.html/") == [
            "propiedades", "depto-123.html"
        ]

    def test_root_has_no_segments(self):
        assert get_path_segments("https://a.com") == []

    def test_invalid_url_returns_empty(self):
        assert get_path_segments("::nonsense") == []
