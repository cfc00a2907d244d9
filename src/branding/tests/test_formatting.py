"""Tests for URL escaping."""

import pytest

from branding.formatting import esc_url


class TestEscUrl:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty(self, value):
        assert esc_url(value) == ""

    def test_relative_url(self):
        assert esc_url("/media/icon-32x32.png") == "/media/icon-32x32.png"

    def test_escapes_for_attribute(self):
        assert esc_url('https://example.com/?a=1&b="2"') == (
            "https://example.com/?a=1&amp;b=%222%22"
        )

    def test_percent_encodes_non_ascii(self):
        assert esc_url("https://example.com/ünï") == (
            "https://example.com/%C3%BCn%C3%AF"
        )

    @pytest.mark.parametrize(
        "value",
        [
            "https://example.com/",
            "HTTP://EXAMPLE.COM/",
            "mailto:admin@example.com",
            "tel:+15555550100",
        ],
    )
    def test_allowed_schemes(self, value):
        assert esc_url(value) == value

    @pytest.mark.parametrize(
        "value",
        [
            "javascript:alert(1)",
            "JavaScript:alert(1)",
            "  javascript:alert(1)",
            "java\tscript:alert(1)",
            "\x01javascript:alert(1)",
            "data:text/html;base64,PHNjcmlwdD4=",
            "vbscript:msgbox(1)",
        ],
    )
    def test_disallowed_schemes(self, value):
        assert esc_url(value) == ""

    def test_custom_protocols(self):
        assert esc_url("https://example.com/", protocols={"http"}) == ""
        assert esc_url("http://example.com/", protocols={"http"}) == (
            "http://example.com/"
        )

    def test_malformed_url(self):
        assert esc_url("http://[::1/") == ""
