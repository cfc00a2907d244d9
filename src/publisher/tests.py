"""Tests for the publisher project — health, context and admin branding."""

from django.test import RequestFactory

from publisher.branding import get_site_favicons, get_site_logo
from publisher.context_processors import site_settings


class TestHealthEndpoint:
    """Health check endpoint at /health/."""

    def test_health_returns_200(self, client, db):
        response = client.get("/health/")
        assert response.status_code == 200

    def test_health_returns_json(self, client, db):
        response = client.get("/health/")
        assert response["Content-Type"] == "application/json"
        data = response.json()
        assert data["status"] == "ok"
        assert data["db"] is True
        assert data["cache"] is True


class TestSiteSettingsContextProcessor:
    def test_without_branding(self, settings, current_site):
        request = RequestFactory().get("/")
        ctx = site_settings(request)
        assert ctx["SITE_NAME"] == settings.SITE_NAME
        assert ctx["has_site_icon"] is False
        assert ctx["site_icon_tags"] == ""
        assert ctx["has_custom_logo"] is False
        assert ctx["custom_logo"] == ""

    def test_with_branding(self, site_icon, custom_logo):
        from branding.services.custom_logo import get_custom_logo
        from branding.services.site_icon import render_site_icon_tags

        request = RequestFactory().get("/")
        ctx = site_settings(request)
        assert ctx["has_site_icon"] is True
        assert ctx["site_icon_tags"] == render_site_icon_tags()
        assert ctx["has_custom_logo"] is True
        assert ctx["custom_logo"] == get_custom_logo()

    def test_branding_resolved_once(
        self, site_icon, custom_logo, django_assert_max_num_queries
    ):
        request = RequestFactory().get("/")
        # icon: option, attachment, renditions
        # logo: stylesheet, theme mod, attachment, renditions, home, site
        with django_assert_max_num_queries(9):
            ctx = site_settings(request)
        assert ctx["site_icon_tags"].count("\n") == 4
        assert ctx["has_custom_logo"] is True


class TestUnfoldBranding:
    def test_static_favicon_fallback(self, current_site):
        assert get_site_favicons(None) == [{"href": "/static/favicon.ico"}]

    def test_site_icon_favicons(self, site_icon):
        favicons = get_site_favicons(None)
        assert [f["sizes"] for f in favicons] == ["32x32", "192x192"]
        assert favicons[0]["href"].endswith("-32x32.jpg")

    def test_logo_fallback(self, current_site):
        assert get_site_logo(None) is None

    def test_logo_url(self, custom_logo):
        assert get_site_logo(None) == custom_logo.url
