"""Tests for the branding template tags."""

from django.template import Context, Template

from branding.services.site_icon import (
    get_site_icon_url,
    render_site_icon_tags,
)


def render(source, **context):
    return Template("{% load branding_tags %}" + source).render(
        Context(context)
    )


class TestSiteIconTag:
    def test_renders_nothing_without_icon(self, current_site):
        assert render("{% site_icon %}") == ""

    def test_renders_tags(self, site_icon):
        assert render("{% site_icon %}") == render_site_icon_tags()

    def test_renders_for_given_site(self, other_site, icon_attachment):
        from branding.services.site_icon import set_site_icon

        set_site_icon(icon_attachment, site=other_site)
        assert render("{% site_icon %}") == ""
        assert render("{% site_icon site %}", site=other_site.pk) != ""


class TestSiteIconUrlTag:
    def test_empty_without_icon(self, current_site):
        assert render("{% site_icon_url 32 %}") == ""

    def test_fallback(self, current_site):
        assert render('{% site_icon_url 32 "/static/favicon.ico" %}') == (
            "/static/favicon.ico"
        )

    def test_sized_url(self, site_icon):
        assert render("{% site_icon_url 192 %}") == get_site_icon_url(192)

    def test_non_numeric_size_renders_fallback(self, site_icon):
        assert render('{% site_icon_url "abc" %}') == ""
        assert render('{% site_icon_url "abc" "/static/favicon.ico" %}') == (
            "/static/favicon.ico"
        )

    def test_non_numeric_site_renders_nothing(self, site_icon, custom_logo):
        assert render('{% site_icon_url 32 "" "abc" %}') == ""
        assert render('{% site_icon "abc" %}') == ""
        assert render('{% custom_logo "abc" %}') == ""


class TestPresenceTags:
    def test_has_site_icon(self, site_icon):
        output = render(
            "{% has_site_icon as icon %}"
            "{% if icon %}yes{% else %}no{% endif %}"
        )
        assert output == "yes"

    def test_has_custom_logo(self, current_site):
        output = render(
            "{% has_custom_logo as logo %}"
            "{% if logo %}yes{% else %}no{% endif %}"
        )
        assert output == "no"
