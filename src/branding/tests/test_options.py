"""Tests for per-site options and theme modifications."""

import pytest

from django.core.cache import cache

from branding.models import Option, ThemeMod
from branding.options import (
    clear_references,
    delete_option,
    get_option,
    get_stylesheet,
    get_theme_mod,
    remove_theme_mod,
    set_theme_mod,
    update_option,
)
from branding.sites import switched_site


class TestOptions:
    def test_missing_option_returns_default(self, current_site):
        assert get_option("blogdescription") is None
        assert get_option("blogdescription", default="x") == "x"

    def test_update_and_get(self, current_site):
        update_option("blogdescription", "Just another site")
        assert get_option("blogdescription") == "Just another site"

    def test_update_replaces_value(self, current_site):
        update_option("site_icon", 1)
        update_option("site_icon", 2)
        assert get_option("site_icon") == "2"
        assert Option.objects.filter(name="site_icon").count() == 1

    def test_delete(self, current_site):
        update_option("site_icon", 5)
        assert delete_option("site_icon") is True
        assert get_option("site_icon") is None
        assert delete_option("site_icon") is False

    def test_scoped_per_site(self, current_site, other_site):
        update_option("site_icon", 7, site=other_site)
        assert get_option("site_icon", site=other_site.pk) == "7"
        assert get_option("site_icon") is None

    def test_invalid_site_reads_default(self, current_site):
        update_option("site_icon", 5)
        assert get_option("site_icon", default="x", site="abc") == "x"

    def test_invalid_site_write_rejected(self, current_site):
        with pytest.raises(ValueError):
            update_option("site_icon", 5, site="abc")
        with pytest.raises(ValueError):
            set_theme_mod("custom_logo", 5, site="abc")
        assert Option.objects.count() == 0

    def test_switched_site_is_default_scope(self, current_site, other_site):
        with switched_site(other_site):
            update_option("home", "http://other.example.org")
            assert get_option("home") == "http://other.example.org"
        assert get_option("home") is None


class TestOptionCache:
    def test_read_populates_cache(self, current_site):
        update_option("site_icon", 3)
        get_option("site_icon")
        key = f"branding:option:{current_site.pk}:site_icon"
        assert cache.get(key) == (True, "3")

    def test_absent_value_is_cached(
        self, current_site, django_assert_num_queries
    ):
        get_option("site_icon")
        with django_assert_num_queries(0):
            assert get_option("site_icon") is None

    def test_write_invalidates_cache(self, current_site):
        assert get_option("site_icon") is None
        update_option("site_icon", 3)
        assert get_option("site_icon") == "3"

    def test_delete_invalidates_cache(self, current_site):
        update_option("site_icon", 3)
        assert get_option("site_icon") == "3"
        delete_option("site_icon")
        assert get_option("site_icon") is None


class TestThemeMods:
    def test_default_stylesheet(self, settings, current_site):
        settings.DEFAULT_THEME = "default"
        assert get_stylesheet() == "default"
        update_option("stylesheet", "starter")
        assert get_stylesheet() == "starter"

    def test_set_get_remove(self, current_site):
        assert get_theme_mod("custom_logo") is None
        set_theme_mod("custom_logo", 12)
        assert get_theme_mod("custom_logo") == "12"
        assert remove_theme_mod("custom_logo") is True
        assert get_theme_mod("custom_logo") is None
        assert remove_theme_mod("custom_logo") is False

    def test_stored_against_active_theme(self, current_site):
        set_theme_mod("custom_logo", 12)
        mod = ThemeMod.objects.get(name="custom_logo")
        assert mod.theme == get_stylesheet()

    def test_scoped_per_site(self, current_site, other_site):
        set_theme_mod("custom_logo", 4, site=other_site.pk)
        assert get_theme_mod("custom_logo", site=other_site) == "4"
        assert get_theme_mod("custom_logo") is None


class TestClearReferences:
    def test_clears_icon_and_logo_on_every_site(
        self, current_site, other_site
    ):
        update_option("site_icon", 9)
        set_theme_mod("custom_logo", 9)
        update_option("site_icon", 10, site=other_site.pk)
        # prime the cache so invalidation is exercised
        assert get_option("site_icon") == "9"

        clear_references(9)

        assert get_option("site_icon") is None
        assert get_theme_mod("custom_logo") is None
        assert get_option("site_icon", site=other_site) == "10"

    def test_leaves_unrelated_settings(self, current_site):
        update_option("blogname", "9")
        clear_references(9)
        assert get_option("blogname") == "9"
