"""Admin configuration for the branding app using django-unfold."""

from unfold.admin import ModelAdmin, TabularInline
from unfold.decorators import action, display

from django.contrib import admin, messages
from django.utils.html import format_html

from .models import Attachment, AttachmentRendition, Option, ThemeMod
from .options import invalidate_option, invalidate_theme_mod


class AttachmentRenditionInline(TabularInline):
    model = AttachmentRendition
    extra = 0
    fields = ["file", "width", "height"]
    readonly_fields = ["file", "width", "height"]
    can_delete = False


@admin.register(Attachment)
class AttachmentAdmin(ModelAdmin):
    list_display = ["__str__", "preview", "dimensions", "uploaded_at"]
    search_fields = ["title", "file"]
    fields = ["file", "title", "alt_text", "width", "height"]
    readonly_fields = ["width", "height"]
    inlines = [AttachmentRenditionInline]
    actions = ["regenerate_renditions"]

    @display(description="Preview")
    def preview(self, obj):
        if not obj.file:
            return "-"
        return format_html(
            '<img src="{}" style="max-height:32px" alt="" />', obj.file.url
        )

    @display(description="Size")
    def dimensions(self, obj):
        if obj.width and obj.height:
            return f"{obj.width}x{obj.height}"
        return "-"

    @action(description="Regenerate renditions")
    def regenerate_renditions(self, request, queryset):
        from .tasks import regenerate_renditions

        for attachment in queryset:
            regenerate_renditions.delay(attachment.pk)
        self.message_user(
            request,
            f"Queued rendition rebuild for {queryset.count()} attachment(s).",
            messages.SUCCESS,
        )


@admin.register(Option)
class OptionAdmin(ModelAdmin):
    list_display = ["name", "site", "value", "updated_at"]
    list_filter = ["site"]
    search_fields = ["name", "value"]

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        invalidate_option(obj.site_id, obj.name)

    def delete_model(self, request, obj):
        super().delete_model(request, obj)
        invalidate_option(obj.site_id, obj.name)


@admin.register(ThemeMod)
class ThemeModAdmin(ModelAdmin):
    list_display = ["name", "theme", "site", "value", "updated_at"]
    list_filter = ["site", "theme"]
    search_fields = ["name", "value"]

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        invalidate_theme_mod(obj.site_id, obj.theme, obj.name)

    def delete_model(self, request, obj):
        super().delete_model(request, obj)
        invalidate_theme_mod(obj.site_id, obj.theme, obj.name)
