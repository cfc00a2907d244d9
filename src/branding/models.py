from django.conf import settings
from django.contrib.sites.models import Site
from django.core.exceptions import ValidationError
from django.db import models


def validate_attachment_file_size(value):
    """Enforce ``settings.ATTACHMENT_MAX_UPLOAD_SIZE`` on uploads."""
    limit = settings.ATTACHMENT_MAX_UPLOAD_SIZE
    if value.size > limit:
        raise ValidationError(
            f"File size must be at most {limit // 1024} KB."
        )


class Option(models.Model):
    """A named per-site setting."""

    site = models.ForeignKey(
        Site, on_delete=models.CASCADE, related_name="options"
    )
    name = models.CharField(max_length=191)
    value = models.TextField(blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["site", "name"]
        constraints = [
            models.UniqueConstraint(
                fields=["site", "name"], name="uniq_option_site_name"
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.site_id})"


class ThemeMod(models.Model):
    """A per-site setting scoped to one theme."""

    site = models.ForeignKey(
        Site, on_delete=models.CASCADE, related_name="theme_mods"
    )
    theme = models.CharField(max_length=100)
    name = models.CharField(max_length=191)
    value = models.TextField(blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Theme modification"
        ordering = ["site", "theme", "name"]
        constraints = [
            models.UniqueConstraint(
                fields=["site", "theme", "name"],
                name="uniq_theme_mod_site_theme_name",
            ),
        ]

    def __str__(self):
        return f"{self.theme}:{self.name} ({self.site_id})"


class Attachment(models.Model):
    """An uploaded image referenced from settings by its id."""

    file = models.ImageField(
        upload_to="uploads/%Y/%m/",
        width_field="width",
        height_field="height",
        validators=[validate_attachment_file_size],
    )
    title = models.CharField(max_length=200, blank=True)
    alt_text = models.CharField(max_length=200, blank=True)
    width = models.PositiveIntegerField(null=True, blank=True)
    height = models.PositiveIntegerField(null=True, blank=True)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-uploaded_at"]

    def __str__(self):
        return self.title or self.file.name

    @property
    def url(self):
        return self.file.url


class AttachmentRendition(models.Model):
    """A resized copy of an attachment at fixed pixel dimensions."""

    attachment = models.ForeignKey(
        Attachment, on_delete=models.CASCADE, related_name="renditions"
    )
    file = models.ImageField(upload_to="renditions/%Y/%m/")
    width = models.PositiveIntegerField()
    height = models.PositiveIntegerField()

    class Meta:
        ordering = ["width", "height"]
        constraints = [
            models.UniqueConstraint(
                fields=["attachment", "width", "height"],
                name="uniq_rendition_dimensions",
            ),
        ]

    def __str__(self):
        return f"{self.attachment} {self.width}x{self.height}"

    @property
    def url(self):
        return self.file.url
