import django.db.models.deletion
from django.db import migrations, models

import branding.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("sites", "0002_alter_domain_unique"),
    ]

    operations = [
        migrations.CreateModel(
            name="Attachment",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "file",
                    models.ImageField(
                        height_field="height",
                        upload_to="uploads/%Y/%m/",
                        validators=[
                            branding.models.validate_attachment_file_size
                        ],
                        width_field="width",
                    ),
                ),
                ("title", models.CharField(blank=True, max_length=200)),
                ("alt_text", models.CharField(blank=True, max_length=200)),
                (
                    "width",
                    models.PositiveIntegerField(blank=True, null=True),
                ),
                (
                    "height",
                    models.PositiveIntegerField(blank=True, null=True),
                ),
                ("uploaded_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-uploaded_at"],
            },
        ),
        migrations.CreateModel(
            name="AttachmentRendition",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("file", models.ImageField(upload_to="renditions/%Y/%m/")),
                ("width", models.PositiveIntegerField()),
                ("height", models.PositiveIntegerField()),
                (
                    "attachment",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="renditions",
                        to="branding.attachment",
                    ),
                ),
            ],
            options={
                "ordering": ["width", "height"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("attachment", "width", "height"),
                        name="uniq_rendition_dimensions",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Option",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.CharField(max_length=191)),
                ("value", models.TextField(blank=True, default="")),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "site",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="options",
                        to="sites.site",
                    ),
                ),
            ],
            options={
                "ordering": ["site", "name"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("site", "name"),
                        name="uniq_option_site_name",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="ThemeMod",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("theme", models.CharField(max_length=100)),
                ("name", models.CharField(max_length=191)),
                ("value", models.TextField(blank=True, default="")),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "site",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="theme_mods",
                        to="sites.site",
                    ),
                ),
            ],
            options={
                "verbose_name": "Theme modification",
                "ordering": ["site", "theme", "name"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("site", "theme", "name"),
                        name="uniq_theme_mod_site_theme_name",
                    )
                ],
            },
        ),
    ]
