import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("sites", "0002_alter_domain_unique"),
    ]

    operations = [
        migrations.CreateModel(
            name="SiteOption",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("key", models.CharField(max_length=100, verbose_name="key")),
                ("value", models.JSONField(blank=True, null=True, verbose_name="value")),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("site", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="options", to="sites.site")),
            ],
            options={
                "verbose_name": "Site option",
                "verbose_name_plural": "Site options",
            },
        ),
        migrations.AddConstraint(
            model_name="siteoption",
            constraint=models.UniqueConstraint(fields=("site", "key"), name="unique_site_option"),
        ),
    ]
