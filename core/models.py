from django.contrib.sites.models import Site
from django.db import models


class SiteOption(models.Model):
    """Per-site key/value option. The value is whatever JSON was stored."""

    site = models.ForeignKey(Site, on_delete=models.CASCADE, related_name="options")
    key = models.CharField("key", max_length=100)
    value = models.JSONField("value", null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Site option"
        verbose_name_plural = "Site options"
        constraints = [
            models.UniqueConstraint(fields=["site", "key"], name="unique_site_option"),
        ]

    def __str__(self):
        return f"{self.key} @ site {self.site_id}"
