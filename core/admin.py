from django.contrib import admin

from .models import SiteOption


@admin.register(SiteOption)
class SiteOptionAdmin(admin.ModelAdmin):
    list_display = ("key", "site", "updated_at")
    list_filter = ("site",)
    readonly_fields = ("site", "key", "value", "updated_at")

    # written only through the site mode settings page and switch links
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
