from django.conf import settings

DEFAULTS = {
    "STORE": "core.store.OptionStore",
    "CACHE_TIMEOUT": 10,
    "TOKEN_MAX_AGE": 12 * 60 * 60,
    "ADMIN_GROUP": "Admin",
    "ADMIN_PREFIXES": ("/admin/",),
    "API_PREFIXES": ("/api/",),
    "CRON_PREFIXES": ("/cron/",),
    "AJAX_PREFIXES": ("/ajax/",),
    "DEFAULT_TENANT": 1,
    "LOGIN_PATHS": (),
    "RETRY_AFTER": 3600,
}


def get_option(name):
    """SITE_MODE[name] from project settings, or the built-in default."""
    return getattr(settings, "SITE_MODE", {}).get(name, DEFAULTS[name])
