from django.http import HttpResponse
from django.template.loader import render_to_string
from django.utils.safestring import mark_safe

from .conf import get_option
from .modes import DEVELOPMENT, MAINTENANCE, sanitize_html

NO_CACHE = "no-store, no-cache, must-revalidate, max-age=0"

BADGES = {
    MAINTENANCE: "MANUTENÇÃO",
    DEVELOPMENT: "DESENVOLVIMENTO",
}


class HttpResponseTemporaryUnavailable(HttpResponse):
    status_code = 503


def placeholder_content(settings):
    """(title, message, badge) for the template the current mode selects."""
    if settings.mode == DEVELOPMENT:
        return settings.title_development, settings.message_development, BADGES[DEVELOPMENT]
    return settings.title_maintenance, settings.message_maintenance, BADGES[MAINTENANCE]


def render_placeholder(settings):
    title, message, badge = placeholder_content(settings)
    html = render_to_string("core/placeholder.html", {
        "title": title,
        "badge": badge,
        # rows may have been written without save_settings()
        "message": mark_safe(sanitize_html(message)),
    })
    response = HttpResponseTemporaryUnavailable(html)
    response["Retry-After"] = str(get_option("RETRY_AFTER"))
    response["Cache-Control"] = NO_CACHE
    response["Pragma"] = "no-cache"
    return response
