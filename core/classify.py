"""
Requests the gate never blocks: admin area, login, API and AJAX calls,
scheduled jobs and command-line tooling.
"""
import enum

from django.conf import settings
from django.shortcuts import resolve_url
from django.urls import NoReverseMatch

from .conf import get_option

# environ key only in-process callers can set; client headers arrive as HTTP_*.
# Headers such as X-Requested-With are client input and never make a request internal.
INTERNAL_MARKER = "site_mode.internal"

DEFAULT_LOGIN_PATH = "/accounts/login/"


class RequestKind(enum.Enum):
    ADMIN = "admin"
    LOGIN = "login"
    API = "api"
    AJAX = "ajax"
    CRON = "cron"
    CLI = "cli"


def mark_internal(request, kind):
    """Tag a request built by a job runner or CLI tool as internal."""
    request.META[INTERNAL_MARKER] = RequestKind(kind).value
    return request


def login_paths():
    try:
        login_path = resolve_url(getattr(settings, "LOGIN_URL", DEFAULT_LOGIN_PATH))
    except NoReverseMatch:
        login_path = DEFAULT_LOGIN_PATH
    return (login_path, *get_option("LOGIN_PATHS"))


def _under(path, prefixes):
    return any(path.startswith(p) for p in prefixes if p)


def classify_request(request):
    marker = request.META.get(INTERNAL_MARKER)
    if marker in (RequestKind.AJAX.value, RequestKind.CRON.value, RequestKind.CLI.value):
        return RequestKind(marker)

    path = request.path or "/"
    if _under(path, get_option("ADMIN_PREFIXES")):
        return RequestKind.ADMIN
    if _under(path, login_paths()):
        return RequestKind.LOGIN
    if _under(path, get_option("API_PREFIXES")):
        return RequestKind.API
    if _under(path, get_option("CRON_PREFIXES")):
        return RequestKind.CRON
    if _under(path, get_option("AJAX_PREFIXES")):
        return RequestKind.AJAX
    return None


def is_internal_request(request):
    return classify_request(request) is not None
