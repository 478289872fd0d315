import logging
from functools import wraps

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import PermissionDenied
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_GET, require_http_methods

from .forms import SiteModeSettingsForm
from .identity import is_admin
from .modes import MAINTENANCE, TEMPLATE_MODES, get_settings, sanitize_key, save_settings
from .store import current_tenant_id, get_store
from .switch import InvalidSwitchToken, check_switch_token, strip_switch_params, switch_mode

logger = logging.getLogger(__name__)

SETTINGS_TABS = ("info", "settings")


def operator_required(view):
    @login_required
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        if not is_admin(request.user):
            raise PermissionDenied("Not allowed")
        return view(request, *args, **kwargs)
    return wrapper


def home(request):
    return render(request, "core/home.html")


def _tenant_from_query(request):
    try:
        tenant_id = int(request.GET.get("tenant", ""))
    except ValueError:
        tenant_id = 0
    return tenant_id if tenant_id > 0 else current_tenant_id(request)


def _safe_next(request):
    next_url = request.GET.get("next") or ""
    if url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return strip_switch_params(next_url)
    return reverse("admin:index")


@require_GET
@operator_required
def switch_site_mode(request):
    """Link target of the status indicator; switches and bounces back."""
    target = request.GET.get("set_mode")
    if target is None:
        return redirect(_safe_next(request))

    tenant_id = _tenant_from_query(request)
    try:
        check_switch_token(request.GET.get("token"), request.user, tenant_id)
    except InvalidSwitchToken as exc:
        logger.warning("Rejected site mode switch by %s: %s", request.user, exc)
        raise PermissionDenied("The link you followed has expired.") from exc

    result = switch_mode(get_store(), tenant_id, target)
    logger.info(
        "Site %s is now %s (requested %r by %s)",
        tenant_id, result.status.value, target, request.user,
    )
    return redirect(_safe_next(request))


@require_http_methods(["GET", "POST"])
@operator_required
def site_mode_settings(request):
    store = get_store()
    tenant_id = current_tenant_id(request)
    current = get_settings(store, tenant_id)

    tab = sanitize_key(request.GET.get("tab", "info"))
    if tab not in SETTINGS_TABS:
        tab = "info"
    template = sanitize_key(request.GET.get("template", MAINTENANCE))
    if template not in TEMPLATE_MODES:
        template = MAINTENANCE

    if request.method == "POST":
        form = SiteModeSettingsForm(request.POST, template=template)
        if form.is_valid():
            # mode and the other template's fields are kept as stored
            save_settings(store, tenant_id, {**current.as_dict(), **form.cleaned_data})
            logger.info("Site %s placeholder settings saved by %s", tenant_id, request.user)
            messages.success(request, "Configurações salvas.")
            return redirect(f"{reverse('site_mode_settings')}?tab=settings&template={template}")
        tab = "settings"
    else:
        form = SiteModeSettingsForm(template=template, initial=current.as_dict())

    return render(request, "core/settings.html", {
        "title": "Site mode",
        "tab": tab,
        "template": template,
        "templates": [(MAINTENANCE, "Manutenção"), ("development", "Desenvolvimento")],
        "form": form,
        "current": current,
    })
