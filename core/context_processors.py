from .identity import is_admin
from .modes import SWITCH_TARGETS, SiteStatus, get_settings
from .store import current_tenant_id, get_store
from .switch import switch_url

EMPTY = {"SITE_MODE_STATUS": None, "SITE_MODE_SWITCH_LINKS": []}


def site_mode(request):
    """
    Status indicator for operators: current status plus one switch link
    per target. Everyone else gets nothing.
    """
    if not is_admin(getattr(request, "user", None)):
        return EMPTY

    tenant_id = current_tenant_id(request)
    status = get_settings(get_store(), tenant_id).status
    links = [
        {
            "target": target,
            "label": SiteStatus(target).label,
            "active": status.value == target,
            "url": switch_url(request, target, tenant_id),
        }
        for target in SWITCH_TARGETS
    ]
    return {"SITE_MODE_STATUS": status, "SITE_MODE_SWITCH_LINKS": links}
