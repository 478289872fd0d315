import logging

from django.utils.deprecation import MiddlewareMixin

from .gate import decide
from .identity import Identity
from .modes import get_settings
from .store import current_tenant_id, get_store

logger = logging.getLogger(__name__)


class SiteModeMiddleware(MiddlewareMixin):
    """
    While the site is in maintenance or development mode, everyone except
    operators gets the 503 placeholder. Admin, login, API, AJAX, cron and CLI
    requests always pass. The placeholder never links to the login page.
    """

    def process_request(self, request):
        settings = get_settings(get_store(), current_tenant_id(request))
        identity = Identity.from_user(getattr(request, "user", None))

        decision = decide(request, settings, identity)
        if not decision.intercepted:
            return None

        request.site_mode_intercepted = True
        logger.debug("Site mode %s: intercepted %s", settings.mode, request.path)
        return decision.response
