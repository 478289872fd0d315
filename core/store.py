import copy
import logging

from django.conf import settings
from django.contrib.sites.models import Site
from django.contrib.sites.shortcuts import get_current_site
from django.core.cache import cache
from django.utils.module_loading import import_string

from .conf import get_option

logger = logging.getLogger(__name__)


class SettingsStore:
    """Key/value option storage partitioned by tenant (site id)."""

    def get(self, tenant_id, key):
        raise NotImplementedError

    def set(self, tenant_id, key, value):
        raise NotImplementedError


class OptionStore(SettingsStore):
    """
    SiteOption rows fronted by the default cache.

    Reads happen on every request, so they go through a short cache; a write
    evicts the entry, so the next read on any process sharing the cache sees it.
    """

    def cache_key(self, tenant_id, key):
        return f"site_option:{tenant_id}:{key}"

    def get(self, tenant_id, key):
        ck = self.cache_key(tenant_id, key)
        hit = cache.get(ck)
        if hit is not None:
            return hit["value"]

        from .models import SiteOption
        value = (
            SiteOption.objects.filter(site_id=tenant_id, key=key)
            .values_list("value", flat=True)
            .first()
        )
        cache.set(ck, {"value": value}, get_option("CACHE_TIMEOUT"))
        return value

    def set(self, tenant_id, key, value):
        from .models import SiteOption
        SiteOption.objects.update_or_create(
            site_id=tenant_id, key=key, defaults={"value": value}
        )
        cache.delete(self.cache_key(tenant_id, key))


class MemoryStore(SettingsStore):
    def __init__(self, data=None):
        self.data = dict(data or {})

    def get(self, tenant_id, key):
        return copy.deepcopy(self.data.get((tenant_id, key)))

    def set(self, tenant_id, key, value):
        self.data[(tenant_id, key)] = copy.deepcopy(value)


def get_store() -> SettingsStore:
    return import_string(get_option("STORE"))()


def current_tenant_id(request=None):
    """
    SITE_ID when pinned, otherwise the site matching the request host.
    Unknown hosts get SITE_MODE["DEFAULT_TENANT"].
    """
    site_id = getattr(settings, "SITE_ID", None)
    if site_id is not None:
        return site_id
    try:
        return get_current_site(request).pk
    except Site.DoesNotExist:
        host = request.get_host() if request is not None else None
        logger.warning("No site for host %r, using the default tenant", host)
        return get_option("DEFAULT_TENANT")
