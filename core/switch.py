"""
Operator mode switch: Online / Maintenance / Development.

Switching is a one-shot link action. Each link carries a signed token bound
to the action, the site and the operator.
"""
import logging
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from django.core import signing
from django.urls import reverse

from .conf import get_option
from .modes import ONLINE, SWITCH_TARGETS, get_settings, put_settings, sanitize_key

logger = logging.getLogger(__name__)

SWITCH_PARAMS = ("set_mode", "tenant", "token")


class InvalidSwitchToken(Exception):
    pass


def switch_mode(store, tenant_id, target):
    """
    Apply a switch target and return the resulting settings.

    Unknown targets are ignored and the current settings come back unchanged.
    Going online keeps the last template mode so the next switch remembers it.
    """
    target = sanitize_key(target)
    current = get_settings(store, tenant_id)
    if target not in SWITCH_TARGETS:
        logger.warning("Ignored site mode switch to %r for site %s", target, tenant_id)
        return current

    if target == ONLINE:
        updated = current.replace(enabled=False)
    else:
        updated = current.replace(enabled=True, mode=target)
    return put_settings(store, tenant_id, updated)


def _signer(tenant_id):
    return signing.TimestampSigner(salt=f"core.switch_mode:{tenant_id}")


def make_switch_token(user, tenant_id):
    return _signer(tenant_id).sign(str(user.pk))


def check_switch_token(token, user, tenant_id):
    try:
        value = _signer(tenant_id).unsign(token or "", max_age=get_option("TOKEN_MAX_AGE"))
    except signing.BadSignature as exc:
        raise InvalidSwitchToken(str(exc)) from exc
    if value != str(user.pk):
        raise InvalidSwitchToken("token issued to another user")


def strip_switch_params(url):
    parts = urlsplit(url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k not in SWITCH_PARAMS]
    return urlunsplit(parts._replace(query=urlencode(query)))


def switch_url(request, target, tenant_id):
    query = {
        "set_mode": target,
        "tenant": str(tenant_id),
        "token": make_switch_token(request.user, tenant_id),
        "next": strip_switch_params(request.get_full_path()),
    }
    return f"{reverse('site_mode_switch')}?{urlencode(query)}"
