"""
Site mode settings: the record behind the gate, its defaults, and the
read/write paths that keep it total.

Settings are stored as one JSON object per site. Reads never fail: anything
missing or malformed in storage is replaced field by field with the default.
Writes go through sanitize_settings(), which also never fails and always
produces a complete, valid record.
"""
import dataclasses
import enum
import re
from collections.abc import Mapping

import bleach
from django.utils.html import strip_tags

OPTION_KEY = "site_mode_settings"

MAINTENANCE = "maintenance"
DEVELOPMENT = "development"
ONLINE = "online"

TEMPLATE_MODES = (MAINTENANCE, DEVELOPMENT)
SWITCH_TARGETS = (ONLINE, MAINTENANCE, DEVELOPMENT)

TEXT_FIELDS = ("title_maintenance", "title_development")
HTML_FIELDS = ("message_maintenance", "message_development")

# roughly what a blog post body may contain
ALLOWED_TAGS = frozenset({
    "a", "abbr", "b", "blockquote", "br", "code", "div", "em",
    "h1", "h2", "h3", "h4", "h5", "h6", "hr", "i", "img", "li", "ol",
    "p", "pre", "small", "span", "strong", "sub", "sup", "u", "ul",
    "table", "thead", "tbody", "tr", "th", "td",
})
ALLOWED_ATTRIBUTES = {
    "*": ["class", "id", "title"],
    "a": ["href", "title", "target", "rel"],
    "img": ["src", "alt", "width", "height"],
}
ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

_KEY_RE = re.compile(r"[^a-z0-9_\-]")


class SiteStatus(enum.Enum):
    ONLINE = ONLINE
    MAINTENANCE = MAINTENANCE
    DEVELOPMENT = DEVELOPMENT

    @property
    def label(self):
        return _STATUS_LABELS[self][0]

    @property
    def color(self):
        return _STATUS_LABELS[self][1]


_STATUS_LABELS = {
    SiteStatus.ONLINE: ("Online", "#22c55e"),
    SiteStatus.MAINTENANCE: ("Manutenção", "#ef4444"),
    SiteStatus.DEVELOPMENT: ("Desenvolvimento", "#f59e0b"),
}


@dataclasses.dataclass(frozen=True)
class SiteModeSettings:
    enabled: bool = False
    mode: str = MAINTENANCE
    title_maintenance: str = "Site em manutenção"
    message_maintenance: str = "Estamos realizando manutenção. Tente novamente mais tarde."
    title_development: str = "Site em desenvolvimento"
    message_development: str = (
        "Este ambiente está em desenvolvimento e temporariamente indisponível para visitantes."
    )

    @property
    def status(self) -> SiteStatus:
        if not self.enabled:
            return SiteStatus.ONLINE
        if self.mode == DEVELOPMENT:
            return SiteStatus.DEVELOPMENT
        return SiteStatus.MAINTENANCE

    def as_dict(self) -> dict:
        return dataclasses.asdict(self)

    def replace(self, **changes) -> "SiteModeSettings":
        return dataclasses.replace(self, **changes)


DEFAULT_SETTINGS = SiteModeSettings()


def sanitize_key(value) -> str:
    """Lower-case and keep only [a-z0-9_-]."""
    return _KEY_RE.sub("", str(value).lower())


def sanitize_text(value) -> str:
    """Plain text: tags stripped, whitespace collapsed to single spaces."""
    return " ".join(strip_tags(str(value)).split())


def sanitize_html(value) -> str:
    return bleach.clean(
        str(value),
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )


def _stored_enabled(value):
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value in ("0", "1"):
        return value == "1"
    return None


def settings_from_raw(raw) -> SiteModeSettings:
    """Overlay a raw stored value onto the defaults, keeping only well-typed fields."""
    if not isinstance(raw, Mapping):
        return DEFAULT_SETTINGS

    changes = {}
    enabled = _stored_enabled(raw.get("enabled"))
    if enabled is not None:
        changes["enabled"] = enabled
    if raw.get("mode") in TEMPLATE_MODES:
        changes["mode"] = raw["mode"]
    for name in TEXT_FIELDS + HTML_FIELDS:
        if isinstance(raw.get(name), str):
            changes[name] = raw[name]
    return DEFAULT_SETTINGS.replace(**changes)


def _is_set(value):
    # "0" counts as empty, like an unchecked form checkbox
    return bool(value) and value != "0"


def sanitize_settings(data) -> SiteModeSettings:
    """
    Validate every field of an untrusted input independently.

    Accepts anything: non-mappings are treated as empty, unknown keys are
    ignored, missing or wrongly typed fields take their defaults.
    """
    data = data if isinstance(data, Mapping) else {}
    defaults = DEFAULT_SETTINGS

    def pick(name):
        value = data.get(name)
        return value if isinstance(value, str) else getattr(defaults, name)

    mode = sanitize_key(pick("mode"))
    out = {
        "enabled": _is_set(data.get("enabled")),
        "mode": mode if mode in TEMPLATE_MODES else MAINTENANCE,
    }
    for name in TEXT_FIELDS:
        out[name] = sanitize_text(pick(name))
    for name in HTML_FIELDS:
        out[name] = sanitize_html(pick(name))
    return SiteModeSettings(**out)


def get_settings(store, tenant_id) -> SiteModeSettings:
    return settings_from_raw(store.get(tenant_id, OPTION_KEY))


def save_settings(store, tenant_id, data) -> SiteModeSettings:
    settings = sanitize_settings(data)
    store.set(tenant_id, OPTION_KEY, settings.as_dict())
    return settings


def put_settings(store, tenant_id, settings: SiteModeSettings) -> SiteModeSettings:
    """Persist an already-valid record as is."""
    store.set(tenant_id, OPTION_KEY, settings.as_dict())
    return settings
