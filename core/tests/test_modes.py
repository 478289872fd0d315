from django.test import SimpleTestCase

from core.modes import (
    DEFAULT_SETTINGS, OPTION_KEY, SiteModeSettings, SiteStatus,
    get_settings, sanitize_key, sanitize_settings, sanitize_text, save_settings,
)
from core.store import MemoryStore


class GetSettingsTests(SimpleTestCase):
    def test_missing_record_resolves_to_defaults(self):
        self.assertEqual(get_settings(MemoryStore(), 1), DEFAULT_SETTINGS)

    def test_defaults(self):
        s = DEFAULT_SETTINGS
        self.assertFalse(s.enabled)
        self.assertEqual(s.mode, "maintenance")
        self.assertEqual(s.title_maintenance, "Site em manutenção")
        self.assertEqual(s.title_development, "Site em desenvolvimento")

    def test_non_mapping_record_is_treated_as_empty(self):
        for raw in (["enabled", 1], "enabled", 42, None):
            store = MemoryStore({(1, OPTION_KEY): raw})
            self.assertEqual(get_settings(store, 1), DEFAULT_SETTINGS)

    def test_corrupted_fields_fall_back_one_by_one(self):
        store = MemoryStore({(1, OPTION_KEY): {
            "enabled": "yes",
            "mode": "holiday",
            "title_maintenance": 5,
            "title_development": "Em obras",
            "message_development": None,
        }})
        s = get_settings(store, 1)
        self.assertFalse(s.enabled)
        self.assertEqual(s.mode, "maintenance")
        self.assertEqual(s.title_maintenance, DEFAULT_SETTINGS.title_maintenance)
        self.assertEqual(s.title_development, "Em obras")
        self.assertEqual(s.message_development, DEFAULT_SETTINGS.message_development)

    def test_enabled_accepts_stored_flags(self):
        for raw in (True, 1, "1"):
            store = MemoryStore({(1, OPTION_KEY): {"enabled": raw}})
            self.assertIs(get_settings(store, 1).enabled, True)
        for raw in (False, 0, "0"):
            store = MemoryStore({(1, OPTION_KEY): {"enabled": raw}})
            self.assertIs(get_settings(store, 1).enabled, False)

    def test_reads_are_stable(self):
        store = MemoryStore({(1, OPTION_KEY): {"enabled": 1, "mode": "development"}})
        self.assertEqual(get_settings(store, 1), get_settings(store, 1))

    def test_tenants_are_separate(self):
        store = MemoryStore({(2, OPTION_KEY): {"enabled": 1}})
        self.assertFalse(get_settings(store, 1).enabled)
        self.assertTrue(get_settings(store, 2).enabled)


class SanitizeSettingsTests(SimpleTestCase):
    def test_never_raises_on_odd_input(self):
        odd = (
            {}, None, "enabled=1", 3, ["mode"], {"unknown": object()},
            {"title_maintenance": {"a": 1}, "message_development": [1]},
            {"enabled": [], "mode": 5, "title_development": 3.5},
        )
        for data in odd:
            s = sanitize_settings(data)
            self.assertIsInstance(s, SiteModeSettings)
            self.assertFalse(s.enabled)
            self.assertEqual(s.mode, "maintenance")

    def test_enabled_is_coerced(self):
        self.assertTrue(sanitize_settings({"enabled": "on"}).enabled)
        self.assertTrue(sanitize_settings({"enabled": 1}).enabled)
        self.assertFalse(sanitize_settings({"enabled": "0"}).enabled)
        self.assertFalse(sanitize_settings({"enabled": ""}).enabled)
        self.assertFalse(sanitize_settings({}).enabled)

    def test_mode_is_clamped(self):
        self.assertEqual(sanitize_settings({"mode": "Development"}).mode, "development")
        self.assertEqual(sanitize_settings({"mode": "online"}).mode, "maintenance")
        self.assertEqual(sanitize_settings({"mode": ["development"]}).mode, "maintenance")

    def test_titles_become_plain_text(self):
        s = sanitize_settings({"title_maintenance": "  <b>Voltamos</b>\n\tjá  "})
        self.assertEqual(s.title_maintenance, "Voltamos já")

    def test_messages_keep_basic_html_only(self):
        s = sanitize_settings({
            "message_maintenance": '<p onclick="x()">Oi <strong>todos</strong></p><script>alert(1)</script>',
        })
        self.assertIn("<p>Oi <strong>todos</strong></p>", s.message_maintenance)
        self.assertNotIn("<script", s.message_maintenance)
        self.assertNotIn("onclick", s.message_maintenance)

    def test_missing_fields_take_defaults(self):
        s = sanitize_settings({"enabled": True, "title_development": None})
        self.assertEqual(s.title_development, DEFAULT_SETTINGS.title_development)
        self.assertEqual(s.message_maintenance, DEFAULT_SETTINGS.message_maintenance)

    def test_wrongly_typed_texts_take_defaults(self):
        s = sanitize_settings({"title_maintenance": {"a": 1}, "message_development": [1]})
        self.assertEqual(s.title_maintenance, DEFAULT_SETTINGS.title_maintenance)
        self.assertEqual(s.message_development, DEFAULT_SETTINGS.message_development)

    def test_save_then_get_returns_sanitized_input(self):
        store = MemoryStore()
        data = {
            "enabled": "1",
            "mode": "DEVELOPMENT",
            "title_development": "<i>Beta</i>",
            "message_development": "<em>logo</em><iframe src=x></iframe>",
            "extra": "ignored",
        }
        saved = save_settings(store, 1, data)
        self.assertEqual(saved, sanitize_settings(data))
        self.assertEqual(get_settings(store, 1), saved)
        self.assertEqual(saved.title_development, "Beta")
        self.assertNotIn("iframe", saved.message_development)

    def test_helpers(self):
        self.assertEqual(sanitize_key(" Maint-enance_1! "), "maint-enance_1")
        self.assertEqual(sanitize_text(12), "12")


class StatusTests(SimpleTestCase):
    def test_status_follows_enabled_and_mode(self):
        self.assertIs(SiteModeSettings(enabled=False, mode="development").status, SiteStatus.ONLINE)
        self.assertIs(SiteModeSettings(enabled=True).status, SiteStatus.MAINTENANCE)
        self.assertIs(SiteModeSettings(enabled=True, mode="development").status, SiteStatus.DEVELOPMENT)

    def test_labels(self):
        self.assertEqual(SiteStatus.ONLINE.label, "Online")
        self.assertEqual(SiteStatus.MAINTENANCE.label, "Manutenção")
        self.assertEqual(SiteStatus.DEVELOPMENT.color, "#f59e0b")
