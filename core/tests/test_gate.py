from unittest import mock

from django.test import RequestFactory, SimpleTestCase

from core.gate import PASS, Intercept, decide
from core.identity import Identity
from core.modes import SiteModeSettings
from core.rendering import placeholder_content, render_placeholder

ANON = Identity.anonymous()
MEMBER = Identity(is_authenticated=True, has_elevated_capability=False)
OPERATOR = Identity(is_authenticated=True, has_elevated_capability=True)


def external(request):
    return False


def internal(request):
    return True


class DecideTests(SimpleTestCase):
    def setUp(self):
        self.request = RequestFactory().get("/noticias/")
        self.maintenance = SiteModeSettings(enabled=True, mode="maintenance")
        self.development = SiteModeSettings(enabled=True, mode="development")

    def test_online_passes_everyone(self):
        online = SiteModeSettings(enabled=False, mode="development")
        for identity in (ANON, MEMBER, OPERATOR):
            for classify in (external, internal):
                self.assertIs(decide(self.request, online, identity, classify), PASS)

    def test_internal_requests_pass(self):
        online = SiteModeSettings(enabled=False)
        for settings in (self.maintenance, self.development, online):
            for identity in (ANON, MEMBER, OPERATOR):
                self.assertIs(decide(self.request, settings, identity, internal), PASS)

    def test_operators_pass(self):
        self.assertIs(decide(self.request, self.maintenance, OPERATOR, external), PASS)

    def test_visitors_are_intercepted(self):
        for identity in (ANON, MEMBER):
            decision = decide(self.request, self.maintenance, identity, external)
            self.assertIsInstance(decision, Intercept)
            self.assertTrue(decision.intercepted)
            self.assertEqual(decision.response.status_code, 503)

    def test_nothing_rendered_on_pass(self):
        with mock.patch("core.gate.render_placeholder") as render:
            decide(self.request, self.maintenance, ANON, internal)
            decide(self.request, self.maintenance, OPERATOR, external)
        render.assert_not_called()

    def test_uses_real_classifier_by_default(self):
        admin_request = RequestFactory().get("/admin/")
        self.assertIs(decide(admin_request, self.maintenance, ANON), PASS)
        self.assertIsInstance(decide(self.request, self.maintenance, ANON), Intercept)


class PlaceholderTests(SimpleTestCase):
    def body(self, settings):
        return render_placeholder(settings).content.decode()

    def test_headers_for_every_mode(self):
        for mode in ("maintenance", "development"):
            response = render_placeholder(SiteModeSettings(enabled=True, mode=mode))
            self.assertEqual(response.status_code, 503)
            self.assertEqual(response["Retry-After"], "3600")
            self.assertEqual(response["Cache-Control"], "no-store, no-cache, must-revalidate, max-age=0")

    def test_maintenance_page(self):
        settings = SiteModeSettings(enabled=True, title_maintenance="Voltamos logo")
        body = self.body(settings)
        self.assertIn("MANUTENÇÃO", body)
        self.assertNotIn("DESENVOLVIMENTO", body)
        self.assertIn("<title>Voltamos logo</title>", body)
        self.assertIn("<h1>Voltamos logo</h1>", body)
        self.assertIn('<meta name="robots" content="noindex, nofollow">', body)

    def test_development_page(self):
        settings = SiteModeSettings(
            enabled=True, mode="development",
            title_development="Beta fechado", message_development="<p>Em <em>breve</em></p>",
        )
        body = self.body(settings)
        self.assertIn("DESENVOLVIMENTO", body)
        self.assertIn("<title>Beta fechado</title>", body)
        self.assertIn("<p>Em <em>breve</em></p>", body)

    def test_no_way_out(self):
        body = self.body(SiteModeSettings(enabled=True))
        self.assertNotIn("href=", body)
        self.assertNotIn("login", body.lower())
        self.assertNotIn("<script", body)
        self.assertNotIn("<link", body)

    def test_title_escaped_and_message_cleaned(self):
        settings = SiteModeSettings(
            enabled=True,
            title_maintenance="A & B <x>",
            message_maintenance="<p>ok</p><script>steal()</script>",
        )
        body = self.body(settings)
        self.assertIn("<h1>A &amp; B &lt;x&gt;</h1>", body)
        self.assertIn("<p>ok</p>", body)
        self.assertNotIn("<script", body)

    def test_placeholder_content(self):
        settings = SiteModeSettings(enabled=True, mode="development")
        title, message, badge = placeholder_content(settings)
        self.assertEqual(title, settings.title_development)
        self.assertEqual(message, settings.message_development)
        self.assertEqual(badge, "DESENVOLVIMENTO")
