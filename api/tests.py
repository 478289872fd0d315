from django.contrib.auth.models import User
from django.core.cache import cache
from django.test import TestCase
from rest_framework.test import APIClient

from core.modes import get_settings
from core.store import OptionStore


class SiteModeApiTests(TestCase):
    url = "/api/site-mode/"

    def setUp(self):
        cache.clear()
        self.client = APIClient()
        self.operator = User.objects.create_user("operador", password="testpass123", is_staff=True)
        self.member = User.objects.create_user("leitor", password="testpass123")

    def test_requires_operator(self):
        self.assertEqual(self.client.get(self.url).status_code, 403)
        self.client.force_login(self.member)
        self.assertEqual(self.client.post(self.url, {"mode": "online"}, format="json").status_code, 403)

    def test_get_status(self):
        self.client.force_login(self.operator)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], "online")
        self.assertEqual(response.data["label"], "Online")
        self.assertEqual(response.data["mode"], "maintenance")
        self.assertIs(response.data["enabled"], False)

    def test_switch(self):
        self.client.force_login(self.operator)
        response = self.client.post(self.url, {"mode": "development"}, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], "development")

        s = get_settings(OptionStore(), 1)
        self.assertEqual((s.enabled, s.mode), (True, "development"))

        self.client.logout()
        self.assertEqual(self.client.get("/").status_code, 503)

    def test_invalid_target(self):
        self.client.force_login(self.operator)
        response = self.client.post(self.url, {"mode": "offline"}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertIn("mode", response.data)
        self.assertFalse(get_settings(OptionStore(), 1).enabled)
