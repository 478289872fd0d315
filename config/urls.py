"""
URL configuration.

Site mode pages sit under /admin/ ahead of the admin site itself, so the
gate treats them like the rest of the admin area.
"""
from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.urls import include, path

from core import views as core_views

urlpatterns = [
    path("", core_views.home, name="index"),
    path("admin/", include("core.urls")),
    path("admin/", admin.site.urls),
    path("api/", include("api.urls")),
    path("accounts/login/", auth_views.LoginView.as_view(template_name="admin/login.html"), name="login"),
    path("accounts/logout/", auth_views.LogoutView.as_view(next_page="index"), name="logout"),
]
