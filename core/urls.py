from django.urls import path

from . import views

# mounted under /admin/ so the gate always lets these through
urlpatterns = [
    path("site-mode/", views.site_mode_settings, name="site_mode_settings"),
    path("site-mode/switch/", views.switch_site_mode, name="site_mode_switch"),
]
