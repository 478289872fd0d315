from django.urls import path
from . import views

urlpatterns = [
    path("site-mode/", views.SiteModeView.as_view(), name="api_site_mode"),
]
