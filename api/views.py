import logging

from rest_framework.permissions import BasePermission
from rest_framework.response import Response
from rest_framework.views import APIView

from core.identity import is_admin
from core.modes import get_settings
from core.store import current_tenant_id, get_store
from core.switch import switch_mode

from .serializers import SiteModeSettingsSerializer, SiteModeSwitchSerializer

logger = logging.getLogger(__name__)


class IsSiteOperator(BasePermission):
    def has_permission(self, request, view):
        return is_admin(request.user)


class SiteModeView(APIView):
    """
    GET  -> current status and placeholder settings of this site
    POST {"mode": "online" | "maintenance" | "development"} -> switch
    """
    permission_classes = [IsSiteOperator]

    def get(self, request):
        settings = get_settings(get_store(), current_tenant_id(request))
        return Response(SiteModeSettingsSerializer(settings).data)

    def post(self, request):
        serializer = SiteModeSwitchSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tenant_id = current_tenant_id(request)
        settings = switch_mode(get_store(), tenant_id, serializer.validated_data["mode"])
        logger.info("Site %s is now %s (API, %s)", tenant_id, settings.status.value, request.user)
        return Response(SiteModeSettingsSerializer(settings).data)
