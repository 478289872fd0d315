from rest_framework import serializers

from core.modes import SWITCH_TARGETS


class SiteModeSwitchSerializer(serializers.Serializer):
    mode = serializers.ChoiceField(choices=SWITCH_TARGETS)


class SiteModeSettingsSerializer(serializers.Serializer):
    status = serializers.CharField(source="status.value")
    label = serializers.CharField(source="status.label")
    enabled = serializers.BooleanField()
    mode = serializers.CharField()
    title_maintenance = serializers.CharField()
    message_maintenance = serializers.CharField()
    title_development = serializers.CharField()
    message_development = serializers.CharField()
