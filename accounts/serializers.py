from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from .services import clean_permission_list


class UserPermissionsSerializer(serializers.Serializer):
    permissions = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=True),
        allow_empty=True,
    )
    allow_all = serializers.BooleanField(read_only=True)
    options = serializers.ListField(child=serializers.CharField(), read_only=True)

    def validate_permissions(self, value):
        cleaned = clean_permission_list(value)
        for entry in cleaned:
            if entry != "*" and not entry.startswith("/"):
                raise serializers.ValidationError(
                    _("Padrão inválido: %(entry)s. Use caminhos iniciados por '/' ou '*'.")
                    % {"entry": entry}
                )
        return cleaned
